"""Command aliases.

Decorate a command with @alias("co") and register it with
register_with_aliases(); the alias names resolve to the same command
object and are listed next to the primary name in help output.
"""

from collections.abc import Callable

import click

_ALIASES_ATTR = "_flow_aliases"


def alias(*names: str) -> Callable[[click.Command], click.Command]:
    """Attach alias names to a click command."""

    def decorator(cmd: click.Command) -> click.Command:
        setattr(cmd, _ALIASES_ATTR, tuple(names))
        return cmd

    return decorator


def get_aliases(cmd: click.Command) -> tuple[str, ...]:
    return getattr(cmd, _ALIASES_ATTR, ())


def register_with_aliases(group: click.Group, cmd: click.Command) -> None:
    """Add cmd to group under its own name and every alias."""
    group.add_command(cmd)
    for name in get_aliases(cmd):
        group.add_command(cmd, name=name)


class AliasedGroup(click.Group):
    """Group that lists each command once, with its aliases in parentheses."""

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        rows: list[tuple[str, str]] = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden or name != cmd.name:
                continue
            aliases = get_aliases(cmd)
            label = f"{name} ({', '.join(aliases)})" if aliases else name
            rows.append((label, cmd.get_short_help_str(limit=formatter.width)))

        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)
