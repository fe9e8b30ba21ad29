import logging

import click

from flow.cli.alias import AliasedGroup, register_with_aliases
from flow.cli.commands.branch_from_clipboard import branch_from_clipboard_cmd
from flow.cli.commands.checkout import checkout_cmd
from flow.cli.commands.clone import clone_cmd
from flow.cli.commands.config import config_group
from flow.cli.commands.version import DISTRIBUTION_NAME, version_cmd
from flow.core.context import create_context
from flow.output import user_output

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(cls=AliasedGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name=DISTRIBUTION_NAME)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print git mutations instead of running them")
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool) -> None:
    """flow is CLI to do things fast."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run)
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None


# Commands with @alias decorators use register_with_aliases() to auto-register aliases
register_with_aliases(cli, branch_from_clipboard_cmd)  # Has @alias("branchFromClipboard")
register_with_aliases(cli, checkout_cmd)  # Has @alias("co", "gitCheckout")
cli.add_command(clone_cmd)
cli.add_command(config_group)
cli.add_command(version_cmd)


def main() -> None:
    """CLI entry point used by the `flow` console script."""
    cli()
