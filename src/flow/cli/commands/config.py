import click

from flow.core.config_store import get_config_keys, parse_config_value
from flow.core.context import FlowContext
from flow.output import machine_output, user_output


def _format_config_value(value: object) -> str:
    """Format a config value for display."""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


@click.group("config")
def config_group() -> None:
    """Manage flow configuration."""


@config_group.command("keys")
def config_keys() -> None:
    """List all available configuration keys with descriptions."""
    formatter = click.HelpFormatter()
    formatter.write_dl(list(get_config_keys().items()))
    user_output(formatter.getvalue().rstrip())


@config_group.command("list")
@click.pass_obj
def config_list(ctx: FlowContext) -> None:
    """Print configuration keys and their effective values."""
    user_output(click.style(f"Configuration ({ctx.config_store.path()}):", bold=True))
    for key in get_config_keys():
        value = getattr(ctx.config, key)
        machine_output(f"{key}={_format_config_value(value)}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: FlowContext, key: str) -> None:
    """Print the value of a given configuration key."""
    if key not in get_config_keys():
        user_output(f"Invalid key: {key}")
        raise SystemExit(1)
    machine_output(_format_config_value(getattr(ctx.config, key)))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: FlowContext, key: str, value: str) -> None:
    """Update configuration with a value for the given key."""
    try:
        parsed = parse_config_value(key, value)
    except ValueError as e:
        user_output(str(e))
        raise SystemExit(1) from None

    ctx.config_store.set_value(key, parsed)
    user_output(f"Set {key}={_format_config_value(parsed)}")
