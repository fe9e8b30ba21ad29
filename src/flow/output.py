"""Output helpers shared by commands and gateways.

User-facing messages go to stderr so stdout stays clean for values that
scripts consume.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Print a user-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Print a machine-readable value to stdout."""
    click.echo(message, nl=nl)
