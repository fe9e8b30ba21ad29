import importlib.metadata

import click

from flow.output import machine_output

DISTRIBUTION_NAME = "flow-cli"


def get_current_version() -> str:
    """Get the currently installed version of flow."""
    return importlib.metadata.version(DISTRIBUTION_NAME)


@click.command("version")
def version_cmd() -> None:
    """Report the current version of flow."""
    machine_output(get_current_version())
