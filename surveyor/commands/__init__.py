"""CLI command definitions for surveyor."""

from pathlib import Path

import click

from surveyor import setup_logging
from surveyor.commands.input import input_command
from surveyor.commands.select import select
from surveyor.paths import get_config_path


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug output for troubleshooting")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: $SURVEYOR_CONFIG or ~/.config/surveyor/config.yaml)",
)
@click.pass_context
def cli(ctx, debug, config_path):
    """Ask interactive questions from the shell."""
    setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = config_path or get_config_path()


cli.add_command(select)
cli.add_command(input_command)

__all__ = ["cli"]


if __name__ == "__main__":
    cli()
