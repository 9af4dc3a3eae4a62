"""Command-line entry point for hephy-limits.

``deis-limits`` forwards its arguments to the ``limits`` router with a
DryRunCommander, which prints the request that would be sent to the
platform instead of sending it.
"""

import logging
import sys

import click

from . import __version__
from .commander import DryRunCommander
from .config import LOG_FORMAT, OUTPUT_FORMATS, get_log_level, get_output_format
from .exceptions import HephyLimitsError
from .limits_cli import limits


@click.command(
    context_settings={
        "help_option_names": ["--help"],
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@click.version_option(version=__version__)
@click.option(
    "--output",
    "-o",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format for rendered requests (default: $DEIS_LIMITS_OUTPUT or yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
def cli(output: str | None, verbose: bool, argv: tuple[str, ...]) -> None:
    """Manage CPU and memory limits of application processes.

    \b
    Examples:
      deis-limits limits:list -a myapp
      deis-limits limits:set web=2G db=1G/2G
      deis-limits limits:set --cpu cmd=500m
      deis-limits limits:unset --cpu web worker
    """
    try:
        logging.basicConfig(level=get_log_level(verbose), format=LOG_FORMAT)
        commander = DryRunCommander(output=get_output_format(output))
        limits(list(argv), commander)
    except HephyLimitsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
