# ABOUTME: CLI package for shelfparse, built on Click.
# ABOUTME: Defines the root command group, logging setup and registers subcommands.

import click

from shelfparse.cli.commands import parse_cmd, scan_cmd
from shelfparse.logging_setup import LOG_LEVELS, setup_logging


@click.group()
@click.version_option(package_name="shelfparse")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Verbosity of diagnostic output on stderr.",
)
def cli(log_level: str) -> None:
    """shelfparse - derive series, volume and chapter from library files."""
    setup_logging(log_level)


cli.add_command(parse_cmd.parse)
cli.add_command(scan_cmd.scan)
