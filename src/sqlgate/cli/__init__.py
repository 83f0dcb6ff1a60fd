"""CLI entry point for `sqlgate`."""

from __future__ import annotations

import click

from sqlgate.cli.check import check
from sqlgate.cli.config import config
from sqlgate.cli.parse import parse
from sqlgate.logconfig import configure_logging


@click.group()
@click.version_option(package_name="sqlgate")
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline diagnostics to stderr.")
def main(verbose: bool) -> None:
    """sqlgate: block dangerous SQL with an OPA policy decision point."""
    configure_logging(verbose)


main.add_command(check)
main.add_command(parse)
main.add_command(config)
