"""The `parse` command: show the request body without contacting the policy engine."""

from __future__ import annotations

import click

from sqlgate.cli._output import format_request
from sqlgate.cli._shared import fail, resolve_sql
from sqlgate.config import load_settings
from sqlgate.errors import GateError
from sqlgate.statements import parse_statements


@click.command()
@click.argument("sql", required=False, default=None)
@click.option("-f", "--file", "is_file", is_flag=True, help="Parse the SQL file at path SQL.")
@click.option("--from-stdin", is_flag=True, help="Read SQL from stdin instead of argument.")
@click.option(
    "--dialect", default=None, envvar="SQLGATE_DIALECT", help="SQL dialect (default: generic).",
)
def parse(sql: str | None, is_file: bool, from_stdin: bool, dialect: str | None) -> None:
    """Print the policy input that `check` would submit for SQL."""
    try:
        settings = load_settings()
        text = resolve_sql(sql, is_file=is_file, from_stdin=from_stdin)
        records = parse_statements(text, dialect=dialect or settings.dialect)
    except GateError as e:
        fail(e)
    click.echo(format_request(records))
