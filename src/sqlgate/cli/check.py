"""The `check` command: parse SQL and ask the policy engine for a decision."""

from __future__ import annotations

import click

from sqlgate.cli._output import format_decision
from sqlgate.cli._shared import EXIT_DENIED, fail, resolve_sql
from sqlgate.config import load_settings
from sqlgate.errors import GateError
from sqlgate.policy import evaluate
from sqlgate.statements import parse_statements


@click.command()
@click.argument("sql", required=False, default=None)
@click.option("-f", "--file", "is_file", is_flag=True, help="Check the SQL file at path SQL.")
@click.option("--from-stdin", is_flag=True, help="Read SQL from stdin instead of argument.")
@click.option(
    "--uri", default=None, envvar="SQLGATE_URI", help="Policy engine URI (OPA data API).",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    envvar="SQLGATE_TIMEOUT",
    help="Seconds to wait for the policy engine.",
)
@click.option(
    "--dialect", default=None, envvar="SQLGATE_DIALECT", help="SQL dialect (default: generic).",
)
@click.option("--debug", is_flag=True, help="Show parse results.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format.",
)
def check(
    sql: str | None,
    is_file: bool,
    from_stdin: bool,
    uri: str | None,
    timeout: float | None,
    dialect: str | None,
    debug: bool,
    output_format: str,
) -> None:
    """Check SQL against the policy engine.

    Exits 0 when nothing is denied, 1 when the policy engine denies the
    batch, and 2 on any fatal error.
    """
    try:
        settings = load_settings()
        text = resolve_sql(sql, is_file=is_file, from_stdin=from_stdin)
        records = parse_statements(text, dialect=dialect or settings.dialect, debug=debug)
        response = evaluate(
            records,
            uri=uri or settings.uri,
            timeout=timeout if timeout is not None else settings.timeout,
        )
    except GateError as e:
        fail(e)

    click.echo(format_decision(response, statements=len(records), output_format=output_format))
    if response.denied:
        raise SystemExit(EXIT_DENIED)
