"""Shared helpers for the check and parse commands."""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

import click

from sqlgate.errors import GateError
from sqlgate.source import read_sql, read_stdin

logger = logging.getLogger(__name__)

EXIT_DENIED = 1
EXIT_FATAL = 2


def resolve_sql(sql: str | None, *, is_file: bool, from_stdin: bool) -> str:
    """Resolve SQL from the positional argument, a file, or stdin. Exactly one source."""
    if sql is not None and from_stdin:
        raise click.UsageError("Provide SQL as an argument or --from-stdin, not both.")
    if from_stdin:
        if is_file:
            raise click.UsageError("--file and --from-stdin cannot be combined.")
        if sys.stdin.isatty():
            raise click.UsageError("--from-stdin requires piped input (stdin is a terminal).")
        return read_stdin(click.get_binary_stream("stdin"))
    if sql is None:
        raise click.UsageError("Missing argument 'SQL'. Provide SQL or use --from-stdin.")

    text = read_sql(sql, is_file=is_file)
    logger.debug("read %d characters of SQL from %s", len(text), "file" if is_file else "argument")
    return text


def fail(error: GateError) -> NoReturn:
    """Report a fatal error with its stage and exit with EXIT_FATAL."""
    click.echo(f"error: {error.stage}: {error}", err=True)
    raise SystemExit(EXIT_FATAL) from error
