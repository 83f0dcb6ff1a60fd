"""Statement parser adapter: SQL text -> ordered ParseResult records."""

from __future__ import annotations

import json
import logging

import click
import sqlglot

from sqlgate.errors import SqlSyntaxError
from sqlgate.statements._types import ParseResult
from sqlgate.statements.canonical import to_canonical
from sqlgate.statements.kinds import check_statement

__all__ = ["ParseResult", "parse_statements", "render_parse_dump", "to_canonical"]

logger = logging.getLogger(__name__)


def parse_statements(
    text: str,
    *,
    dialect: str | None = None,
    debug: bool = False,
) -> list[ParseResult]:
    """Split ``text`` into statements and wrap each one as a ParseResult.

    Args:
        text: Normalized SQL, possibly holding several ``;``-separated statements.
        dialect: sqlglot dialect name. None is sqlglot's generic dialect.
        debug: Echo the parsed trees to stdout before returning.

    Returns:
        One record per top-level statement, in source order. Whitespace or
        comment-only input yields an empty list.

    Raises:
        SqlSyntaxError: the text does not parse, or a top-level chunk is a bare
            expression rather than a statement. No partial result is returned.
    """
    try:
        expressions = sqlglot.parse(text, dialect=dialect)
    except sqlglot.errors.SqlglotError as e:
        raise SqlSyntaxError(str(e)) from e

    # sqlglot yields None for empty chunks (trailing semicolons, bare comments)
    statements = [e for e in expressions if e is not None]
    for statement in statements:
        check_statement(statement, dialect=dialect)

    records = [
        ParseResult(query=statement.sql(dialect=dialect), ast=to_canonical(statement))
        for statement in statements
    ]
    logger.debug("parsed %d statement(s) with dialect %s", len(records), dialect or "generic")

    if debug:
        click.echo(render_parse_dump(records))
    return records


def render_parse_dump(records: list[ParseResult]) -> str:
    """Human-readable dump of every parsed tree."""
    return "Parse Result: " + json.dumps([r.ast for r in records], indent=2, ensure_ascii=False)
