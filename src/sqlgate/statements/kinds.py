"""Top-level statement kinds accepted by the parser adapter.

sqlglot happily parses a bare expression (``foo``, ``1 + 1``, ``'abc'``) as a
top-level "statement". Only the closed set below reaches the policy engine;
anything else is a syntax error.
"""

from __future__ import annotations

import logging

from sqlglot import exp
from sqlglot.dialects.dialect import Dialect
from sqlglot.errors import TokenError
from sqlglot.tokens import TokenType

from sqlgate.errors import SqlSyntaxError

logger = logging.getLogger(__name__)


def _types(*names: str) -> tuple[type[exp.Expression], ...]:
    # Class names move between sqlglot releases (e.g. AlterTable -> Alter).
    return tuple(t for t in (getattr(exp, n, None) for n in names) if isinstance(t, type))


_QUERY_TYPES = _types("Query", "Select", "Union", "Intersect", "Except", "Subquery", "Values")
_DML_TYPES = _types("DML", "Insert", "Update", "Delete", "Merge", "Copy")
_DDL_TYPES = _types("DDL", "Create", "Drop", "Alter", "AlterTable", "TruncateTable")
_ADMIN_TYPES = _types(
    "Command", "Set", "Use", "Transaction", "Commit", "Rollback", "Pragma",
    "Describe", "Grant", "Revoke", "Show", "Analyze", "Kill", "Cache", "Uncache", "Refresh",
)

STATEMENT_TYPES = _QUERY_TYPES + _DML_TYPES + _DDL_TYPES + _ADMIN_TYPES

_BRACKETS = {
    TokenType.L_PAREN: TokenType.R_PAREN,
    TokenType.L_BRACKET: TokenType.R_BRACKET,
    TokenType.L_BRACE: TokenType.R_BRACE,
}
_CLOSERS = frozenset(_BRACKETS.values())


def check_statement(expression: exp.Expression, *, dialect: str | None = None) -> None:
    """Raise SqlSyntaxError unless ``expression`` is a top-level SQL statement.

    ``Command`` nodes keep their arguments as opaque text, so that text is
    re-tokenized and must at least have balanced brackets.
    """
    if not isinstance(expression, STATEMENT_TYPES):
        raise SqlSyntaxError(
            f"expected a SQL statement, found {type(expression).__name__}: {expression.sql()}"
        )
    if isinstance(expression, exp.Command):
        _check_command(expression, dialect)


def _check_command(expression: exp.Command, dialect: str | None) -> None:
    text = expression.sql(dialect=dialect)
    try:
        tokens = Dialect.get_or_raise(dialect).tokenize(text)
    except TokenError as e:
        raise SqlSyntaxError(f"invalid statement {text!r}: {e}") from e

    stack: list[TokenType] = []
    for token in tokens:
        if token.token_type in _BRACKETS:
            stack.append(_BRACKETS[token.token_type])
        elif token.token_type in _CLOSERS:
            if not stack or stack.pop() != token.token_type:
                raise SqlSyntaxError(f"unbalanced brackets in statement {text!r}")
    if stack:
        raise SqlSyntaxError(f"unbalanced brackets in statement {text!r}")

    logger.warning("statement is not fully modelled and is submitted as opaque text: %s", text)
