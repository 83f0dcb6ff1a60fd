"""Parsed statement record handed from the parser to the request builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParseResult:
    """One top-level SQL statement.

    ``query`` is sqlglot's re-rendering of the statement, not the source
    substring. ``ast`` is the canonical tagged tree (see ``canonical``).
    """

    query: str
    ast: dict[str, Any]

    @property
    def kind(self) -> str:
        """Tag of the top-level variant, e.g. ``"Select"`` or ``"Delete"``."""
        return next(iter(self.ast))

    def to_dict(self) -> dict[str, Any]:
        return {"query": self.query, "ast": self.ast}
