"""Serialize parsed statements into the policy engine's request envelope."""

from __future__ import annotations

import json
from collections.abc import Iterable

from sqlgate.statements import ParseResult


def request_document(records: Iterable[ParseResult]) -> dict:
    return {"input": [r.to_dict() for r in records]}


def build_request(records: Iterable[ParseResult]) -> bytes:
    """Return the compact UTF-8 JSON body ``{"input":[{"query":...,"ast":...}]}``.

    Record order is preserved. An empty sequence gives ``{"input":[]}``.
    """
    body = json.dumps(request_document(records), separators=(",", ":"), ensure_ascii=False)
    return body.encode("utf-8")
