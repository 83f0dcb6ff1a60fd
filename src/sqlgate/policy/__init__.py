"""Policy evaluation: build the request, submit it, interpret the decision."""

from __future__ import annotations

from collections.abc import Sequence

from sqlgate.policy.client import DEFAULT_URI, decode_response, submit
from sqlgate.policy.decision import NO_PROBLEM_MESSAGE, PolicyResponse, interpret
from sqlgate.policy.request import build_request
from sqlgate.statements import ParseResult

__all__ = [
    "DEFAULT_URI",
    "NO_PROBLEM_MESSAGE",
    "PolicyResponse",
    "build_request",
    "decode_response",
    "evaluate",
    "interpret",
    "submit",
]


def evaluate(
    records: Sequence[ParseResult],
    *,
    uri: str = DEFAULT_URI,
    timeout: float | None = None,
) -> PolicyResponse:
    """Submit all records as one batch and return the decoded decision."""
    return submit(uri, build_request(records), timeout=timeout)
