"""Output formatting for CLI commands."""

from __future__ import annotations

import json

from sqlgate.policy import PolicyResponse, interpret
from sqlgate.policy.request import request_document
from sqlgate.statements import ParseResult


def format_decision(
    response: PolicyResponse,
    *,
    statements: int,
    output_format: str = "text",
) -> str:
    if output_format == "json":
        data = {
            "decision": "deny" if response.denied else "allow",
            "deny": list(response.deny),
            "statements": statements,
            "decision_id": response.decision_id,
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
    return "\n".join(interpret(response))


def format_request(records: list[ParseResult]) -> str:
    """Pretty-print the request body exactly as it would be submitted."""
    return json.dumps(request_document(records), indent=2, ensure_ascii=False)
