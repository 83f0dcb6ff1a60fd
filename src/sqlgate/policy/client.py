"""HTTP exchange with the policy decision point (OPA data API)."""

from __future__ import annotations

import json
import logging

import requests

from sqlgate.errors import DecodeError, TransportError
from sqlgate.policy.decision import PolicyResponse

logger = logging.getLogger(__name__)

DEFAULT_URI = "http://localhost:8181/v1/data/bad_sql"

_HEADERS = {"Content-Type": "application/json"}


def submit(uri: str, body: bytes, *, timeout: float | None = None) -> PolicyResponse:
    """POST ``body`` to ``uri`` once and decode the decision.

    Raises:
        TransportError: connection failure, timeout, or any status other than 200.
            The body of a non-200 response is never decoded.
        DecodeError: the 200 response does not match ``{"result":{"deny":[...]}}``.
    """
    logger.debug("POST %s (%d bytes, timeout=%s)", uri, len(body), timeout)
    try:
        resp = requests.post(uri, data=body, headers=_HEADERS, timeout=timeout)
    except requests.Timeout as e:
        raise TransportError(f"policy engine at {uri} timed out after {timeout}s") from e
    except requests.RequestException as e:
        raise TransportError(f"policy engine at {uri} is unreachable: {e}") from e

    logger.debug("policy engine answered HTTP %d", resp.status_code)
    if resp.status_code != 200:
        raise TransportError(
            f"responses other than HTTP code 200: {resp.status_code} {resp.reason or ''}".rstrip()
        )
    return decode_response(resp.content)


def decode_response(content: bytes) -> PolicyResponse:
    """Strictly decode a response body. A missing ``deny`` is an error, not "no denials"."""
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"response body is not valid UTF-8: {e}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"response body is not JSON: {e}") from e

    if not isinstance(document, dict):
        raise DecodeError(f"expected a JSON object, got {type(document).__name__}")

    if "result" not in document:
        # OPA answers {} when the requested document is undefined.
        raise DecodeError(
            "response has no 'result': the policy decision is undefined, "
            "check the package path in the URI"
        )
    result = document["result"]
    if not isinstance(result, dict):
        raise DecodeError(f"'result' must be an object, got {type(result).__name__}")

    if "deny" not in result:
        raise DecodeError("response 'result' has no 'deny' key")
    deny = result["deny"]
    if not isinstance(deny, list):
        raise DecodeError(f"'deny' must be an array, got {type(deny).__name__}")
    for i, entry in enumerate(deny):
        if not isinstance(entry, str):
            raise DecodeError(f"'deny[{i}]' must be a string, got {type(entry).__name__}")

    decision_id = document.get("decision_id")
    if decision_id is not None and not isinstance(decision_id, str):
        decision_id = str(decision_id)

    return PolicyResponse(deny=tuple(deny), decision_id=decision_id)
