"""Policy decisions: the decoded response and how it is presented."""

from __future__ import annotations

from dataclasses import dataclass

NO_PROBLEM_MESSAGE = "There is no problem with SQL"


@dataclass(frozen=True)
class PolicyResponse:
    """Deny messages for the whole submitted batch.

    Entries are free-form strings from the rule set and carry no statement
    index, so they cannot be mapped back to individual records.
    """

    deny: tuple[str, ...]
    decision_id: str | None = None

    @property
    def denied(self) -> bool:
        return bool(self.deny)


def interpret(response: PolicyResponse) -> list[str]:
    """Lines to present: each deny entry verbatim, or the no-problem message."""
    if not response.deny:
        return [NO_PROBLEM_MESSAGE]
    return list(response.deny)
