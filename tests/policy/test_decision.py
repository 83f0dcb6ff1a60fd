"""Test decision rendering."""

from sqlgate.policy import NO_PROBLEM_MESSAGE, PolicyResponse, interpret


def test_empty_deny_renders_no_problem() -> None:
    assert interpret(PolicyResponse(deny=())) == ["There is no problem with SQL"]
    assert NO_PROBLEM_MESSAGE == "There is no problem with SQL"


def test_entries_in_engine_order() -> None:
    response = PolicyResponse(deny=("rule A violated", "rule B violated"))
    assert interpret(response) == ["rule A violated", "rule B violated"]


def test_no_deduplication_or_sorting() -> None:
    response = PolicyResponse(deny=("z", "a", "z"))
    assert interpret(response) == ["z", "a", "z"]


def test_denied_flag() -> None:
    assert not PolicyResponse(deny=()).denied
    assert PolicyResponse(deny=("x",)).denied
