"""Tests for StatefulCondition rendering and state transitions."""

import pytest

from checkmark.conditions import (
    EvalState,
    StatefulCondition,
    format_value,
    legacy_labels,
    verbose,
)
from checkmark.errors import ConditionConfigError


def _max_size(i):
    return f"{i} (max size)"


def _original_word(s):
    return f"{len(s)} (original word: {s})"


# --- rendering ---


def test_initial_rendering(shorter_than):
    cond = StatefulCondition(100, shorter_than, "shorter than")
    assert str(cond) == "[ ] shorter than <100>"
    assert cond.state is EvalState.NOT_EXECUTED


def test_match_rendering(shorter_than):
    cond = verbose(100, shorter_than, "shorter than")
    assert cond.evaluate("foooo") is True
    assert str(cond) == "[✓] shorter than <100>"
    assert "but was" not in str(cond)
    assert cond.state is EvalState.MATCHED


def test_failure_rendering_with_formatters(shorter_than):
    cond = verbose(4, shorter_than, "not be longer", _max_size, _original_word)
    assert cond.evaluate("foooo") is False
    assert str(cond) == (
        "[✗] not be longer <4 (max size)> but was <5 (original word: foooo)>"
    )
    assert cond.state is EvalState.FAILED


def test_failure_rendering_uses_raw_value_without_formatter(shorter_than):
    cond = verbose(4, shorter_than, "not be longer")
    cond.evaluate("foooo")
    assert str(cond) == "[✗] not be longer <4> but was <foooo>"


def test_expected_formatter_applies_before_evaluation(shorter_than):
    cond = verbose(4, shorter_than, "not be longer", expected_formatter=_max_size)
    assert str(cond) == "[ ] not be longer <4 (max size)>"


def test_absent_expected_value_renders_none():
    cond = StatefulCondition(None, lambda given, expected: given is None, "is null")
    assert str(cond) == "[ ] is null <None>"


def test_default_description_is_matches():
    cond = StatefulCondition(3, lambda given, expected: given == expected)
    assert cond.description == "[ ] matches <3>"


def test_legacy_labels(shorter_than):
    cond = StatefulCondition(100, shorter_than, "shorter than", state_labels=legacy_labels)
    assert str(cond) == "[NOT EXECUTED] shorter than <100>"
    cond.evaluate("foooo")
    assert str(cond) == "[OK] shorter than <100>"
    cond.evaluate("x" * 200)
    assert str(cond) == f"[FAILED] shorter than <100> but was <{'x' * 200}>"


def test_custom_state_labels(shorter_than):
    cond = StatefulCondition(
        100, shorter_than, "shorter than", state_labels=lambda s: f"{s.name}: "
    )
    assert str(cond) == "NOT_EXECUTED: shorter than <100>"
    cond.evaluate("foooo")
    assert str(cond) == "MATCHED: shorter than <100>"


# --- state handling ---


def test_rerender_without_evaluation_is_stable(shorter_than):
    cond = verbose(4, shorter_than, "not be longer")
    cond.evaluate("foooo")
    assert str(cond) == str(cond)
    assert cond.description == str(cond)


def test_second_evaluation_overwrites_first(shorter_than):
    cond = verbose(4, shorter_than, "not be longer")
    assert cond.evaluate("foooo") is False
    assert cond.evaluate("foo") is True
    assert str(cond) == "[✓] not be longer <4>"

    assert cond.evaluate("barbaz") is False
    assert str(cond) == "[✗] not be longer <4> but was <barbaz>"
    assert str(cond).count("but was") == 1


def test_predicate_error_propagates_and_keeps_state(shorter_than):
    cond = verbose(4, shorter_than, "not be longer")
    cond.evaluate("foo")
    before = str(cond)

    with pytest.raises(TypeError):
        cond.evaluate(12)

    assert str(cond) == before
    assert cond.state is EvalState.MATCHED


def test_given_formatter_error_propagates_and_keeps_state(shorter_than):
    def broken(value):
        raise RuntimeError("formatter exploded")

    cond = verbose(4, shorter_than, "not be longer", given_formatter=broken)
    with pytest.raises(RuntimeError, match="formatter exploded"):
        cond.evaluate("foooo")

    assert str(cond) == "[ ] not be longer <4>"
    assert cond.state is EvalState.NOT_EXECUTED


def test_truthy_predicate_result_is_coerced_to_bool():
    cond = StatefulCondition("o", lambda given, expected: given.count(expected), "contains")
    assert cond.evaluate("foooo") is True


def test_missing_predicate_raises():
    with pytest.raises(ConditionConfigError):
        StatefulCondition(1, None)


def test_described_as_replaces_check_description(shorter_than):
    cond = verbose(100, shorter_than, "shorter than").described_as("fits within")
    assert str(cond) == "[ ] fits within <100>"
    assert cond.check_description == "fits within"
    assert cond.expected_value == 100


# --- format_value ---


def test_format_value_without_formatter():
    assert format_value(None, 42) == "42"
    assert format_value(None, None) == "None"


def test_format_value_with_formatter():
    assert format_value(lambda v: v * 2, 21) == "42"
