"""Conditions that show the expected and the tested value in their description."""

from __future__ import annotations

import logging
from typing import Any, Callable

from checkmark.conditions.base import (
    Condition,
    EvalState,
    Failed,
    Matched,
    NotEvaluated,
    Outcome,
)
from checkmark.conditions.labels import StateLabels, symbol_labels
from checkmark.errors import ConditionConfigError

logger = logging.getLogger(__name__)

Formatter = Callable[[Any], Any]


def format_value(formatter: Formatter | None, value: Any) -> str:
    """Return the display text for *value*, through *formatter* when given."""
    if formatter is None:
        return str(value)
    return str(formatter(value))


class StatefulCondition(Condition):
    """Condition wrapping a binary predicate ``(given, expected) -> bool``.

    The description tracks the last evaluation:

        [ ] shorter than <100>
        [✓] shorter than <100>
        [✗] not be longer <4 (max size)> but was <5 (original word: foooo)>

    Each call to ``evaluate`` replaces the stored outcome, so earlier
    renderings are gone after a later evaluation. The outcome is only
    replaced once the predicate and formatters have all returned; if any of
    them raises, the exception propagates and the previous description stays.

    Instances are not safe to evaluate from several threads at once:
    evaluation mutates the stored outcome and callers must synchronize
    externally if they share a condition.
    """

    def __init__(
        self,
        expected_value: Any,
        predicate: Callable[[Any, Any], bool],
        description: str = "matches",
        expected_formatter: Formatter | None = None,
        given_formatter: Formatter | None = None,
        state_labels: StateLabels | None = None,
    ):
        if predicate is None:
            raise ConditionConfigError("The condition predicate should not be None")
        self._expected_value = expected_value
        self._check = predicate
        self._check_description = description
        self._expected_formatter = expected_formatter
        self._given_formatter = given_formatter
        self._state_labels = state_labels or symbol_labels
        super().__init__(description=description)
        self._outcome = NotEvaluated(self._render(EvalState.NOT_EXECUTED))

    @property
    def expected_value(self) -> Any:
        return self._expected_value

    @property
    def check_description(self) -> str:
        return self._check_description

    def described_as(self, description: str) -> StatefulCondition:
        """Replace the check description and re-render the current state."""
        self._check_description = description
        self._outcome = NotEvaluated(self._render(EvalState.NOT_EXECUTED))
        return self

    def matches(self, value: Any) -> bool:
        result = bool(self._check(value, self._expected_value))
        outcome: Outcome
        if result:
            outcome = Matched(self._render(EvalState.MATCHED))
        else:
            outcome = Failed(self._render(EvalState.FAILED, value))
        self._outcome = outcome
        logger.debug(f"{self._check_description}: {outcome.state.value}")
        return result

    def _render(self, state: EvalState, given: Any = None) -> str:
        expected = format_value(self._expected_formatter, self._expected_value)
        text = f"{self._state_labels(state)}{self._check_description} <{expected}>"
        if state is EvalState.FAILED:
            text += f" but was <{format_value(self._given_formatter, given)}>"
        return text
