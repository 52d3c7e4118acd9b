"""Base data structures for describable conditions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from checkmark.errors import ConditionConfigError


class EvalState(Enum):
    NOT_EXECUTED = "not_executed"
    MATCHED = "matched"
    FAILED = "failed"


@dataclass(frozen=True)
class NotEvaluated:
    """Outcome of a condition that has not been evaluated yet."""

    text: str
    state: EvalState = EvalState.NOT_EXECUTED


@dataclass(frozen=True)
class Matched:
    """Outcome of an evaluation whose predicate returned true."""

    text: str
    state: EvalState = EvalState.MATCHED


@dataclass(frozen=True)
class Failed:
    """Outcome of an evaluation whose predicate returned false."""

    text: str
    state: EvalState = EvalState.FAILED


Outcome = NotEvaluated | Matched | Failed


class Condition:
    """A named, describable predicate over a single value.

    Subclasses override ``matches``; the description is whatever was last
    stored in ``_outcome`` (or set through ``described_as``).
    """

    def __init__(
        self,
        predicate: Callable[[Any], bool] | None = None,
        description: str = "",
    ):
        if predicate is None and type(self).matches is Condition.matches:
            raise ConditionConfigError("The condition predicate should not be None")
        self._predicate = predicate
        self._outcome: Outcome = NotEvaluated(description)

    @property
    def description(self) -> str:
        return self._outcome.text

    @property
    def state(self) -> EvalState:
        return self._outcome.state

    def described_as(self, description: str) -> Condition:
        """Replace the description text, keeping the current state."""
        self._outcome = type(self._outcome)(description)
        return self

    def matches(self, value: Any) -> bool:
        result = bool(self._predicate(value))
        text = self._outcome.text
        self._outcome = Matched(text) if result else Failed(text)
        return result

    def evaluate(self, value: Any) -> bool:
        return self.matches(value)

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"
