"""Fluent construction of stateful conditions.

Example:
    >>> cond = (
    ...     check(lambda given, expected: len(given) < expected)
    ...     .with_expected_value(4)
    ...     .with_description("not be longer")
    ...     .with_expected_formatter(lambda i: f"{i} (max size)")
    ...     .build()
    ... )
    >>> str(cond)
    '[ ] not be longer <4 (max size)>'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from checkmark.conditions.labels import StateLabels
from checkmark.conditions.stateful import Formatter, StatefulCondition
from checkmark.errors import ConditionConfigError

Predicate = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class ConditionConfig:
    """Everything needed to construct a StatefulCondition.

    Attributes:
        predicate: Comparison ``(given, expected) -> bool``.
        expected_value: Value the tested value is compared against; may be None.
        description: Verb phrase such as "is equal to" or "shorter than".
        expected_formatter: Optional display transform for the expected value.
        given_formatter: Optional display transform for the tested value,
            only used when the condition fails.
        state_labels: Optional state-label formatter; symbol labels when None.
    """

    predicate: Predicate
    expected_value: Any = None
    description: str = "matches"
    expected_formatter: Formatter | None = None
    given_formatter: Formatter | None = None
    state_labels: StateLabels | None = None


class ConditionBuilder:
    """Accumulates condition settings; every setter overwrites the previous value."""

    def __init__(self) -> None:
        self._predicate: Predicate | None = None
        self._expected_value: Any = None
        self._description = "matches"
        self._expected_formatter: Formatter | None = None
        self._given_formatter: Formatter | None = None
        self._state_labels: StateLabels | None = None

    def check_that(self, predicate: Predicate) -> ConditionBuilder:
        self._predicate = predicate
        return self

    def with_expected_value(self, expected: Any) -> ConditionBuilder:
        self._expected_value = expected
        return self

    def with_description(self, description: str) -> ConditionBuilder:
        self._description = description
        return self

    def with_expected_formatter(self, formatter: Formatter | None) -> ConditionBuilder:
        self._expected_formatter = formatter
        return self

    def with_given_formatter(self, formatter: Formatter | None) -> ConditionBuilder:
        self._given_formatter = formatter
        return self

    def with_state_labels(self, state_labels: StateLabels | None) -> ConditionBuilder:
        self._state_labels = state_labels
        return self

    def to_config(self) -> ConditionConfig:
        """Freeze the current settings.

        Raises ConditionConfigError if no predicate was supplied.
        """
        if self._predicate is None:
            raise ConditionConfigError(
                f"No predicate supplied for condition '{self._description}'"
            )
        return ConditionConfig(
            predicate=self._predicate,
            expected_value=self._expected_value,
            description=self._description,
            expected_formatter=self._expected_formatter,
            given_formatter=self._given_formatter,
            state_labels=self._state_labels,
        )

    def build(self) -> StatefulCondition:
        return from_config(self.to_config())


def from_config(config: ConditionConfig) -> StatefulCondition:
    return StatefulCondition(
        config.expected_value,
        config.predicate,
        config.description,
        expected_formatter=config.expected_formatter,
        given_formatter=config.given_formatter,
        state_labels=config.state_labels,
    )


def _is_null(given: Any, expected: Any) -> bool:
    return given is None


def _is_not_null(given: Any, expected: Any) -> bool:
    return given is not None


def _is_equal(given: Any, expected: Any) -> bool:
    return given == expected


def is_null_check() -> ConditionBuilder:
    return (
        ConditionBuilder()
        .check_that(_is_null)
        .with_description("is null")
        .with_expected_value(None)
    )


def is_not_null_check() -> ConditionBuilder:
    return (
        ConditionBuilder()
        .check_that(_is_not_null)
        .with_description("is not null")
        .with_expected_value(None)
    )


def is_equal_to_check(expected: Any) -> ConditionBuilder:
    return (
        ConditionBuilder()
        .check_that(_is_equal)
        .with_description("is equal to")
        .with_expected_value(expected)
    )


def is_equal_check() -> ConditionBuilder:
    """Equality check whose expected value is supplied later."""
    return ConditionBuilder().check_that(_is_equal).with_description("is equal to")


def check(predicate: Predicate) -> ConditionBuilder:
    return ConditionBuilder().check_that(predicate)


def check_expected(predicate: Predicate, expected: Any) -> ConditionBuilder:
    return ConditionBuilder().check_that(predicate).with_expected_value(expected)


def verbose(
    expected: Any,
    predicate: Predicate,
    description: str = "matches",
    expected_formatter: Formatter | None = None,
    given_formatter: Formatter | None = None,
) -> StatefulCondition:
    """Build a condition in one call, with symbol labels."""
    return StatefulCondition(
        expected,
        predicate,
        description,
        expected_formatter=expected_formatter,
        given_formatter=given_formatter,
    )


def descriptive(
    expected: Any, predicate: Predicate, description: str = ""
) -> StatefulCondition:
    return StatefulCondition(expected, predicate, description)
