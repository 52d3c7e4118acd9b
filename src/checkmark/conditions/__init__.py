"""Describable, composable conditions.

Example:
    >>> from checkmark.conditions import check, all_of
    >>> shorter = (
    ...     check(lambda given, expected: len(given) < expected)
    ...     .with_expected_value(100)
    ...     .with_description("shorter than")
    ...     .build()
    ... )
    >>> shorter.evaluate("foooo")
    True
    >>> str(shorter)
    '[✓] shorter than <100>'
"""

from checkmark.conditions.base import (
    Condition,
    EvalState,
    Failed,
    Matched,
    NotEvaluated,
    Outcome,
)
from checkmark.conditions.builder import (
    ConditionBuilder,
    ConditionConfig,
    check,
    check_expected,
    descriptive,
    from_config,
    is_equal_check,
    is_equal_to_check,
    is_not_null_check,
    is_null_check,
    verbose,
)
from checkmark.conditions.composite import AllOf, AnyOf, Not, all_of, any_of, not_
from checkmark.conditions.labels import (
    LabelStyle,
    legacy_labels,
    state_labels_for,
    symbol_labels,
)
from checkmark.conditions.stateful import StatefulCondition, format_value

__all__ = [
    # Base
    "Condition",
    "EvalState",
    "Failed",
    "Matched",
    "NotEvaluated",
    "Outcome",
    # Stateful
    "StatefulCondition",
    "format_value",
    # Builder
    "ConditionBuilder",
    "ConditionConfig",
    "check",
    "check_expected",
    "descriptive",
    "from_config",
    "is_equal_check",
    "is_equal_to_check",
    "is_not_null_check",
    "is_null_check",
    "verbose",
    # Composite
    "AllOf",
    "AnyOf",
    "Not",
    "all_of",
    "any_of",
    "not_",
    # Labels
    "LabelStyle",
    "legacy_labels",
    "state_labels_for",
    "symbol_labels",
]
