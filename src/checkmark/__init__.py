"""checkmark: describable, composable conditions for assertions."""

from checkmark.conditions import (
    AllOf,
    AnyOf,
    Condition,
    ConditionBuilder,
    EvalState,
    LabelStyle,
    Not,
    StatefulCondition,
    all_of,
    any_of,
    check,
    check_expected,
    is_equal_to_check,
    is_not_null_check,
    is_null_check,
    legacy_labels,
    not_,
    symbol_labels,
)
from checkmark.errors import ConditionConfigError, PreconditionViolation

__all__ = [
    "AllOf",
    "AnyOf",
    "Condition",
    "ConditionBuilder",
    "ConditionConfigError",
    "EvalState",
    "LabelStyle",
    "Not",
    "PreconditionViolation",
    "StatefulCondition",
    "all_of",
    "any_of",
    "check",
    "check_expected",
    "is_equal_to_check",
    "is_not_null_check",
    "is_null_check",
    "legacy_labels",
    "not_",
    "symbol_labels",
]
