"""Build conditions from config specs (``{"shorter_than": 100}`` and friends)."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel

from checkmark.conditions.base import Condition
from checkmark.conditions.builder import (
    check_expected,
    is_equal_to_check,
    is_not_null_check,
    is_null_check,
)
from checkmark.conditions.composite import AllOf, AnyOf, Not
from checkmark.conditions.labels import StateLabels


def _length_with_value(given: Any) -> str:
    return f"{len(given)} (value: {given})"


def _shorter_than(given: Any, expected: int) -> bool:
    return len(given) < expected


def _longer_than(given: Any, expected: int) -> bool:
    return len(given) > expected


def _less_than(given: Any, expected: int | float) -> bool:
    return given < expected


def _greater_than(given: Any, expected: int | float) -> bool:
    return given > expected


def _not_equal(given: Any, expected: Any) -> bool:
    return given != expected


def _contains(given: Any, expected: Any) -> bool:
    return expected in given


def _matches_pattern(given: Any, expected: str) -> bool:
    return re.search(expected, str(given)) is not None


# kind -> (predicate, default description, given-value formatter)
_COMPARISONS = {
    "not_equal_to": (_not_equal, "is not equal to", None),
    "shorter_than": (_shorter_than, "shorter than", _length_with_value),
    "longer_than": (_longer_than, "longer than", _length_with_value),
    "less_than": (_less_than, "less than", None),
    "greater_than": (_greater_than, "greater than", None),
    "contains": (_contains, "contains", None),
    "matches_pattern": (_matches_pattern, "matches pattern", None),
}

CONDITION_KINDS = frozenset(
    {"is_null", "is_not_null", "equal_to", "all_of", "any_of", "not"}
    | set(_COMPARISONS)
)


def build_condition(
    spec: dict[str, Any] | BaseModel,
    state_labels: StateLabels | None = None,
) -> Condition:
    """Dispatch a condition spec to the matching builder.

    Supported formats:
        {"is_null": true}
        {"equal_to": "foooo"}
        {"shorter_than": 100, "description": "not be longer"}
        {"all_of": [{...}, {...}]}
        {"not": {...}}

    Raises ValueError for empty specs and unknown condition kinds.
    """
    if not spec:
        raise ValueError("Empty condition spec")

    if isinstance(spec, BaseModel):
        spec = spec.model_dump(by_alias=True)

    description = spec.get("description")
    kind = next((k for k in spec if k != "description"), None)
    if kind is None:
        raise ValueError("Condition spec has no condition kind")
    value = spec[kind]

    if kind in ("all_of", "any_of"):
        children = [build_condition(child, state_labels) for child in value]
        joined = AllOf(*children) if kind == "all_of" else AnyOf(*children)
        if description:
            joined.described_as(description)
        return joined
    if kind == "not":
        return Not(build_condition(value, state_labels))

    if kind == "is_null":
        builder = is_null_check()
    elif kind == "is_not_null":
        builder = is_not_null_check()
    elif kind == "equal_to":
        builder = is_equal_to_check(value)
    elif kind in _COMPARISONS:
        predicate, default_description, given_formatter = _COMPARISONS[kind]
        builder = (
            check_expected(predicate, value)
            .with_description(default_description)
            .with_given_formatter(given_formatter)
        )
    else:
        raise ValueError(
            f"Unknown condition kind: '{kind}' (expected one of: {', '.join(sorted(CONDITION_KINDS))})"
        )

    if description:
        builder.with_description(description)
    return builder.with_state_labels(state_labels).build()
