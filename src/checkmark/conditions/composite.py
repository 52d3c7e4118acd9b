"""All-of / any-of / not aggregation of conditions."""

from __future__ import annotations

import textwrap
from typing import Any, Iterable

from checkmark.conditions.base import Condition, Failed, Matched
from checkmark.errors import PreconditionViolation

_INDENT = "   "


def _require_conditions(conditions: Iterable[Condition | None]) -> list[Condition]:
    if conditions is None:
        raise PreconditionViolation("The given conditions should not be None")
    checked = list(conditions)
    if not checked:
        raise PreconditionViolation("The given conditions should not be empty")
    if any(c is None for c in checked):
        raise PreconditionViolation("The given conditions should not contain None")
    return checked


class Join(Condition):
    """Condition made of child conditions.

    ``matches`` evaluates every child in order, without short-circuiting, so
    the rendered tree shows each child's post-evaluation state. The
    description is rebuilt from the children on every access.
    """

    prefix = ""

    def __init__(self, *conditions: Condition):
        if len(conditions) == 1 and not isinstance(conditions[0], Condition):
            conditions = tuple(_require_conditions(conditions[0]))
        self.conditions = _require_conditions(conditions)
        super().__init__(description=self.prefix)

    @property
    def description(self) -> str:
        children = ",\n".join(
            textwrap.indent(str(c), _INDENT) for c in self.conditions
        )
        return f"{self.prefix}:[\n{children}\n]"

    def described_as(self, description: str) -> Join:
        self.prefix = description
        return self

    def matches(self, value: Any) -> bool:
        results = [c.matches(value) for c in self.conditions]
        matched = self._combine(results)
        self._outcome = Matched(self.prefix) if matched else Failed(self.prefix)
        return matched

    def _combine(self, results: list[bool]) -> bool:
        raise NotImplementedError("Subclasses must implement _combine()")


class AllOf(Join):
    """Matches when every child condition matches."""

    prefix = "all of"

    def _combine(self, results: list[bool]) -> bool:
        return all(results)


class AnyOf(Join):
    """Matches when at least one child condition matches."""

    prefix = "any of"

    def _combine(self, results: list[bool]) -> bool:
        return any(results)


class Not(Condition):
    """Inverts a condition; renders as ``not :<child>``."""

    def __init__(self, condition: Condition):
        if condition is None:
            raise PreconditionViolation("The condition to negate should not be None")
        self.condition = condition
        self.prefix = "not"
        super().__init__(description=self.prefix)

    @property
    def description(self) -> str:
        return f"{self.prefix} :{self.condition}"

    def described_as(self, description: str) -> Not:
        self.prefix = description
        return self

    def matches(self, value: Any) -> bool:
        matched = not self.condition.matches(value)
        self._outcome = Matched(self.prefix) if matched else Failed(self.prefix)
        return matched


def all_of(*conditions: Condition) -> AllOf:
    return AllOf(*conditions)


def any_of(*conditions: Condition) -> AnyOf:
    return AnyOf(*conditions)


def not_(condition: Condition) -> Not:
    return Not(condition)
