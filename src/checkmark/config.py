from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Literal

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from checkmark.conditions.labels import LabelStyle


class IsNullSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    is_null: Literal[True]
    description: str | None = None


class IsNotNullSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    is_not_null: Literal[True]
    description: str | None = None


class EqualToSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    equal_to: Any
    description: str | None = None


class NotEqualToSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    not_equal_to: Any
    description: str | None = None


class ShorterThanSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    shorter_than: int
    description: str | None = None


class LongerThanSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    longer_than: int
    description: str | None = None


class LessThanSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    less_than: int | float
    description: str | None = None


class GreaterThanSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    greater_than: int | float
    description: str | None = None


class ContainsSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    contains: Any
    description: str | None = None


class MatchesPatternSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    matches_pattern: str
    description: str | None = None

    @field_validator("matches_pattern")
    @classmethod
    def pattern_must_compile(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression '{v}': {e}") from e
        return v


class AllOfSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    all_of: list[ConditionSpec]
    description: str | None = None

    @field_validator("all_of")
    @classmethod
    def children_must_not_be_empty(cls, v: list) -> list:
        if not v:
            raise ValueError("all_of must not be empty")
        return v


class AnyOfSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")
    any_of: list[ConditionSpec]
    description: str | None = None

    @field_validator("any_of")
    @classmethod
    def children_must_not_be_empty(cls, v: list) -> list:
        if not v:
            raise ValueError("any_of must not be empty")
        return v


class NotSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    negated: ConditionSpec = Field(alias="not")


ConditionSpec = (
    IsNullSpec
    | IsNotNullSpec
    | EqualToSpec
    | NotEqualToSpec
    | ShorterThanSpec
    | LongerThanSpec
    | LessThanSpec
    | GreaterThanSpec
    | ContainsSpec
    | MatchesPatternSpec
    | AllOfSpec
    | AnyOfSpec
    | NotSpec
)

AllOfSpec.model_rebuild()
AnyOfSpec.model_rebuild()
NotSpec.model_rebuild()


class CaseConfig(BaseModel):
    name: str
    value: Any = None
    conditions: list[ConditionSpec]

    @field_validator("value")
    @classmethod
    def expand_env_variables(cls, v: Any) -> Any:
        """Expand ``${VAR}`` references in string values.

        Raises ValueError when a referenced variable is unset and has no default.
        """
        if not isinstance(v, str):
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"missing environment variable in value '{v}': {e}") from e

    @field_validator("conditions")
    @classmethod
    def conditions_must_not_be_empty(cls, v: list) -> list:
        if not v:
            raise ValueError("conditions must not be empty")
        return v


class CheckConfig(BaseModel):
    label_style: LabelStyle = LabelStyle.SYMBOLS
    cases: list[CaseConfig]

    @model_validator(mode="after")
    def cases_must_be_unique_and_non_empty(self) -> CheckConfig:
        if not self.cases:
            raise ValueError("cases must not be empty")
        names = [c.name for c in self.cases]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate case names: {', '.join(duplicates)}")
        return self


def load_config(path: Path) -> CheckConfig:
    """Load and validate a checks config from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a YAML mapping")

    return CheckConfig(**raw)
