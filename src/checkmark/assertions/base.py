"""Base data structures for the assertion system."""

from dataclasses import dataclass


@dataclass
class AssertionResult:
    """Result of checking a value against a condition.

    Attributes:
        name: Identifier for the check (e.g. "short-word:shorter_than").
        passed: Whether the condition matched.
        message: Rendered condition description after evaluation.
        score: 1.0 when passed, 0.0 otherwise.
    """

    name: str
    passed: bool
    message: str
    score: float = 0.0
