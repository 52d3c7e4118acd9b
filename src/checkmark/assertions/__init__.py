"""Assertion helpers that evaluate conditions into results."""

from checkmark.assertions.base import AssertionResult
from checkmark.assertions.checks import check_condition, check_directory_not_containing

__all__ = ["AssertionResult", "check_condition", "check_directory_not_containing"]
