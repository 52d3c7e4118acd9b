"""Checks that evaluate conditions into AssertionResults."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from checkmark.assertions.base import AssertionResult
from checkmark.conditions.base import Condition
from checkmark.errors import PreconditionViolation


def check_condition(
    value: Any,
    condition: Condition,
    logger: logging.Logger | None = None,
    name: str | None = None,
) -> AssertionResult:
    """Evaluate *condition* against *value*.

    The message is the condition's description read after evaluation, so it
    carries the matched/failed state of every nested condition. Errors raised
    by the condition's predicate propagate.
    """
    if condition is None:
        raise PreconditionViolation("The condition to check should not be None")
    if logger is None:
        logger = logging.getLogger(__name__)

    passed = condition.evaluate(value)
    message = str(condition)
    logger.info(f"Checked {value!r}: passed={passed}")
    logger.debug(message)

    return AssertionResult(
        name=name or message.split("\n", 1)[0],
        passed=passed,
        message=message,
        score=1.0 if passed else 0.0,
    )


def check_directory_not_containing(
    directory: str | Path | None,
    path_filter: Condition | Callable[[Path], bool],
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Check that no direct entry of *directory* matches *path_filter*.

    Raises PreconditionViolation when *path_filter* is None, before the
    directory is looked at. OSError raised while listing the directory
    propagates.
    """
    if path_filter is None:
        raise PreconditionViolation("The paths filter should not be null")
    if logger is None:
        logger = logging.getLogger(__name__)

    matches = path_filter.matches if isinstance(path_filter, Condition) else path_filter
    name = f"directory_not_containing:{directory}"
    if directory is None:
        return AssertionResult(
            name=name, passed=False, message="Expecting actual not to be null"
        )

    path = Path(directory)
    logger.info(f"Checking directory_not_containing: {path}")
    if not path.exists():
        logger.warning(f"Path {path} not found")
        return AssertionResult(
            name=name, passed=False, message=f"Expecting path:\n  {path}\nto exist."
        )
    if not path.is_dir():
        return AssertionResult(
            name=name,
            passed=False,
            message=f"Expecting path:\n  {path}\nto be a directory.",
        )

    found = sorted(str(entry) for entry in path.iterdir() if matches(entry))
    filter_description = "the given filter"
    logger.info(f"{len(found)} entries in {path} matched {filter_description}")

    if found:
        listing = ", ".join(found)
        return AssertionResult(
            name=name,
            passed=False,
            message=(
                f"Expecting directory:\n  {path}\nnot to contain any files matching "
                f"{filter_description} but found some:\n  [{listing}]"
            ),
        )
    return AssertionResult(
        name=name,
        passed=True,
        message=f"{path} contains no files matching {filter_description}",
        score=1.0,
    )
