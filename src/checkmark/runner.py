from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from checkmark.assertions.base import AssertionResult
from checkmark.assertions.checks import check_condition
from checkmark.conditions.labels import state_labels_for
from checkmark.config import CaseConfig, CheckConfig
from checkmark.registry import build_condition


@dataclass
class CaseResult:
    name: str
    assertions: list[AssertionResult]
    all_passed: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _condition_kind(spec: Any) -> str:
    dumped = spec.model_dump(by_alias=True)
    return next(k for k in dumped if k != "description")


def run_case(
    case: CaseConfig, config: CheckConfig, logger: logging.Logger
) -> CaseResult:
    """Evaluate every condition of *case*, in order, against its value."""
    state_labels = state_labels_for(config.label_style)
    assertions: list[AssertionResult] = []

    logger.info(f"Running case '{case.name}' against {case.value!r}")
    for index, spec in enumerate(case.conditions):
        condition = build_condition(spec, state_labels)
        name = f"{case.name}:{index}:{_condition_kind(spec)}"
        assertions.append(check_condition(case.value, condition, logger=logger, name=name))

    all_passed = all(a.passed for a in assertions)
    logger.info(f"Case '{case.name}' all_passed={all_passed}")
    return CaseResult(name=case.name, assertions=assertions, all_passed=all_passed)


def run_checks(
    config: CheckConfig, logger: logging.Logger | None = None
) -> list[CaseResult]:
    """Run all cases of *config* sequentially. Returns one result per case."""
    if logger is None:
        logger = logging.getLogger(__name__)

    results = [run_case(case, config, logger) for case in config.cases]
    failed = sum(1 for r in results if not r.all_passed)
    logger.info(f"Ran {len(results)} cases, {failed} failed")
    return results
