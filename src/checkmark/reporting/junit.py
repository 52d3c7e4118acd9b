from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from junitparser import Failure, JUnitXml, TestCase, TestSuite

if TYPE_CHECKING:
    from checkmark.runner import CaseResult


def write_junit(results: list[CaseResult], path: Path) -> Path:
    """Write junit.xml with one suite per case and one test case per condition."""
    xml = JUnitXml()

    for case_result in results:
        suite = TestSuite(case_result.name)
        for assertion in case_result.assertions:
            case = TestCase(assertion.name)
            case.classname = case_result.name
            if not assertion.passed:
                case.result = [Failure(assertion.message)]
            suite.add_testcase(case)
        # Use append (not +=) to keep each case as its own suite
        xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
