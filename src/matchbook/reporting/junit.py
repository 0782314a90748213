from __future__ import annotations

from pathlib import Path
from typing import Any

from junitparser import Failure, JUnitXml, TestCase, TestSuite


def write_junit(
    run_dir: Path,
    results: list[dict[str, Any]],
    suite_name: str = "matchbook",
    duration_seconds: float = 0.0,
) -> Path:
    """Write junit.xml with one test case per check result, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    for result in results:
        case = TestCase(result["name"])
        case.classname = result.get("matcher", suite_name)
        if not result.get("passed", True):
            case.result = Failure(result.get("message", ""))
        suite.add_testcase(case)

    # add_testcase resets time via update_statistics
    suite.time = duration_seconds

    xml.append(suite)

    junit_path = run_dir / "junit.xml"
    xml.write(str(junit_path), pretty=True)
    return junit_path
