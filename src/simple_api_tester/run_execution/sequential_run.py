"""Sequential orchestration of test cases."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from simple_api_tester.configuration.suite_models import TestCase
from simple_api_tester.console_narration.progress_narrator import QuietRunNarrator, RunNarrator
from simple_api_tester.test_execution.execution_outcomes import TestResult, TestStatus
from simple_api_tester.test_execution.test_executor import TestCaseExecutor

from .run_contracts import RunSummary

_LOGGER = logging.getLogger(__name__)


def run_test_cases(
    test_cases: Sequence[TestCase],
    executor: TestCaseExecutor,
    *,
    stop_on_failure: bool = False,
    narrator: RunNarrator | None = None,
) -> tuple[TestResult, ...]:
    """Execute test cases one by one in ascending ``order``.

    With ``stop_on_failure`` the loop ends after the first FAILED result;
    test cases after it are not executed and do not appear in the output.
    """
    resolved_narrator = narrator or QuietRunNarrator()
    results: list[TestResult] = []
    for test_case in sorted(test_cases, key=lambda case: case.order):
        result = executor.execute(test_case)
        results.append(result)
        if stop_on_failure and result.status == TestStatus.FAILED:
            _LOGGER.debug("Stopping after failed test case '%s'", result.name)
            resolved_narrator.run_stopped()
            break
    return tuple(results)


def summarize_results(results: Sequence[TestResult]) -> RunSummary:
    """Compute run counters; timings of zero are left out of the average."""
    total = len(results)
    passed = sum(1 for result in results if result.status == TestStatus.PASSED)
    timings = [result.response_time_ms for result in results if result.response_time_ms > 0]
    return RunSummary(
        total=total,
        passed=passed,
        failed=sum(1 for result in results if result.status == TestStatus.FAILED),
        pass_rate=passed / total * 100 if total else None,
        average_response_time_ms=sum(timings) / len(timings) if timings else None,
    )
