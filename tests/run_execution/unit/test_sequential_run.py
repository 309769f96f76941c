"""Sequential orchestration tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from simple_api_tester.configuration.suite_models import HttpMethod, TestCase
from simple_api_tester.run_execution.sequential_run import run_test_cases, summarize_results
from simple_api_tester.test_execution.execution_outcomes import TestResult, TestStatus


def _test_case(name: str, order: int) -> TestCase:
    return TestCase(name=name, order=order, endpoint=f"/{name}", method=HttpMethod.GET)


def _result(name: str, status: TestStatus, response_time_ms: float = 0.0) -> TestResult:
    return TestResult(
        name=name,
        order=1,
        method="GET",
        url=f"http://api.test/{name}",
        status=status,
        response_time_ms=response_time_ms,
    )


@dataclass
class _ScriptedExecutor:
    failing: set[str] = field(default_factory=set)
    executed: list[str] = field(default_factory=list)

    def execute(self, test_case: TestCase) -> TestResult:
        self.executed.append(test_case.name)
        status = TestStatus.FAILED if test_case.name in self.failing else TestStatus.PASSED
        return TestResult.pending(test_case, test_case.endpoint).concluded(
            ["boom"] if status is TestStatus.FAILED else [],
            response_time_ms=10.0,
        )


class _StopRecorder:
    def __init__(self) -> None:
        self.stopped = 0

    def run_stopped(self) -> None:
        self.stopped += 1


def test_runs_in_ascending_order() -> None:
    executor = _ScriptedExecutor()
    test_cases = [_test_case("c", 3), _test_case("a", 1), _test_case("b", 2)]

    results = run_test_cases(test_cases, executor)  # type: ignore[arg-type]

    assert executor.executed == ["a", "b", "c"]
    assert [result.name for result in results] == ["a", "b", "c"]


def test_failures_do_not_stop_the_run_by_default() -> None:
    executor = _ScriptedExecutor(failing={"b"})
    test_cases = [_test_case("a", 1), _test_case("b", 2), _test_case("c", 3)]

    results = run_test_cases(test_cases, executor)  # type: ignore[arg-type]

    assert [result.status for result in results] == [
        TestStatus.PASSED,
        TestStatus.FAILED,
        TestStatus.PASSED,
    ]


def test_stop_on_failure_ends_after_first_failure() -> None:
    executor = _ScriptedExecutor(failing={"b"})
    recorder = _StopRecorder()
    test_cases = [_test_case("a", 1), _test_case("b", 2), _test_case("c", 3)]

    results = run_test_cases(
        test_cases,
        executor,  # type: ignore[arg-type]
        stop_on_failure=True,
        narrator=recorder,  # type: ignore[arg-type]
    )

    assert [result.name for result in results] == ["a", "b"]
    assert executor.executed == ["a", "b"]
    assert recorder.stopped == 1


def test_stop_on_failure_without_failures_runs_everything() -> None:
    executor = _ScriptedExecutor()
    test_cases = [_test_case("a", 1), _test_case("b", 2)]

    results = run_test_cases(test_cases, executor, stop_on_failure=True)  # type: ignore[arg-type]

    assert len(results) == 2


def test_summary_counts_and_rates() -> None:
    results = [
        _result("a", TestStatus.PASSED, 100.0),
        _result("b", TestStatus.PASSED, 200.0),
        _result("c", TestStatus.PASSED, 300.0),
        _result("d", TestStatus.FAILED, 0.0),
    ]

    summary = summarize_results(results)

    assert summary.total == 4
    assert summary.passed == 3
    assert summary.failed == 1
    assert summary.pass_rate == pytest.approx(75.0)
    assert summary.average_response_time_ms == pytest.approx(200.0)
    assert summary.all_passed is False


def test_summary_of_empty_run() -> None:
    summary = summarize_results([])

    assert summary.total == 0
    assert summary.pass_rate is None
    assert summary.average_response_time_ms is None
    assert summary.all_passed is True


def test_summary_without_any_timing() -> None:
    summary = summarize_results([_result("a", TestStatus.FAILED)])

    assert summary.pass_rate == 0.0
    assert summary.average_response_time_ms is None
