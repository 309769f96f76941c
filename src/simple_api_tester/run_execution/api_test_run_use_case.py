"""Run execution use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from simple_api_tester.configuration import (
    ConfigurationError,
    RunSettings,
    TestCase,
    load_test_suite,
)
from simple_api_tester.console_narration.progress_narrator import QuietRunNarrator, RunNarrator
from simple_api_tester.http_transport.transport import HttpTransport, HttpxTransport
from simple_api_tester.results_writing import build_run_report, write_run_report
from simple_api_tester.test_execution.execution_outcomes import TestResult
from simple_api_tester.test_execution.test_executor import TestCaseExecutor
from simple_api_tester.value_chaining.variable_store import VariableStore

from .run_contracts import RunOutcome, RunRequest
from .sequential_run import run_test_cases, summarize_results

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_api_test_run(
    request: RunRequest,
    *,
    transport_factory: Callable[[], HttpTransport] | None = None,
    narrator: RunNarrator | None = None,
) -> RunOutcome:
    """Load a suite, run it sequentially and export the report when requested.

    Raises:
      RunExecutionError: If the suite is invalid or the report cannot be written.
        Failing test cases are not errors; they are reported on the outcome.
    """
    resolved_narrator = narrator or QuietRunNarrator()
    settings = RunSettings.create(
        request.config_path,
        base_url=request.base_url,
        stop_on_failure=request.stop_on_failure,
        output_path=request.output_path,
    )
    try:
        suite = load_test_suite(settings.config_path)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc
    resolved_narrator.suite_loaded(len(suite.test_cases))

    resolved_narrator.run_started(datetime.now())
    store = VariableStore()
    if transport_factory is None:
        with HttpxTransport() as transport:
            results = _run(suite.test_cases, transport, store, settings, resolved_narrator)
    else:
        results = _run(
            suite.test_cases, transport_factory(), store, settings, resolved_narrator
        )

    summary = summarize_results(results)
    resolved_narrator.summary(summary)
    _LOGGER.info(
        "Run of %s finished: %d passed, %d failed",
        settings.config_path,
        summary.passed,
        summary.failed,
    )
    variables = store.snapshot()
    _LOGGER.debug("Variables extracted during run: %s", ", ".join(sorted(variables)) or "none")

    output_path = None
    if settings.output_path is not None:
        report = build_run_report(results, summary, settings)
        try:
            output_path = write_run_report(settings.output_path, report)
        except OSError as exc:
            raise RunExecutionError(f"failed to write results file: {exc}") from exc
        resolved_narrator.report_written(str(output_path))

    return RunOutcome(
        results=results,
        summary=summary,
        output_path=output_path,
        variables=variables,
    )


def _run(
    test_cases: Sequence[TestCase],
    transport: HttpTransport,
    store: VariableStore,
    settings: RunSettings,
    narrator: RunNarrator,
) -> tuple[TestResult, ...]:
    executor = TestCaseExecutor(
        transport,
        store,
        base_url=settings.base_url,
        narrator=narrator,
    )
    return run_test_cases(
        test_cases,
        executor,
        stop_on_failure=settings.stop_on_failure,
        narrator=narrator,
    )
