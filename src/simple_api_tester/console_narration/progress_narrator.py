"""Human-readable progress output for test runs."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

import click

from simple_api_tester.value_chaining.json_values import JsonValue, to_canonical_text

if TYPE_CHECKING:
    from simple_api_tester.run_execution.run_contracts import RunSummary
    from simple_api_tester.test_execution.execution_outcomes import TestResult

SEPARATOR_LENGTH = 60
PASS_RATE_GREEN = 100.0
PASS_RATE_YELLOW = 80.0


class RunNarrator(Protocol):
    """Receives run events in execution order."""

    def suite_loaded(self, test_case_count: int) -> None: ...

    def run_started(self, started_at: datetime) -> None: ...

    def test_started(self, order: int, name: str, method: str, url: str) -> None: ...

    def variable_extracted(self, name: str, value: JsonValue) -> None: ...

    def test_aborted(self, reason: str) -> None: ...

    def test_finished(self, result: TestResult) -> None: ...

    def run_stopped(self) -> None: ...

    def summary(self, summary: RunSummary) -> None: ...

    def report_written(self, path: str) -> None: ...


class QuietRunNarrator:
    """Narrator that prints nothing."""

    def suite_loaded(self, test_case_count: int) -> None:
        pass

    def run_started(self, started_at: datetime) -> None:
        pass

    def test_started(self, order: int, name: str, method: str, url: str) -> None:
        pass

    def variable_extracted(self, name: str, value: JsonValue) -> None:
        pass

    def test_aborted(self, reason: str) -> None:
        pass

    def test_finished(self, result: TestResult) -> None:
        pass

    def run_stopped(self) -> None:
        pass

    def summary(self, summary: RunSummary) -> None:
        pass

    def report_written(self, path: str) -> None:
        pass


class ConsoleRunNarrator:
    """Colored console narration written through click."""

    def __init__(self, *, color: bool | None = None) -> None:
        self._color = color

    def suite_loaded(self, test_case_count: int) -> None:
        self._echo(f"✓ Loaded {test_case_count} test cases", fg="green")

    def run_started(self, started_at: datetime) -> None:
        separator = "=" * SEPARATOR_LENGTH
        self._echo("")
        self._echo(separator, bold=True)
        self._echo(
            f"  Starting API Tests - {started_at.strftime('%Y-%m-%d %H:%M:%S')}",
            bold=True,
        )
        self._echo(separator, bold=True)

    def test_started(self, order: int, name: str, method: str, url: str) -> None:
        self._echo("")
        self._echo(f"[{order}] {name}", bold=True)
        self._echo(f"  {method} {url}", fg="blue")

    def variable_extracted(self, name: str, value: JsonValue) -> None:
        self._echo(f"  ↳ Extracted {name} = {to_canonical_text(value)}", fg="cyan")

    def test_aborted(self, reason: str) -> None:
        self._echo(f"  ✗ FAILED - {reason}", fg="red")

    def test_finished(self, result: TestResult) -> None:
        if result.errors:
            self._echo(f"  ✗ FAILED ({result.response_time_ms:.0f}ms)", fg="red")
            for error in result.errors:
                self._echo(f"    • {error}", fg="red")
        else:
            self._echo(f"  ✓ PASSED ({result.response_time_ms:.0f}ms)", fg="green")

    def run_stopped(self) -> None:
        self._echo("")
        self._echo("⚠ Stopping execution due to failure", fg="yellow")

    def summary(self, summary: RunSummary) -> None:
        separator = "=" * SEPARATOR_LENGTH
        self._echo("")
        self._echo(separator, bold=True)
        self._echo("  Test Summary", bold=True)
        self._echo(separator, bold=True)
        self._echo(f"  Total:  {summary.total}")
        self._echo(f"  Passed: {summary.passed}", fg="green")
        self._echo(f"  Failed: {summary.failed}", fg="red")
        if summary.pass_rate is not None:
            self._echo(
                f"  Pass Rate: {summary.pass_rate:.1f}%",
                fg=pass_rate_color(summary.pass_rate),
            )
        if summary.average_response_time_ms is not None:
            self._echo(f"  Avg Response Time: {summary.average_response_time_ms:.0f}ms")
        self._echo(separator)

    def report_written(self, path: str) -> None:
        self._echo(f"✓ Results exported to: {path}", fg="green")

    def _echo(self, message: str, **style: object) -> None:
        click.secho(message, color=self._color, **style)  # type: ignore[arg-type]


def pass_rate_color(pass_rate: float) -> str:
    """Pick the summary color for a pass rate percentage."""
    if pass_rate >= PASS_RATE_GREEN:
        return "green"
    if pass_rate >= PASS_RATE_YELLOW:
        return "yellow"
    return "red"
