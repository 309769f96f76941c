"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from simple_api_tester.test_execution.execution_outcomes import TestResult
from simple_api_tester.value_chaining.json_values import JsonValue


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run."""

    config_path: str
    base_url: str | None = None
    stop_on_failure: bool = False
    output_path: str | None = None


@dataclass(frozen=True)
class RunSummary:
    """Counters derived from a result sequence."""

    total: int
    passed: int
    failed: int
    pass_rate: float | None
    average_response_time_ms: float | None

    @property
    def all_passed(self) -> bool:
        return self.passed == self.total


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    results: tuple[TestResult, ...]
    summary: RunSummary
    output_path: Path | None
    variables: dict[str, JsonValue] = field(default_factory=dict)

    @property
    def all_passed(self) -> bool:
        return self.summary.all_passed
