"""Results writing entities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from simple_api_tester.configuration.runtime_settings import RunSettings
from simple_api_tester.test_execution.execution_outcomes import TestResult

if TYPE_CHECKING:
    from simple_api_tester.run_execution.run_contracts import RunSummary


@dataclass(frozen=True)
class RunReport:
    """Everything exported after a run."""

    timestamp: datetime
    config_file: str
    base_url: str
    summary: RunSummary
    results: tuple[TestResult, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "timestamp": self.timestamp.isoformat(timespec="seconds"),
            "config_file": self.config_file,
            "base_url": self.base_url,
            "summary": {
                "total": self.summary.total,
                "passed": self.summary.passed,
                "failed": self.summary.failed,
            },
            "results": [result.to_dict() for result in self.results],
        }


def build_run_report(
    results: Sequence[TestResult],
    summary: RunSummary,
    settings: RunSettings,
    *,
    timestamp: datetime | None = None,
) -> RunReport:
    return RunReport(
        timestamp=timestamp or datetime.now(UTC),
        config_file=str(settings.config_path),
        base_url=settings.base_url,
        summary=summary,
        results=tuple(results),
    )
