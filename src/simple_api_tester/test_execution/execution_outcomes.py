"""Test execution entities."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from simple_api_tester.configuration.suite_models import TestCase
from simple_api_tester.value_chaining.json_values import JsonValue


class TestStatus(str, Enum):
    """Lifecycle status of one test case."""

    __test__ = False

    PENDING = "PENDING"
    PASSED = "PASSED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class TestResult:  # pylint: disable=too-many-instance-attributes
    """Outcome of executing one test case."""

    __test__ = False

    name: str
    order: int
    method: str
    url: str
    status: TestStatus
    errors: tuple[str, ...] = ()
    response_time_ms: float = 0.0
    response_status_code: int = 0
    response_body: JsonValue = None

    @property
    def passed(self) -> bool:
        return self.status == TestStatus.PASSED

    @staticmethod
    def pending(test_case: TestCase, url: str) -> TestResult:
        return TestResult(
            name=test_case.name,
            order=test_case.order,
            method=test_case.method.value,
            url=url,
            status=TestStatus.PENDING,
        )

    def failed(self, *errors: str, **changes: object) -> TestResult:
        """Return a FAILED copy with ``errors`` appended."""
        return replace(
            self,
            status=TestStatus.FAILED,
            errors=self.errors + errors,
            **changes,  # type: ignore[arg-type]
        )

    def concluded(self, errors: list[str], **changes: object) -> TestResult:
        """Return a terminal copy: PASSED without errors, FAILED otherwise."""
        status = TestStatus.FAILED if errors else TestStatus.PASSED
        return replace(
            self,
            status=status,
            errors=self.errors + tuple(errors),
            **changes,  # type: ignore[arg-type]
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "test_case_name": self.name,
            "order": self.order,
            "method": self.method,
            "url": self.url,
            "status": self.status.value,
            "errors": list(self.errors),
            "response_time_ms": self.response_time_ms,
            "response_status_code": self.response_status_code,
            "response_body": self.response_body,
        }
