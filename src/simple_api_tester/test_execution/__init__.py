"""Test execution exports."""

from .execution_outcomes import TestResult, TestStatus
from .test_executor import TestCaseExecutor, decode_response_body

__all__ = [
    "TestStatus",
    "TestResult",
    "TestCaseExecutor",
    "decode_response_body",
]
