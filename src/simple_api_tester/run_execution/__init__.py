"""Run execution domain exports."""

from .api_test_run_use_case import RunExecutionError, execute_api_test_run
from .run_contracts import RunOutcome, RunRequest, RunSummary
from .sequential_run import run_test_cases, summarize_results

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunSummary",
    "RunExecutionError",
    "execute_api_test_run",
    "run_test_cases",
    "summarize_results",
]
