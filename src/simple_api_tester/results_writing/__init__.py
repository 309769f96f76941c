"""Results writing exports."""

from .report_models import RunReport, build_run_report
from .run_report_writer import write_run_report

__all__ = [
    "RunReport",
    "build_run_report",
    "write_run_report",
]
