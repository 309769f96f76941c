"""Run report writer service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from simple_api_tester.test_execution.execution_outcomes import TestResult

from .report_models import RunReport

RESULTS_SHEET_NAME = "Results"
RUN_INFO_SHEET_NAME = "RunInfo"
WORKBOOK_SUFFIX = ".xlsx"
RESULT_COLUMNS = (
    "order",
    "test_case_name",
    "method",
    "url",
    "status",
    "response_status_code",
    "response_time_ms",
    "errors",
    "response_body",
)
_MAX_COLUMN_WIDTH = 80


def write_run_report(output_path: Path | str, report: RunReport) -> Path:
    """Write the run report; ``.xlsx`` paths get a workbook, anything else JSON.

    Returns:
      The resolved destination path.

    Raises:
      OSError: If the destination cannot be written.
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    if output.suffix.lower() == WORKBOOK_SUFFIX:
        _write_workbook(output, report)
    else:
        output.write_text(
            json.dumps(report.to_dict(), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    return output.resolve()


def _write_workbook(output: Path, report: RunReport) -> None:
    workbook = Workbook()
    results_sheet = workbook.active
    results_sheet.title = RESULTS_SHEET_NAME
    _write_results_sheet(results_sheet, report.results)
    _write_run_info_sheet(workbook, report)
    workbook.save(output)


def _write_results_sheet(sheet, results: Sequence[TestResult]) -> None:
    for column, header in enumerate(RESULT_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column, value=header)
        cell.font = Font(bold=True)
    for row, result in enumerate(results, start=2):
        values = result.to_dict()
        values["errors"] = "\n".join(result.errors)
        for column, header in enumerate(RESULT_COLUMNS, start=1):
            sheet.cell(row=row, column=column, value=_normalize_output_value(values[header]))
    sheet.freeze_panes = "A2"
    _fit_column_widths(sheet)


def _write_run_info_sheet(workbook, report: RunReport) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    summary = report.summary
    entries = (
        ("timestamp", report.timestamp.isoformat(timespec="seconds")),
        ("config_file", report.config_file),
        ("base_url", report.base_url),
        ("total", summary.total),
        ("passed", summary.passed),
        ("failed", summary.failed),
        ("pass_rate", None if summary.pass_rate is None else round(summary.pass_rate, 1)),
        (
            "average_response_time_ms",
            None
            if summary.average_response_time_ms is None
            else round(summary.average_response_time_ms, 1),
        ),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)


def _normalize_output_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return json.dumps(value, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    if isinstance(value, list):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def _fit_column_widths(sheet) -> None:
    for column_cells in sheet.columns:
        longest = max(
            (len(line) for cell in column_cells for line in str(cell.value or "").splitlines()),
            default=0,
        )
        letter = get_column_letter(column_cells[0].column)
        sheet.column_dimensions[letter].width = min(longest + 2, _MAX_COLUMN_WIDTH)
