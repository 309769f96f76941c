"""Boundary tests for the pure value and validation packages."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_value_and_validation_core_has_no_transport_or_console_dependencies() -> None:
    package_dir = _project_root() / "src" / "simple_api_tester"
    core_modules = (
        *sorted((package_dir / "value_chaining").glob("*.py")),
        *sorted((package_dir / "response_validation").glob("*.py")),
    )
    forbidden_import_fragments = (
        "import httpx",
        "import click",
        "openpyxl",
        "simple_api_tester.http_transport",
        "simple_api_tester.console_narration",
        "simple_api_tester.run_execution",
    )

    assert core_modules
    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
