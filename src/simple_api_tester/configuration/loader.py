"""Test suite loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .suite_models import DEFAULT_TIMEOUT_SECONDS, HttpMethod, TestCase, TestSuite

SUITE_ROOT_KEY = "test_case"


class ConfigurationError(Exception):
    """Raised when the test suite file is invalid."""


def load_test_suite(suite_path: Path | str) -> TestSuite:
    """Load, validate and order the test cases of a JSON or YAML suite file."""
    path = Path(suite_path)
    if not path.exists():
        raise ConfigurationError(f"Test suite file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read test suite file: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse test suite file: {exc}") from exc

    return TestSuite(path=path, test_cases=parse_test_cases(parsed))


def parse_test_cases(document: Any) -> tuple[TestCase, ...]:
    """Validate an already-decoded suite document and sort it by ``order``."""
    if document is None:
        document = {}
    if not isinstance(document, Mapping):
        raise ConfigurationError("Test suite root must be a mapping.")
    entries = document.get(SUITE_ROOT_KEY)
    if entries is None:
        raise ConfigurationError(f"Test suite section '{SUITE_ROOT_KEY}' is required.")
    if not isinstance(entries, list):
        raise ConfigurationError(f"'{SUITE_ROOT_KEY}' must be a list of test cases.")

    test_cases = [_parse_test_case(entry, index) for index, entry in enumerate(entries)]
    return tuple(sorted(test_cases, key=lambda test_case: test_case.order))


def _parse_test_case(entry: Any, index: int) -> TestCase:
    label = f"{SUITE_ROOT_KEY}[{index}]"
    if not isinstance(entry, Mapping):
        raise ConfigurationError(f"{label} must be a mapping.")

    return TestCase(
        name=_require_non_empty_string(entry.get("test_case_name"), f"{label}.test_case_name"),
        order=_optional_int(entry.get("order"), f"{label}.order", default=0),
        endpoint=_require_string(entry.get("api"), f"{label}.api"),
        method=_parse_method(entry.get("method"), f"{label}.method"),
        headers=_string_mapping(entry.get("headers"), f"{label}.headers"),
        body=entry.get("body"),
        params=_string_mapping(entry.get("params"), f"{label}.params"),
        timeout_seconds=_require_non_negative_int(
            entry.get("timeout", DEFAULT_TIMEOUT_SECONDS), f"{label}.timeout"
        ),
        expected_status_code=_optional_status_code(
            entry.get("expected_status_code"), f"{label}.expected_status_code"
        ),
        expected_response=entry.get("expected_response"),
        extract=_string_mapping(entry.get("extract"), f"{label}.extract"),
    )


def _parse_method(value: Any, field_name: str) -> HttpMethod:
    method = _require_non_empty_string(value, field_name).upper()
    try:
        return HttpMethod(method)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in HttpMethod)
        raise ConfigurationError(f"{field_name} must be one of {allowed}, got '{value}'.") from exc


def _string_mapping(value: Any, field_name: str) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{field_name} must be a mapping.")
    normalized: dict[str, str] = {}
    for key, item in value.items():
        if not isinstance(key, str) or not key:
            raise ConfigurationError(f"{field_name} keys must be non-empty strings.")
        if not isinstance(item, str):
            raise ConfigurationError(f"{field_name}.{key} must be a string.")
        normalized[key] = item
    return normalized


def _optional_status_code(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    code = _require_non_negative_int(value, field_name)
    return code or None


def _require_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    stripped = _require_string(value, field_name).strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_int(value: Any, field_name: str, *, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
