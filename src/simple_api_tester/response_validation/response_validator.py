"""Partial-match validation of response bodies and status codes."""

from __future__ import annotations

from simple_api_tester.value_chaining.json_values import JsonValue, json_kind, to_canonical_text


def validate_response(expected: JsonValue, actual: JsonValue, path: str = "") -> list[str]:
    """Compare ``actual`` against the shape of ``expected``.

    Only keys and indices present in ``expected`` are checked; anything extra
    in ``actual`` is ignored. Scalars are compared by canonical text.

    Returns:
      One message per discrepancy, empty when everything matches.
    """
    if isinstance(expected, dict):
        return _validate_object(expected, actual, path)
    if isinstance(expected, list):
        return _validate_array(expected, actual, path)
    if to_canonical_text(expected) != to_canonical_text(actual):
        return [
            f"{path}: Expected '{to_canonical_text(expected)}', "
            f"got '{to_canonical_text(actual)}'"
        ]
    return []


def validate_status_code(expected: int | None, actual: int) -> list[str]:
    """Check the HTTP status code; ``None`` or ``0`` leaves it unchecked."""
    if not expected or expected == actual:
        return []
    return [f"HTTP Status: Expected {expected}, got {actual}"]


def _validate_object(expected: dict, actual: JsonValue, path: str) -> list[str]:
    if not isinstance(actual, dict):
        return [f"{path}: Expected object, got {json_kind(actual)}"]
    discrepancies: list[str] = []
    for key, expected_value in expected.items():
        child_path = f"{path}.{key}" if path else key
        if key not in actual:
            discrepancies.append(f"{child_path}: Key not found in response")
            continue
        discrepancies.extend(validate_response(expected_value, actual[key], child_path))
    return discrepancies


def _validate_array(expected: list, actual: JsonValue, path: str) -> list[str]:
    if not isinstance(actual, list):
        return [f"{path}: Expected array, got {json_kind(actual)}"]
    discrepancies: list[str] = []
    for index, expected_item in enumerate(expected):
        child_path = f"{path}[{index}]"
        if index >= len(actual):
            discrepancies.append(f"{child_path}: Index out of range")
            continue
        discrepancies.extend(validate_response(expected_item, actual[index], child_path))
    return discrepancies
