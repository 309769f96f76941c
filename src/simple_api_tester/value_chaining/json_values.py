"""JSON value helpers shared by substitution, extraction and validation."""

from __future__ import annotations

import json
import math
from typing import Any

JsonValue = Any
"""One of None, bool, int, float, str, list[JsonValue] or dict[str, JsonValue]."""

_INTEGRAL_FLOAT_LIMIT = 1e21


def json_kind(value: JsonValue) -> str:
    """Return the JSON kind name of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def to_canonical_text(value: JsonValue) -> str:
    """Render a value as the text used for substitution and scalar comparison.

    Numbers lose their representation detail on purpose: ``1000``, ``1000.0``
    and ``"1000"`` all render as ``1000``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def _format_float(value: float) -> str:
    if math.isfinite(value) and value.is_integer() and abs(value) < _INTEGRAL_FLOAT_LIMIT:
        return str(int(value))
    return repr(value)
