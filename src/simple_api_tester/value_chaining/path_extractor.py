"""Dot-notation value extraction from decoded response bodies."""

from __future__ import annotations

from typing import Final

from .json_values import JsonValue


class _NotFound:  # pylint: disable=too-few-public-methods
    """Marker for a path that does not resolve; distinct from JSON null."""

    _instance: _NotFound | None = None

    def __new__(cls) -> _NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND: Final = _NotFound()


def extract(root: JsonValue, path: str) -> JsonValue | _NotFound:
    """Walk ``root`` along a dot-separated path.

    Object segments are looked up as keys, array segments are parsed as
    non-negative indices. Any miss returns ``NOT_FOUND`` instead of raising.
    """
    current: JsonValue = root
    for segment in path.split("."):
        if isinstance(current, dict):
            if segment not in current:
                return NOT_FOUND
            current = current[segment]
        elif isinstance(current, list):
            index = _parse_index(segment)
            if index is None or index >= len(current):
                return NOT_FOUND
            current = current[index]
        else:
            return NOT_FOUND
    return current


def _parse_index(segment: str) -> int | None:
    if not (segment.isascii() and segment.isdigit()):
        return None
    return int(segment)
