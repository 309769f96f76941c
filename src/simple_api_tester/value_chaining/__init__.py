"""Variable chaining exports."""

from .json_values import JsonValue, json_kind, to_canonical_text
from .path_extractor import NOT_FOUND, extract
from .variable_store import VariableStore

__all__ = [
    "JsonValue",
    "json_kind",
    "to_canonical_text",
    "NOT_FOUND",
    "extract",
    "VariableStore",
]
