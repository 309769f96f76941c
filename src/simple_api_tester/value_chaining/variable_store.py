"""Run-scoped variable storage and placeholder substitution."""

from __future__ import annotations

import re
from collections.abc import Mapping

from .json_values import JsonValue, to_canonical_text

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^{}]+)\}\}")


class VariableStore:
    """Values extracted from earlier responses, keyed by variable name.

    The store only grows during a run. Placeholders use the literal form
    ``{{name}}``; names that are not stored are left in place.
    """

    def __init__(self, initial: Mapping[str, JsonValue] | None = None) -> None:
        self._values: dict[str, JsonValue] = dict(initial or {})

    def set(self, name: str, value: JsonValue) -> None:
        self._values[name] = value

    def snapshot(self) -> dict[str, JsonValue]:
        """Return a shallow copy of the stored variables."""
        return dict(self._values)

    def substitute(self, text: str) -> str:
        """Replace known ``{{name}}`` placeholders in one left-to-right pass."""

        def _replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in self._values:
                return match.group(0)
            return to_canonical_text(self._values[name])

        return PLACEHOLDER_PATTERN.sub(_replace, text)

    def substitute_deep(self, value: JsonValue) -> JsonValue:
        """Return a copy of ``value`` with every nested string substituted."""
        if isinstance(value, str):
            return self.substitute(value)
        if isinstance(value, dict):
            return {key: self.substitute_deep(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self.substitute_deep(item) for item in value]
        return value

    def substitute_values(self, mapping: Mapping[str, str]) -> dict[str, str]:
        """Substitute every value of a flat string mapping; keys stay as-is."""
        return {key: self.substitute(value) for key, value in mapping.items()}
