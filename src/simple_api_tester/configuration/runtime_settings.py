"""Run settings entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunSettings:
    """Knobs that apply to a whole run."""

    config_path: Path
    base_url: str = ""
    stop_on_failure: bool = False
    output_path: Path | None = None

    @classmethod
    def create(
        cls,
        config_path: Path | str,
        *,
        base_url: str | None = None,
        stop_on_failure: bool = False,
        output_path: Path | str | None = None,
    ) -> RunSettings:
        """Build settings, normalizing the base URL once."""
        return cls(
            config_path=Path(config_path),
            base_url=normalize_base_url(base_url),
            stop_on_failure=stop_on_failure,
            output_path=Path(output_path) if output_path else None,
        )


def normalize_base_url(base_url: str | None) -> str:
    """Strip surrounding whitespace and trailing slashes from the base URL."""
    return (base_url or "").strip().rstrip("/")
