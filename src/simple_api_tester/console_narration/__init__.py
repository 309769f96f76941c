"""Console narration exports."""

from .progress_narrator import ConsoleRunNarrator, QuietRunNarrator, RunNarrator, pass_rate_color

__all__ = [
    "RunNarrator",
    "ConsoleRunNarrator",
    "QuietRunNarrator",
    "pass_rate_color",
]
