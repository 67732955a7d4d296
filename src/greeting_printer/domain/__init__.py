"""Domain value objects and errors used by the greeting printer."""

from __future__ import annotations

from .errors import OutputWriteFailure
from .greetings import GREETINGS, Greeting, summary_line

__all__ = [
    "GREETINGS",
    "Greeting",
    "OutputWriteFailure",
    "summary_line",
]
