"""Public package surface for the greeting printer.

Exporting :func:`print_greetings` here lets both ``import greeting_printer``
and ``python -m greeting_printer`` exercise the same code path.
"""

from __future__ import annotations

from .domain import GREETINGS, Greeting, OutputWriteFailure
from .greeting_printer import configure_logging, print_greetings, render_greetings

__all__ = [
    "GREETINGS",
    "Greeting",
    "OutputWriteFailure",
    "configure_logging",
    "print_greetings",
    "render_greetings",
]
