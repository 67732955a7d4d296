"""Facade wiring the domain, use case, and console adapter together.

Purpose
-------
Expose a small API for printing the greeting list, capturing it as text, and
routing diagnostics to standard error.

Contents
--------
* :func:`print_greetings` - write the greeting block to standard output.
* :func:`render_greetings` - return the exact block as a string.
* :func:`configure_logging` - install the Rich stderr log handler.

System Role
-----------
Single composition point: the CLI and library callers go through these
functions so adapter construction lives at the edge of the system.
"""

from __future__ import annotations

import logging
from io import StringIO

from rich.console import Console
from rich.logging import RichHandler

from .adapters import GreetingConsole, RichConsoleAdapter
from .application.use_cases.print_greetings import create_print_greetings

PACKAGE_LOGGER = "greeting_printer"

_HANDLER: logging.Handler | None = None


def print_greetings(*, console: Console | None = None) -> int:
    """Write the greetings, a blank line, and the total to ``console``.

    Parameters
    ----------
    console:
        Optional Rich console; defaults to a :class:`GreetingConsole` bound to
        standard output.

    Returns
    -------
    int
        Number of greetings written.

    Raises
    ------
    OutputWriteFailure
        When the output stream rejects a write.

    Examples
    --------
    >>> print_greetings()
    1. [English] Hello, World!
    2. [Spanish] Hola, Mundo!
    3. [French] Bonjour, le Monde!
    4. [German] Hallo, Welt!
    5. [Italian] Ciao, Mondo!
    <BLANKLINE>
    Total greetings: 5
    5
    """

    adapter = RichConsoleAdapter(console=console)
    return create_print_greetings(writer=adapter)()


def render_greetings() -> str:
    """Return the text :func:`print_greetings` writes, without printing it.

    >>> render_greetings().splitlines()[-1]
    'Total greetings: 5'
    """

    buffer = StringIO()
    print_greetings(console=GreetingConsole(file=buffer, highlight=False))
    return buffer.getvalue()


def configure_logging(level: int = logging.WARNING, *, console: Console | None = None) -> logging.Handler:
    """Route package log records at ``level`` and above to standard error.

    Calling again replaces the previously installed handler, so repeated CLI
    invocations in one process never duplicate records.
    """

    global _HANDLER
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _HANDLER is not None:
        package_logger.removeHandler(_HANDLER)
    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setLevel(level)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    _HANDLER = handler
    return handler


__all__ = ["configure_logging", "print_greetings", "render_greetings"]
