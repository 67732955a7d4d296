"""Rich-powered console adapter implementing :class:`LineWriterPort`.

Purpose
-------
Bridge the application layer with Rich while keeping the emitted bytes exactly
the text handed in: no markup parsing, no highlighting, no hard wrapping.

Contents
--------
* :class:`GreetingConsole` - Rich console that reports broken pipes as
  :class:`~greeting_printer.domain.errors.OutputWriteFailure`.
* :class:`RichConsoleAdapter` - adapter constructed by
  :func:`greeting_printer.print_greetings`.

System Role
-----------
The only sink for standard output. Stream failures surface here and are
translated into :class:`~greeting_printer.domain.errors.OutputWriteFailure`.
"""

from __future__ import annotations

import os
import sys

from rich.console import Console

from greeting_printer.application.ports.console import LineWriterPort
from greeting_printer.domain.errors import OutputWriteFailure


class GreetingConsole(Console):
    """Console raising :class:`OutputWriteFailure` instead of exiting on a broken pipe.

    Rich handles ``BrokenPipeError`` itself and calls :meth:`on_broken_pipe`
    from inside the ``except`` block, so the original error is still the
    active exception here.
    """

    def on_broken_pipe(self) -> None:
        cause = sys.exc_info()[1]
        if self.file is sys.__stdout__ and sys.__stdout__ is not None:
            # Later flushes of the process stdout (interpreter shutdown) go to devnull.
            devnull = os.open(os.devnull, os.O_WRONLY)
            try:
                os.dup2(devnull, sys.__stdout__.fileno())
            finally:
                os.close(devnull)
        raise OutputWriteFailure(f"cannot write to output stream: {cause}") from cause


class RichConsoleAdapter(LineWriterPort):
    """Write plain lines through a Rich console."""

    def __init__(self, *, console: Console | None = None) -> None:
        """Use ``console`` or a :class:`GreetingConsole` bound to standard output."""
        self._console = console if console is not None else GreetingConsole(highlight=False)

    def write_line(self, text: str) -> None:
        """Print ``text`` verbatim followed by a newline.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> RichConsoleAdapter(console=GreetingConsole(file=buffer)).write_line("1. [English] Hello, World!")
        >>> buffer.getvalue()
        '1. [English] Hello, World!\\n'
        """
        try:
            self._console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
        except (OSError, ValueError) as exc:
            raise OutputWriteFailure(f"cannot write to output stream: {exc}") from exc


__all__ = ["GreetingConsole", "RichConsoleAdapter"]
