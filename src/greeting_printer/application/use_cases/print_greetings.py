"""Use case rendering the greeting list followed by its total.

Purpose
-------
Turn the fixed :data:`~greeting_printer.domain.GREETINGS` sequence into output
lines: one per greeting in order, a blank separator, then the summary line.

Contents
--------
* :func:`create_print_greetings` factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator invoked by
:func:`greeting_printer.print_greetings`; the writer it receives decides where
the lines end up.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from greeting_printer.application.ports import LineWriterPort
from greeting_printer.domain import GREETINGS, Greeting, summary_line

logger = logging.getLogger(__name__)


def create_print_greetings(
    *,
    writer: LineWriterPort,
    greetings: Sequence[Greeting] = GREETINGS,
) -> Callable[[], int]:
    """Build the print routine bound to ``writer``.

    Parameters
    ----------
    writer:
        Port receiving each rendered line.
    greetings:
        Ordered greetings to render; defaults to the canonical five.

    Returns
    -------
    Callable[[], int]
        Zero-argument callable that writes every line and returns the number of
        greetings written.

    Examples
    --------
    >>> class _Collect:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def write_line(self, text):
    ...         self.lines.append(text)
    >>> sink = _Collect()
    >>> create_print_greetings(writer=sink)()
    5
    >>> sink.lines[-2:]
    ['', 'Total greetings: 5']
    """

    def print_greetings() -> int:
        """Write each greeting line, a blank line, and the total."""
        for greeting in greetings:
            writer.write_line(greeting.format_line())
            logger.debug("greeting written", extra={"greeting": greeting.to_dict()})
        count = len(greetings)
        writer.write_line("")
        writer.write_line(summary_line(count))
        logger.debug("summary written", extra={"count": count})
        return count

    return print_greetings


__all__ = ["create_print_greetings"]
