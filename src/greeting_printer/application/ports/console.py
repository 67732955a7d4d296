"""Console port describing line-oriented output.

Purpose
-------
Define the narrow protocol the print use case writes through so the terminal
library stays an adapter concern.

Contents
--------
* :class:`LineWriterPort` - runtime-checkable protocol with a single
  ``write_line`` method.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineWriterPort(Protocol):
    """Write complete lines of text to an output stream."""

    def write_line(self, text: str) -> None:
        """Write ``text`` followed by a line terminator.

        Implementations raise :class:`~greeting_printer.domain.errors.OutputWriteFailure`
        when the stream rejects the write.
        """


__all__ = ["LineWriterPort"]
