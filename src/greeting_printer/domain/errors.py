"""Domain error raised when rendered output cannot reach its stream."""

from __future__ import annotations


class OutputWriteFailure(RuntimeError):
    """Standard output refused a write (broken pipe, closed descriptor).

    Never recovered locally; the CLI maps it to a non-zero exit status.
    """


__all__ = ["OutputWriteFailure"]
