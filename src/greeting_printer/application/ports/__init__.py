"""Ports the application layer depends on."""

from __future__ import annotations

from .console import LineWriterPort

__all__ = ["LineWriterPort"]
