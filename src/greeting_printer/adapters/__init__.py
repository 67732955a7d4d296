"""Concrete adapters implementing the application ports."""

from __future__ import annotations

from .console.rich_console import GreetingConsole, RichConsoleAdapter

__all__ = ["GreetingConsole", "RichConsoleAdapter"]
