"""Static distribution metadata shared by the CLI and packaging checks."""

from __future__ import annotations

name = "greeting_printer"
title = "Print a fixed list of greetings in several languages"
version = "1.0.0"
shell_command = "greeting-printer"
