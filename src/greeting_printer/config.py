"""Diagnostics settings sourced from the environment and an optional ``.env``.

Purpose
-------
Collect the few knobs that influence *diagnostics* (log threshold, traceback
verbosity) without ever touching what the printer writes to standard output.

Contents
--------
* :class:`GreetingPrinterSettings` - frozen settings snapshot.
* :func:`load_settings` - parse settings from a mapping (defaults to
  ``os.environ``).
* :func:`should_use_dotenv` / :func:`enable_dotenv` - opt-in ``.env`` loading
  backed by python-dotenv.

System Role
-----------
Read once by :func:`greeting_printer.cli.main` before the command runs.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "GREETING_PRINTER_"
DOTENV_ENV_VAR = f"{ENV_PREFIX}USE_DOTENV"
LOG_LEVEL_ENV_VAR = f"{ENV_PREFIX}LOG_LEVEL"
TRACEBACK_ENV_VAR = f"{ENV_PREFIX}TRACEBACK"

_TRUTHY = {"1", "true", "yes", "on"}
_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


@dataclass(slots=True, frozen=True)
class GreetingPrinterSettings:
    """Resolved diagnostics settings.

    Attributes
    ----------
    log_level:
        :mod:`logging` level number for the stderr handler.
    traceback:
        Whether failures print a full traceback instead of a one-line message.
    """

    log_level: int = logging.WARNING
    traceback: bool = False


def _env_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def _coerce_level(value: str | None) -> int:
    """Translate a level name into its :mod:`logging` constant.

    >>> _coerce_level("debug")
    10
    >>> _coerce_level(None)
    30
    """
    if value is None or not value.strip():
        return logging.WARNING
    normalized = value.strip().upper()
    if normalized not in _LEVEL_NAMES:
        raise ValueError(f"Unknown log level: {value!r}")
    return getattr(logging, normalized)


def load_settings(env: Mapping[str, str] | None = None) -> GreetingPrinterSettings:
    """Build :class:`GreetingPrinterSettings` from ``env`` (default ``os.environ``).

    Raises
    ------
    ValueError
        When ``GREETING_PRINTER_LOG_LEVEL`` names an unknown level.
    """

    source = os.environ if env is None else env
    return GreetingPrinterSettings(
        log_level=_coerce_level(source.get(LOG_LEVEL_ENV_VAR)),
        traceback=_env_bool(source.get(TRACEBACK_ENV_VAR)),
    )


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit caller decision wins over the environment toggle.

    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """

    if explicit is not None:
        return explicit
    return _env_bool(env_value)


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` once per process and return its path.

    The search walks upwards from ``search_from`` (default: the working
    directory). Variables already present in the environment keep precedence.
    Returns ``None`` when no file was found.
    """

    global _DOTENV_LOADED, _DOTENV_PATH
    if _DOTENV_LOADED:
        return _DOTENV_PATH

    if search_from is None:
        found = find_dotenv(usecwd=True)
    else:
        found = _find_upwards(search_from)
    _DOTENV_LOADED = True
    if not found:
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_PATH = path
    return path


def _find_upwards(start: Path) -> str:
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_PATH
    _DOTENV_LOADED = False
    _DOTENV_PATH = None


__all__ = [
    "DOTENV_ENV_VAR",
    "GreetingPrinterSettings",
    "LOG_LEVEL_ENV_VAR",
    "TRACEBACK_ENV_VAR",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
]
