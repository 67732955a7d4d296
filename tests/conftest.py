from __future__ import annotations

import logging
from collections.abc import Iterator
from io import StringIO

import pytest
from rich.console import Console

from greeting_printer import config
from greeting_printer import greeting_printer as facade

EXPECTED_OUTPUT = (
    "1. [English] Hello, World!\n"
    "2. [Spanish] Hola, Mundo!\n"
    "3. [French] Bonjour, le Monde!\n"
    "4. [German] Hallo, Welt!\n"
    "5. [Italian] Ciao, Mondo!\n"
    "\n"
    "Total greetings: 5\n"
)


@pytest.fixture
def record_console() -> Console:
    """Rich console writing into memory with colour disabled."""

    return Console(file=StringIO(), record=True, color_system=None, width=120)


@pytest.fixture
def expected_output() -> str:
    return EXPECTED_OUTPUT


@pytest.fixture(autouse=True)
def _isolate_diagnostics(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset env toggles, dotenv state, and the package log handler around each test."""

    for name in (config.DOTENV_ENV_VAR, config.LOG_LEVEL_ENV_VAR, config.TRACEBACK_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    config._reset_dotenv_state_for_testing()
    yield
    config._reset_dotenv_state_for_testing()
    package_logger = logging.getLogger(facade.PACKAGE_LOGGER)
    if facade._HANDLER is not None:
        package_logger.removeHandler(facade._HANDLER)
        facade._HANDLER = None
    package_logger.setLevel(logging.NOTSET)
