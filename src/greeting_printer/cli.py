"""Command-line adapter printing the greeting list.

Purpose
-------
Expose :func:`greeting_printer.print_greetings` as the ``greeting-printer``
console script and ``python -m greeting_printer``.

Contents
--------
* :func:`cli` - rich-click command; every argument is accepted and ignored.
* :func:`main` - applies diagnostics settings, runs the command through
  :func:`lib_cli_exit_tools.run_cli`, and returns the exit code.

System Role
-----------
Presentation layer. Output failures raised by the adapter propagate here and
are mapped to a non-zero exit status by ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click

from . import __init__conf__, config
from .greeting_printer import configure_logging, print_greetings

logger = logging.getLogger(__name__)


@click.command(
    help=__init__conf__.title,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.argument("ignored", nargs=-1, type=click.UNPROCESSED)
def cli(ignored: tuple[str, ...]) -> None:
    """Print every greeting followed by the total."""

    if ignored:
        logger.debug("ignoring command-line arguments", extra={"arguments": list(ignored)})
    print_greetings()


def main(argv: Sequence[str] | None = None) -> int:
    """Run :func:`cli` and return its exit code.

    Parameters
    ----------
    argv:
        Optional argument strings (defaults to ``sys.argv[1:]``); ignored by
        the command itself.

    Returns
    -------
    int
        Zero on success, non-zero when the output stream failed or the
        diagnostics settings are invalid.
    """

    if config.should_use_dotenv(env_value=os.getenv(config.DOTENV_ENV_VAR)):
        config.enable_dotenv()
    try:
        settings = config.load_settings()
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        return 2

    configure_logging(settings.log_level)
    logger.debug("starting %s %s", __init__conf__.name, __init__conf__.version)

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    lib_cli_exit_tools.config.traceback = settings.traceback
    lib_cli_exit_tools.config.traceback_force_color = False
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
