"""numprompt CLI -- ask for a number above 10 until one is entered.

Loaded via the ``numprompt`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from numprompt._version import __version__
from numprompt.cli.formatting import format_error, format_summary, get_console
from numprompt.exceptions import InputExhaustedError
from numprompt.validator import InputValidator

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@contextmanager
def _stderr_logging(level: str) -> Iterator[None]:
    """Send ``numprompt`` log records to stderr at ``level`` for one command run.

    The handler is attached to the package logger rather than the root
    logger, and is removed again on exit, so repeated in-process runs each
    get their own stream and level.
    """
    pkg_logger = logging.getLogger("numprompt")
    previous_level = pkg_logger.level
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(getattr(logging, level.upper()))
    try:
        yield
    finally:
        pkg_logger.removeHandler(handler)
        pkg_logger.setLevel(previous_level)


@click.command()
@click.version_option(__version__, prog_name="numprompt")
@click.option(
    "--log-level",
    default="WARNING",
    envvar="NUMPROMPT_LOG_LEVEL",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Log level for diagnostics written to stderr.",
)
def cli(log_level: str) -> None:
    """Ask for a number above 10 until one is entered."""
    console = get_console()

    with _stderr_logging(log_level):
        try:
            result = InputValidator().run()
        except InputExhaustedError as e:
            format_error(str(e), console)
            raise SystemExit(1) from None

        logger.info("Accepted %s after %d attempt(s)", result.value, result.attempts)
        if logger.isEnabledFor(logging.DEBUG):
            format_summary(result, console)
