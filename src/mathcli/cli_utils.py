"""Shared CLI helpers: exit codes, console output and logging setup.

stdout is reserved for the result line. Everything else (errors, warnings,
logs) goes to stderr through the shared Rich console.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2  # Same code Click uses for usage errors

PACKAGE_LOGGER = "mathcli"

# Shared console for diagnostics
console = Console(stderr=True, highlight=False, soft_wrap=True)


def _setup_logging(verbose: int = 0, quiet: bool = False) -> None:
    """Configure the mathcli logger with a Rich handler on stderr.

    Replaces any handler installed by a previous call, so repeated
    invocations in one process do not stack output. The root logger is
    left untouched.

    Args:
        verbose: 0 = WARNING, 1 = INFO, 2 or more = DEBUG.
        quiet: Only show errors. Takes precedence over verbose.

    """
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console,
        show_time=verbose >= 2,
        show_path=verbose >= 2,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def _error(message: str) -> None:
    """Print an error message to stderr."""
    console.print(f"[red]Error:[/red] {escape(message)}")


def _warning(message: str) -> None:
    """Print a warning message to stderr."""
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}")
