"""Logging configuration for the CLI process.

Library code only ever calls ``logging.getLogger(__name__)``; handlers
are installed here, once, by the CLI entry point.  Rich is imported
lazily so logging keeps working when it is not installed.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain stream handler."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler
    rich_handler = RichHandler(console=Console(stderr=True), show_path=False)
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    return rich_handler


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the root logger for a CLI run.

    Parameters
    ----------
    verbose:
        ``True`` logs at ``DEBUG``; otherwise only warnings and above
        are shown.

    Returns
    -------
    logging.Logger
        The ``caesar_cipher`` package logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, handlers=[_build_handler()], force=True)
    return logging.getLogger("caesar_cipher")
