"""Logging setup.

Modules log through ``logging.getLogger(__name__)``; the CLI calls
:func:`setup_logging` once to route the ``vsync`` logger hierarchy to a
rich console handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "vsync"


def setup_logging(
    level: int | str = logging.WARNING,
    *,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the vsync logger.

    Calling it again replaces the previous handler, so the level can be
    changed after flags are parsed.

    Args:
        level: Logging level name or number
        console: Rich console to log to (stderr by default)

    Returns:
        The configured ``vsync`` logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
