"""Logging setup shared by the generator modules and the CLI.

Modules obtain their logger with ``get_logger(__name__)``; the CLI calls
``setup_logging`` once to route records through a rich console handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "schema_bindgen"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger inside the ``schema_bindgen`` hierarchy.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
            hierarchy are nested under it.

    Returns:
        Logger instance.
    """
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    if name == _LOGGER_NAME or name.startswith(f"{_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def setup_logging(
    verbose: bool = False, console: Console | None = None
) -> logging.Logger:
    """Configure the package logger with a rich handler.

    Args:
        verbose: Emit debug records when True, info and above otherwise.
        console: Console to log to (defaults to stderr).

    Returns:
        The configured package logger.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Drop handlers from an earlier call so repeated CLI runs don't double-log
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)

    return logger


__all__ = ["get_logger", "setup_logging"]
