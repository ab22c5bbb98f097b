# MIT License (see LICENSE)
"""
Logging setup for scripts and examples.

The library itself only creates module loggers under the ``disc_migration``
namespace and never adds handlers; call ``setup_logging`` from a script to
see its output.
"""
from __future__ import annotations
import logging
import sys

PACKAGE_LOGGER = "disc_migration"

# Per-step debug output is dense, so DEBUG runs also show where it came from.
BRIEF_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"
TRACE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s:%(lineno)d %(message)s"


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Attach a stdout handler (and optionally a file handler) to the package logger.

    Args:
        level: Logging level or its name ("DEBUG", "INFO", ...).
        log_file: Optional path; the file is overwritten.

    Returns:
        The configured package logger.

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown logging level: {level}")
        level = value

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Repeated calls replace the handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        TRACE_FORMAT if level <= logging.DEBUG else BRIEF_FORMAT,
        datefmt="%H:%M:%S",
    )
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to {len(handlers)} handler(s) at level {logging.getLevelName(level)}")
    return logger
