"""Logging configuration for entry points.

Domain and infrastructure modules only create module-level loggers; handlers
are attached here, once, by whichever script is running.
"""

from __future__ import annotations

import logging
import sys

# Top-level packages whose loggers share the configured handlers
LOGGER_NAMESPACES: tuple[str, ...] = ("domain", "infrastructure")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Configure console (and optional file) logging for project loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write logs to
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Avoid duplicate output when called more than once
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger(__name__).debug("Logging initialized at level %s", level)
