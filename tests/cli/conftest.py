"""Fixtures for console script tests."""

from __future__ import annotations

import logging

import pytest

from infrastructure.logging_config import LOGGER_NAMESPACES


@pytest.fixture(autouse=True)
def restore_project_loggers():
    """Undo setup_logging() so handlers bound to captured streams do not leak."""
    saved = {
        name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers))
        for name in LOGGER_NAMESPACES
    }
    yield
    for name, (level, handlers) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers[:] = handlers
