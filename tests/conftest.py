"""Shared fixtures for the xlog test suite."""

from __future__ import annotations

import logging

import pytest
import structlog

from xlog.context import clear
from xlog.emitter import EVENT_LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_context():
    """Every test starts and ends with empty CRID and path slots."""
    clear()
    yield
    clear()


@pytest.fixture
def restore_logging():
    """Undo setup_logging(): handlers, levels and structlog config."""
    root = logging.getLogger()
    event_logger = logging.getLogger(EVENT_LOGGER_NAME)
    saved = (
        list(root.handlers),
        root.level,
        list(event_logger.handlers),
        event_logger.level,
        event_logger.propagate,
    )
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    event_logger.handlers[:] = saved[2]
    event_logger.setLevel(saved[3])
    event_logger.propagate = saved[4]
    structlog.reset_defaults()
