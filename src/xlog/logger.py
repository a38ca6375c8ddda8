"""Logging setup with CRID enrichment.

Uses structlog for structured application logs.  Every entry, whether it
comes from a structlog logger or a plain ``logging`` logger, carries the
current ``crid`` (and ``path`` when set).

Structured events get their own handler on the ``xlog.Event`` logger that
writes the JSON line as-is, so log collectors can route them separately.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from xlog.context import crid_mark, get_crid, get_path
from xlog.core.config import XLogSettings
from xlog.emitter import EVENT_LOGGER_NAME

# Marks handlers installed here so setup_logging() can replace them
_XLOG_HANDLER = "_xlog_handler"


def add_xlog_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add crid and path to every log entry."""
    event_dict.setdefault("crid", get_crid())
    path = get_path()
    if path is not None:
        event_dict.setdefault("path", path)
    return event_dict


class XLogContextFilter(logging.Filter):
    """Inject ``crid``, ``crid_mark`` and ``path`` into stdlib log records.

    For handlers using a %-style format such as
    ``"%(asctime)s %(crid_mark)s %(message)s"``.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.crid = get_crid()
        record.crid_mark = crid_mark()
        record.path = get_path()
        return True


def _stream(name: str) -> TextIO:
    return sys.stdout if name == "stdout" else sys.stderr


def _install(target: logging.Logger, handler: logging.Handler) -> None:
    for old in [h for h in target.handlers if getattr(h, _XLOG_HANDLER, False)]:
        target.removeHandler(old)
    setattr(handler, _XLOG_HANDLER, True)
    target.addHandler(handler)


def setup_logging(settings: XLogSettings | None = None) -> None:
    """Configure structured logging for the application.

    Safe to call more than once; handlers from earlier calls are replaced.

    Args:
        settings: Logging settings.  Defaults to ``XLogSettings()``, which
            reads ``XLOG_*`` environment variables.
    """
    settings = settings or XLogSettings()
    log_level = getattr(logging, settings.log_level, logging.INFO)

    shared: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_xlog_context,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if settings.log_format == "json":
        rendering: list[Any] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        rendering = [structlog.dev.ConsoleRenderer()]

    app_handler = logging.StreamHandler(_stream(settings.log_stream))
    app_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *rendering,
            ],
        )
    )
    root = logging.getLogger()
    _install(root, app_handler)
    root.setLevel(log_level)

    # Events are already JSON; write them verbatim and keep them off root
    event_handler = logging.StreamHandler(_stream(settings.event_stream))
    event_handler.setFormatter(logging.Formatter("%(message)s"))
    event_logger = logging.getLogger(EVENT_LOGGER_NAME)
    _install(event_logger, event_handler)
    event_logger.setLevel(logging.INFO)
    event_logger.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
