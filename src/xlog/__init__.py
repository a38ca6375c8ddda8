"""xlog -- correlation ids, request paths and structured events for logs.

Public API
----------
::

    from xlog import (
        get_crid, set_crid, clear_crid, crid_mark,
        get_path, set_path, clear_path,
        scope, bind_context,
        XLogEvent, append_event,
        keyword,
        setup_logging, get_logger,
    )
"""

from __future__ import annotations

from xlog.context import (
    EMPTY_CRID,
    bind_context,
    clear,
    clear_crid,
    clear_path,
    crid_mark,
    get_crid,
    get_path,
    scope,
    set_crid,
    set_path,
)
from xlog.core.config import XLogSettings, load_settings
from xlog.core.errors import (
    ConfigError,
    EmitError,
    EventEnrichmentError,
    EventSerializationError,
    EventWriteError,
    XLogError,
)
from xlog.emitter import (
    DATE_FORMAT,
    EVENT_LOGGER_NAME,
    EmitResult,
    append_event,
    enrich,
    serialize_event,
)
from xlog.events import XLogEvent
from xlog.keyword import MAX_KEYWORDS, keyword
from xlog.logger import XLogContextFilter, add_xlog_context, get_logger, setup_logging

__all__ = [
    # Context
    "EMPTY_CRID",
    "get_crid",
    "set_crid",
    "clear_crid",
    "crid_mark",
    "get_path",
    "set_path",
    "clear_path",
    "clear",
    "scope",
    "bind_context",
    # Events
    "XLogEvent",
    "EmitResult",
    "EVENT_LOGGER_NAME",
    "DATE_FORMAT",
    "append_event",
    "enrich",
    "serialize_event",
    # Keywords
    "MAX_KEYWORDS",
    "keyword",
    # Logging
    "setup_logging",
    "get_logger",
    "add_xlog_context",
    "XLogContextFilter",
    # Config
    "XLogSettings",
    "load_settings",
    # Errors
    "XLogError",
    "ConfigError",
    "EmitError",
    "EventEnrichmentError",
    "EventSerializationError",
    "EventWriteError",
]
