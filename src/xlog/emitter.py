"""Structured event emission.

:func:`append_event` enriches an :class:`~xlog.events.XLogEvent` with the
current context, serializes it to one JSON line and writes it at INFO on
the dedicated ``xlog.Event`` logger.  Emission failures are logged, never
raised -- a structured event must never break the request that produced it.
"""

from __future__ import annotations

import enum
import json
import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from pathlib import PurePath
from typing import Any, TypeVar

from xlog.context import get_crid, get_path
from xlog.core.errors import (
    EmitError,
    EventEnrichmentError,
    EventSerializationError,
    EventWriteError,
)
from xlog.core.ids import utc_now
from xlog.events import XLogEvent

EVENT_LOGGER_NAME = "xlog.Event"

# Pattern for collector-side date parsing; format_timestamp() renders it as
# millisecond ISO-8601 with a numeric offset.
DATE_FORMAT = "yyyy-MM-dd'T'HH:mm:ss.SSSXXX"

logger = logging.getLogger(__name__)
_event_logger = logging.getLogger(EVENT_LOGGER_NAME)

E = TypeVar("E", bound=XLogEvent)


@dataclass(frozen=True)
class EmitResult:
    """Outcome of one :func:`append_event` call."""

    ok: bool
    line: str | None = None
    error: str | None = None

    @classmethod
    def succeeded(cls, line: str) -> EmitResult:
        return cls(ok=True, line=line)

    @classmethod
    def failed(cls, error: str) -> EmitResult:
        return cls(ok=False, error=error)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def format_timestamp(value: datetime) -> str:
    """Render *value* as ``2024-01-02T03:04:05.678+00:00``.

    Naive datetimes are taken as local time.  UTC is written as
    ``+00:00``, never ``Z``.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.astimezone()
    return value.isoformat(timespec="milliseconds")


def _json_default(obj: Any) -> Any:
    if isinstance(obj, datetime):
        return format_timestamp(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, (Decimal, uuid.UUID, PurePath)):
        return str(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def event_type_name(event: Any) -> str:
    cls = type(event)
    return f"{cls.__module__}.{cls.__qualname__}"


def serialize_event(event: XLogEvent) -> str:
    """Serialize *event* to a single compact JSON line.

    Raises:
        EventSerializationError: if any field cannot be encoded.
    """
    try:
        data = event.model_dump(mode="python")
        return json.dumps(
            data,
            default=_json_default,
            ensure_ascii=False,
            separators=(",", ":"),
            allow_nan=False,
        )
    except Exception as exc:
        raise EventSerializationError(event_type_name(event), str(exc)) from exc


# ---------------------------------------------------------------------------
# Emission
# ---------------------------------------------------------------------------


def enrich(event: E) -> E:
    """Fill ``timestamp``, ``crid`` and ``path`` where they are ``None``.

    Values the caller already set are kept.  Mutable events are updated in
    place and returned; frozen events are left untouched and an enriched
    copy is returned.
    """
    update: dict[str, Any] = {}
    if event.timestamp is None:
        update["timestamp"] = utc_now()
    if event.crid is None:
        update["crid"] = get_crid()
    if event.path is None:
        update["path"] = get_path()
    if not update:
        return event
    if type(event).model_config.get("frozen"):
        return event.model_copy(update=update)
    for name, value in update.items():
        setattr(event, name, value)
    return event


def _enrich(event: XLogEvent) -> XLogEvent:
    try:
        return enrich(event)
    except Exception as exc:
        raise EventEnrichmentError(event_type_name(event), str(exc)) from exc


def _write(event: XLogEvent, line: str) -> None:
    try:
        _event_logger.info(line)
    except Exception as exc:
        raise EventWriteError(event_type_name(event), str(exc)) from exc


def append_event(event: XLogEvent) -> EmitResult:
    """Enrich, serialize and write *event* on the ``xlog.Event`` logger.

    Never raises for enrichment, serialization or write failures.  Those
    are reported as one ERROR line on this module's logger and returned as
    a failed :class:`EmitResult`.
    """
    try:
        enriched = _enrich(event)
        line = serialize_event(enriched)
        _write(enriched, line)
    except EmitError as exc:
        logger.error(
            "failed to emit structured event [%s]: %s",
            exc.event_type,
            exc.detail,
            exc_info=exc,
        )
        return EmitResult.failed(str(exc))
    return EmitResult.succeeded(line)
