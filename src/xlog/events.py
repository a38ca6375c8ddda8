"""Structured event base model.

Application events subclass :class:`XLogEvent` and declare their own payload
fields.  Only ``timestamp``, ``crid`` and ``path`` are known to xlog; the
emitter fills them in when they are ``None`` and leaves everything else
alone.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class XLogEvent(BaseModel):
    """Base structured event.

    Ad-hoc fields are accepted (``extra="allow"``) so one-off events do not
    need a subclass::

        append_event(XLogEvent(topic="login", user_id=42))
    """

    model_config = ConfigDict(extra="allow")

    timestamp: datetime | None = None
    crid: str | None = None
    path: str | None = None
