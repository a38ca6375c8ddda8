"""Canonical ID and timestamp factories.

Correlation IDs
---------------
16 lowercase hex characters (64 random bits).  Collisions are possible but
improbable and are not checked for.

Timestamp Rule
--------------
All timestamps are ``datetime`` with ``tzinfo=timezone.utc``, never naive.
"""

from __future__ import annotations

import secrets
from datetime import datetime, timezone


def random_hex16() -> str:
    """Generate a new 16-character lowercase hex correlation ID."""
    return secrets.token_hex(8)


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)
