"""Searchable keyword tokens for free-text log lines.

``keyword("order", 42, None)`` renders ``KEYWORD[order,42]``, a marker that
log search can match on regardless of the surrounding message text.
"""

from __future__ import annotations

from typing import Any

from xlog.core.strings import normalize_keyword

MAX_KEYWORDS = 100


def keyword(*values: Any) -> str:
    """Render *values* as ``KEYWORD[v1,v2,...]``.

    A single list or tuple argument is treated as the value sequence.  A
    lone ``None`` argument stands for a missing sequence.  Missing or
    oversized (more than ``MAX_KEYWORDS``) input renders as ``""``.

    Values that normalize to nothing are dropped; the rest keep their input
    order.  See :func:`xlog.core.strings.normalize_keyword` for escaping.
    """
    if len(values) == 1:
        if values[0] is None:
            return ""
        if isinstance(values[0], (list, tuple)):
            values = tuple(values[0])

    if len(values) > MAX_KEYWORDS:
        return ""

    tokens = [t for t in (normalize_keyword(v) for v in values) if t is not None]
    return "KEYWORD[" + ",".join(tokens) + "]"
