"""Execution-context-local correlation id (CRID) and request path.

Both values live in :class:`contextvars.ContextVar` slots, so each thread
and each asyncio task sees only what it (or the context it was copied
from) set.  Nothing needs to be passed down the call chain::

    set_crid(request.headers.get("X-Crid"))   # mints one when blank
    set_path(request.path)
    try:
        handle(request)                        # get_crid() works anywhere
    finally:
        clear()

Slots are not cleaned up when a thread finishes a unit of work.  Pooled
worker threads keep whatever the previous request left behind unless the
caller clears at the boundary; :func:`scope` and :func:`bind_context` do
that for you.
"""

from __future__ import annotations

import contextlib
import contextvars
import functools
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from xlog.core.ids import random_hex16
from xlog.core.strings import normalize

T = TypeVar("T")

# Correlation id reported when none was set in this context
EMPTY_CRID = "-"

_crid: contextvars.ContextVar[str] = contextvars.ContextVar(
    "xlog_crid", default=EMPTY_CRID
)
_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "xlog_path", default=None
)


# -- correlation id ---------------------------------------------------------


def get_crid() -> str:
    """Return the CRID of the current context, or ``"-"`` if unset."""
    return _crid.get()


def set_crid(value: str | None) -> str:
    """Set the CRID of the current context and return it.

    Blank or ``None`` input stores a fresh 16-hex-character id, so calling
    ``set_crid(incoming_header)`` unconditionally at request entry is always
    correct.
    """
    crid = normalize(value)
    if crid is None:
        crid = random_hex16()
    _crid.set(crid)
    return crid


def clear_crid() -> None:
    """Reset the CRID of the current context to ``"-"``."""
    _crid.set(EMPTY_CRID)


def crid_mark() -> str:
    """Return the CRID as ``CRID[<crid>]`` for free-text log lines."""
    return f"CRID[{get_crid()}]"


# -- path -------------------------------------------------------------------


def get_path() -> str | None:
    """Return the request path of the current context, or ``None``."""
    return _path.get()


def set_path(value: str | None) -> None:
    """Set the request path; blank input is stored as ``None``."""
    _path.set(normalize(value))


def clear_path() -> None:
    _path.set(None)


# -- unit-of-work helpers ---------------------------------------------------


def clear() -> None:
    """Reset both slots to their defaults."""
    clear_crid()
    clear_path()


@contextlib.contextmanager
def scope(crid: str | None = None, path: str | None = None) -> Iterator[str]:
    """Run a unit of work with its own CRID and path.

    Yields the CRID in effect (minted when *crid* is blank).  Both slots are
    cleared on exit, including when the body raises.  Slots are cleared, not
    restored, so do not nest scopes in one context.
    """
    cid = set_crid(crid)
    set_path(path)
    try:
        yield cid
    finally:
        clear()


def bind_context(fn: Callable[..., T]) -> Callable[..., T]:
    """Wrap *fn* to run in a copy of the caller's current context.

    Use when handing work to a thread pool::

        executor.submit(bind_context(work), item)

    The worker sees the CRID and path that were current when
    ``bind_context`` was called.  Each call runs in a fresh copy, so
    whatever *fn* sets never reaches the pooled thread's own context or
    the caller's.
    """
    captured = contextvars.copy_context()

    @functools.wraps(fn)
    def _run(*args: Any, **kwargs: Any) -> T:
        return captured.copy().run(fn, *args, **kwargs)

    return _run
