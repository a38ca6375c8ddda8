"""String normalization helpers.

``normalize`` is the blank-to-``None`` rule used by every setter in the
context store.  ``normalize_keyword`` additionally rewrites the characters
that delimit ``KEYWORD[a,b,c]`` tokens so a rendered keyword list can be
split back into its tokens unambiguously.
"""

from __future__ import annotations

from typing import Any

# Delimiters of the keyword scheme and their replacements.
_KEYWORD_REPLACEMENTS = str.maketrans({",": ";", "[": "(", "]": ")"})


def normalize(value: str | None) -> str | None:
    """Return the trimmed string, or ``None`` when it is ``None`` or blank."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def normalize_keyword(value: Any) -> str | None:
    """Render *value* as a keyword-safe token, or ``None`` to drop it.

    ``,`` becomes ``;``, brackets become parentheses and every whitespace
    character (line and paragraph separators included) becomes a space.
    The result is trimmed; blank results are ``None``.
    """
    if value is None:
        return None
    text = normalize(str(value))
    if text is None:
        return None
    text = text.translate(_KEYWORD_REPLACEMENTS)
    return normalize("".join(" " if ch.isspace() else ch for ch in text))
