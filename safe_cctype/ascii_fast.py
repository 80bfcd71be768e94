"""Locale-independent ASCII case mapping.

These helpers only map `a..z` and `A..Z` and never consult the platform
facility or the active locale. Use them when data is known to be ASCII.
"""

from __future__ import annotations

from .chars import NarrowChar, narrow, widen

_CASE_OFFSET = ord("a") - ord("A")


def ascii_to_upper(ch: NarrowChar) -> NarrowChar:
    """Return `ch` with `a..z` mapped to `A..Z`; other bytes are unchanged."""

    code = widen(ch)
    return narrow(code - _CASE_OFFSET if 0x61 <= code <= 0x7A else code, ch)


def ascii_to_lower(ch: NarrowChar) -> NarrowChar:
    """Return `ch` with `A..Z` mapped to `a..z`; other bytes are unchanged."""

    code = widen(ch)
    return narrow(code + _CASE_OFFSET if 0x41 <= code <= 0x5A else code, ch)
