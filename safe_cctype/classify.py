"""Locale-aware character classification predicates.

Each predicate widens its argument to the unsigned-byte domain before calling
the matching `<ctype.h>` routine, so every one of the 256 byte values has a
defined answer under the active `LC_CTYPE` locale.
"""

from __future__ import annotations

from .chars import NarrowChar, widen
from .facility import get_facility


def _classify(routine_name: str, ch: NarrowChar) -> bool:
    """Widen `ch` and run one facility classification routine on it."""

    code = widen(ch)
    return get_facility().classify(routine_name, code)


def is_alpha(ch: NarrowChar) -> bool:
    """Return whether `ch` is a letter."""

    return _classify("isalpha", ch)


def is_digit(ch: NarrowChar) -> bool:
    """Return whether `ch` is a decimal digit."""

    return _classify("isdigit", ch)


def is_alnum(ch: NarrowChar) -> bool:
    """Return whether `ch` is a letter or a decimal digit."""

    return _classify("isalnum", ch)


def is_space(ch: NarrowChar) -> bool:
    """Return whether `ch` is whitespace (space, `\\t`, `\\n`, `\\v`, `\\f`, `\\r` in "C")."""

    return _classify("isspace", ch)


def is_cntrl(ch: NarrowChar) -> bool:
    """Return whether `ch` is a control character."""

    return _classify("iscntrl", ch)


def is_punct(ch: NarrowChar) -> bool:
    """Return whether `ch` is punctuation: graphical but not alphanumeric."""

    return _classify("ispunct", ch)


def is_print(ch: NarrowChar) -> bool:
    """Return whether `ch` is printable, space included."""

    return _classify("isprint", ch)


def is_graph(ch: NarrowChar) -> bool:
    """Return whether `ch` is printable and not a space."""

    return _classify("isgraph", ch)


def is_xdigit(ch: NarrowChar) -> bool:
    """Return whether `ch` is a hexadecimal digit."""

    return _classify("isxdigit", ch)
