"""Locale-aware case conversion for single characters and sequences.

Responsibilities:
- Convert one narrow character through `toupper`/`tolower` after widening it.
- Convert whole sequences or `[first, last)` sub-ranges in place.
- Produce converted copies of `str` and bytes-like views.

In-place transforms validate every element of the range before writing any,
so a rejected sequence is never partially converted.

`to_upper` and `to_lower` are plain functions and can be handed straight to
`map()` and similar higher-order calls.
"""

from __future__ import annotations

import array
from collections.abc import MutableSequence
from typing import Any

from .chars import NarrowChar, narrow, widen
from .errors import CharacterSequenceError
from .facility import get_facility


def to_upper(ch: NarrowChar) -> NarrowChar:
    """Return the uppercase mapping of `ch` in the active locale."""

    code = widen(ch)
    return narrow(get_facility().convert("toupper", code), ch)


def to_lower(ch: NarrowChar) -> NarrowChar:
    """Return the lowercase mapping of `ch` in the active locale."""

    code = widen(ch)
    return narrow(get_facility().convert("tolower", code), ch)


def to_upper_inplace(seq: Any, first: int | None = None, last: int | None = None) -> None:
    """Uppercase `seq[first:last]` (the whole sequence by default) in place."""

    _transform_inplace("toupper", seq, first, last)


def to_lower_inplace(seq: Any, first: int | None = None, last: int | None = None) -> None:
    """Lowercase `seq[first:last]` (the whole sequence by default) in place."""

    _transform_inplace("tolower", seq, first, last)


def to_upper_copy(view: str | bytes | bytearray | memoryview) -> str | bytes:
    """Return an uppercased copy of `view`: `str` for `str`, `bytes` otherwise."""

    return _transform_copy("toupper", view)


def to_lower_copy(view: str | bytes | bytearray | memoryview) -> str | bytes:
    """Return a lowercased copy of `view`: `str` for `str`, `bytes` otherwise."""

    return _transform_copy("tolower", view)


def _resolve_range(length: int, first: int | None, last: int | None) -> range:
    """Return validated positions for the `[first, last)` markers."""

    start = 0 if first is None else first
    stop = length if last is None else last
    for marker in (start, stop):
        if isinstance(marker, bool) or not isinstance(marker, int):
            raise CharacterSequenceError(f"Position markers must be ints, got {marker!r}.")
    if not 0 <= start <= stop <= length:
        raise CharacterSequenceError(
            f"Invalid range [{start}, {stop}) for a sequence of length {length}.",
            hint="Markers must satisfy 0 <= first <= last <= len(seq).",
        )
    return range(start, stop)


def _transform_buffer(
    routine_name: str,
    seq: bytearray | memoryview | array.array,
    first: int | None,
    last: int | None,
) -> None:
    """Convert a writable one-byte-per-item buffer, releasing its export on every path."""

    with memoryview(seq) as view:
        if view.readonly:
            raise CharacterSequenceError("Cannot transform a read-only buffer in place.")
        if view.itemsize != 1 or view.ndim != 1:
            raise CharacterSequenceError(
                f"Expected a one-dimensional buffer of single-byte items, got format `{view.format}`."
            )
        positions = _resolve_range(len(view), first, last)
        codes = [widen(view[index]) for index in positions]
        facility = get_facility()
        for index, code in zip(positions, codes):
            view[index] = narrow(facility.convert(routine_name, code), view[index])


def _transform_inplace(routine_name: str, seq: Any, first: int | None, last: int | None) -> None:
    """Dispatch an in-place conversion to the buffer or generic sequence path."""

    if isinstance(seq, (bytearray, memoryview, array.array)):
        _transform_buffer(routine_name, seq, first, last)
        return

    if isinstance(seq, (str, bytes)) or not isinstance(seq, MutableSequence):
        raise CharacterSequenceError(
            f"Expected a mutable character sequence, got `{type(seq).__name__}`.",
            hint="Use `to_upper_copy`/`to_lower_copy` for immutable input.",
        )

    positions = _resolve_range(len(seq), first, last)
    codes = [widen(seq[index]) for index in positions]
    facility = get_facility()
    for index, code in zip(positions, codes):
        seq[index] = narrow(facility.convert(routine_name, code), seq[index])


def _transform_copy(routine_name: str, view: Any) -> str | bytes:
    """Return a converted copy of `view` in its matching output type."""

    if isinstance(view, str):
        codes = [widen(character) for character in view]
        facility = get_facility()
        return "".join(chr(facility.convert(routine_name, code)) for code in codes)

    if isinstance(view, (bytes, bytearray, memoryview)):
        source = memoryview(view)
        if source.itemsize != 1:
            raise CharacterSequenceError(
                f"Expected single-byte items, got buffer format `{source.format}`."
            )
        data = source.tobytes()
        facility = get_facility()
        return bytes(facility.convert(routine_name, code) for code in data)

    raise CharacterSequenceError(
        f"Expected `str` or a bytes-like view, got `{type(view).__name__}`."
    )
