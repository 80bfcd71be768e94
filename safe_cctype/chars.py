"""Narrow character widening and narrowing.

A narrow character is an `int` in `-128..255`, a one-byte `bytes` value, or a
one-character `str` no wider than Latin-1. Widening maps it onto the
unsigned-byte domain the platform facility requires; negative ints are
treated as signed bytes (`-1` is `0xFF`, never `EOF`).
"""

from __future__ import annotations

from .errors import CharacterDomainError

NarrowChar = int | bytes | str

SCHAR_MIN = -0x80
UCHAR_MAX = 0xFF


def widen(value: object) -> int:
    """Return `value` as an unsigned byte code in `0..255`.

    Raises:
        CharacterDomainError: If `value` is not a narrow character.
    """

    if isinstance(value, bool):
        raise CharacterDomainError(value)
    if isinstance(value, int):
        if SCHAR_MIN <= value <= UCHAR_MAX:
            return value & UCHAR_MAX
        raise CharacterDomainError(value)
    if isinstance(value, (bytes, bytearray)):
        if len(value) == 1:
            return value[0]
        raise CharacterDomainError(value)
    if isinstance(value, str):
        if len(value) == 1 and ord(value) <= UCHAR_MAX:
            return ord(value)
        raise CharacterDomainError(value)
    raise CharacterDomainError(value)


def narrow(code: int, like: NarrowChar) -> NarrowChar:
    """Return byte `code` in the same character representation as `like`."""

    if isinstance(like, str):
        return chr(code)
    if isinstance(like, (bytes, bytearray)):
        return bytes((code,))
    if like < 0 and code > 0x7F:
        return code - 0x100
    return code
