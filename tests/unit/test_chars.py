"""Unit tests for narrow character widening and narrowing."""

from __future__ import annotations

import pytest

from safe_cctype.chars import narrow, widen
from safe_cctype.errors import CharacterDomainError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 0),
        (255, 255),
        (-1, 0xFF),
        (-128, 0x80),
        (b"A", 0x41),
        (bytearray(b"\xe4"), 0xE4),
        ("ß", 0xDF),
        ("\x00", 0),
    ],
)
def test_widen_maps_every_representation_to_unsigned_byte(value: object, expected: int) -> None:
    """Widening should land every narrow character in 0..255."""

    assert widen(value) == expected


@pytest.mark.parametrize("value", [256, -129, True, "ab", "", "€", b"", b"ab", 1.5, None])
def test_widen_rejects_non_narrow_values(value: object) -> None:
    """Values outside the narrow character forms should raise a domain error."""

    with pytest.raises(CharacterDomainError) as exc_info:
        widen(value)

    assert exc_info.value.value == value
    assert exc_info.value.hint


def test_narrow_preserves_input_representation() -> None:
    """Narrowing should mirror the type and signedness of the original value."""

    assert narrow(0xC4, "ä") == "Ä"
    assert narrow(0x41, b"a") == b"A"
    assert narrow(0x41, bytearray(b"a")) == b"A"
    assert narrow(0x41, 0x61) == 0x41
    assert narrow(0xC4, -28) == -60
    assert narrow(0x41, -1) == 0x41
