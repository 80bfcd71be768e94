"""Exceptions raised by the safe character classification helpers."""

from __future__ import annotations


class SafeCctypeError(Exception):
    """Base class for all library errors."""

    def __init__(self, detail: str, *, hint: str | None = None) -> None:
        """Initialize an error with a detail message and optional remediation hint."""

        super().__init__(detail)
        self.detail = detail
        self.hint = hint


class CharacterDomainError(SafeCctypeError, ValueError):
    """Raised when a value is not a narrow character or falls outside the facility domain."""

    def __init__(self, value: object, detail: str | None = None) -> None:
        """Initialize a domain error for the rejected value."""

        super().__init__(
            detail or f"Expected a narrow character, got {value!r}.",
            hint="Pass an int in -128..255, a 1-byte bytes value, or a 1-char str up to U+00FF.",
        )
        self.value = value


class CharacterSequenceError(SafeCctypeError, ValueError):
    """Raised when a sequence or its position markers cannot be transformed."""


class FacilityError(SafeCctypeError, RuntimeError):
    """Raised when the platform classification facility misbehaves."""


class FacilityUnavailableError(FacilityError):
    """Raised when no C library exposing `<ctype.h>` routines can be loaded."""
