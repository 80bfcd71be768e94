"""Shared parsing helpers for environment-derived configuration values."""

from __future__ import annotations


_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_log_level(value: str, field_name: str) -> str:
    """Parse a loguru level name case-insensitively.

    Raises:
        ValueError: If the token is not a known loguru level.
    """

    token = value.strip().upper()
    if token in _LOG_LEVELS:
        return token

    supported = ", ".join(sorted(_LOG_LEVELS))
    raise ValueError(f"`{field_name}` must be a log level; supported: {supported}.")
