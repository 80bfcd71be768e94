"""Structured event logging utilities.

Responsibilities:
- Emit concise, deterministic facility-level log lines through `loguru`.
- Stay silent until an application opts in with `configure_logging`.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_PACKAGE_NAME = "safe_cctype"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def configure_logging(sink: TextIO | None = None, level: str = "WARNING") -> None:
    """Route package log lines to `sink` (stderr by default) at `level` and above."""

    logger.remove()
    logger.add(sink or sys.stderr, format="{message}", level=level, colorize=False)
    logger.enable(_PACKAGE_NAME)


class EventLogger:
    """Emit deterministic event lines for facility loading and locale changes."""

    def _emit(self, level: str, event: str, **context: object) -> None:
        """Emit one structured log line."""

        logger.log(level, f"[cctype] level={level} event={event}{_format_context(context)}")

    def log_library_loaded(self, library: str) -> None:
        """Emit a successful C library binding event."""

        self._emit("DEBUG", "library-loaded", library=library)

    def log_library_failure(self, candidate: str, error_type: str) -> None:
        """Emit a failed C library load attempt."""

        self._emit("WARNING", "library-failure", candidate=candidate, error_type=error_type)

    def log_locale_applied(self, locale_name: str, effective: str) -> None:
        """Emit an application-level `LC_CTYPE` change."""

        self._emit("INFO", "locale-applied", requested=locale_name, effective=effective)
