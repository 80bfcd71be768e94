"""Configuration model and loaders for the platform facility binding.

Responsibilities:
- Define facility settings as a typed dataclass.
- Provide an environment-based loader with blank-as-unset semantics.

Key types:
- `FacilityConfig`: which C library to bind and how verbosely to log.
- `ConfigLoader`: static construction helpers for `FacilityConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from .parsing import normalize_optional_string, parse_log_level


LIBRARY_ENV_KEY = "SAFE_CCTYPE_LIBRARY"
LOG_LEVEL_ENV_KEY = "SAFE_CCTYPE_LOG_LEVEL"
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class FacilityConfig:
    """Settings for binding the platform `<ctype.h>` routines.

    Attributes:
        library: Path or name of the C library to load. `None` resolves the
            platform default C library.
        log_level: Minimum loguru level emitted when logging is enabled. Only the
            diagnostic CLI applies it; library callers configure loguru themselves.
    """

    library: str | None = None
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate settings before the library is loaded."""

        if self.library is not None and not self.library.strip():
            raise ValueError("`library` must be a non-empty string when provided.")
        parse_log_level(self.log_level, "log_level")


class ConfigLoader:
    """Factory methods for creating `FacilityConfig` from external sources."""

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> FacilityConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        library = normalize_optional_string(env_map.get(LIBRARY_ENV_KEY))
        raw_level = normalize_optional_string(env_map.get(LOG_LEVEL_ENV_KEY))
        log_level = (
            parse_log_level(raw_level, LOG_LEVEL_ENV_KEY)
            if raw_level is not None
            else _DEFAULT_LOG_LEVEL
        )

        config = FacilityConfig(library=library, log_level=log_level)
        config.validate()
        return config
