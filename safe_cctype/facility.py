"""Binding to the platform `<ctype.h>` classification facility.

Responsibilities:
- Load the C library once and expose its classification and case-conversion
  routines with `int(int)` signatures.
- Enforce the routines' defined domain (`0..255` plus `EOF`) on every call.

Results always reflect the `LC_CTYPE` locale active at call time. Only the
library handle is cached; no classification result is.

Key types:
- `CtypeFacility`: a loaded set of `<ctype.h>` routines.
- `get_facility`: process-wide lazily loaded binding.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import sys
import threading
from typing import Any, Callable

from .config import ConfigLoader, FacilityConfig
from .errors import CharacterDomainError, FacilityError, FacilityUnavailableError
from .telemetry.logger import EventLogger

EOF = -1
UCHAR_MAX = 0xFF

CLASSIFIERS = (
    "isalpha",
    "isdigit",
    "isalnum",
    "isspace",
    "iscntrl",
    "ispunct",
    "isprint",
    "isgraph",
    "isxdigit",
)
CONVERTERS = ("toupper", "tolower")

_PROCESS_LIBRARY_LABEL = "<process>"


def _library_candidates(configured: str | None) -> list[str | None]:
    """Return C library names to try, in order."""

    if configured is not None:
        return [configured]

    candidates: list[str | None] = []
    found = ctypes.util.find_library("c")
    if found:
        candidates.append(found)
    if sys.platform == "win32":
        candidates.append("msvcrt")
    else:
        # Symbols already linked into the interpreter, libc among them.
        candidates.append(None)
    return candidates


def _check_domain(code: int) -> None:
    """Reject codes the `<ctype.h>` routines leave undefined."""

    if isinstance(code, bool) or not isinstance(code, int):
        raise CharacterDomainError(code, f"Facility input must be an int, got {code!r}.")
    if code != EOF and not 0 <= code <= UCHAR_MAX:
        raise CharacterDomainError(
            code, f"Facility input {code} is neither EOF nor in 0..{UCHAR_MAX}."
        )


class CtypeFacility:
    """Classification and case-conversion routines from one loaded C library."""

    def __init__(self, library: Any, name: str) -> None:
        """Bind every required routine from `library` or fail without partial state."""

        self.name = name
        routines: dict[str, Callable[[int], int]] = {}
        for routine_name in CLASSIFIERS + CONVERTERS:
            try:
                routine = getattr(library, routine_name)
            except AttributeError as exc:
                raise FacilityUnavailableError(
                    f"C library `{name}` does not export `{routine_name}`.",
                    hint=f"Point `SAFE_CCTYPE_LIBRARY` at a C library providing `{routine_name}`.",
                ) from exc
            routine.argtypes = [ctypes.c_int]
            routine.restype = ctypes.c_int
            routines[routine_name] = routine
        self._routines = routines

    @classmethod
    def load(cls, config: FacilityConfig | None = None) -> CtypeFacility:
        """Load the configured C library, or the platform default when unset."""

        resolved = config if config is not None else FacilityConfig()
        resolved.validate()
        events = EventLogger()

        attempted: list[str] = []
        for candidate in _library_candidates(resolved.library):
            label = candidate if candidate is not None else _PROCESS_LIBRARY_LABEL
            attempted.append(label)
            try:
                library = ctypes.CDLL(candidate)
            except OSError as exc:
                events.log_library_failure(label, type(exc).__name__)
                continue
            try:
                facility = cls(library, label)
            except FacilityUnavailableError as exc:
                events.log_library_failure(label, type(exc).__name__)
                if resolved.library is not None:
                    raise
                continue
            events.log_library_loaded(label)
            return facility

        raise FacilityUnavailableError(
            f"Could not load a C library with `<ctype.h>` routines (tried: {', '.join(attempted)}).",
            hint="Set `SAFE_CCTYPE_LIBRARY` to the path of the platform C library.",
        )

    def classify(self, routine_name: str, code: int) -> bool:
        """Run classification routine `routine_name` on `code` and return its truth value."""

        if routine_name not in CLASSIFIERS:
            raise ValueError(f"Unknown classification routine `{routine_name}`.")
        _check_domain(code)
        return self._routines[routine_name](code) != 0

    def convert(self, routine_name: str, code: int) -> int:
        """Run conversion routine `routine_name` on `code` and return the mapped code."""

        if routine_name not in CONVERTERS:
            raise ValueError(f"Unknown conversion routine `{routine_name}`.")
        _check_domain(code)
        result = self._routines[routine_name](code)
        if code == EOF:
            return result
        if not 0 <= result <= UCHAR_MAX:
            raise FacilityError(
                f"`{routine_name}({code})` returned {result}, outside 0..{UCHAR_MAX}."
            )
        return result


_facility: CtypeFacility | None = None
_facility_lock = threading.Lock()


def get_facility() -> CtypeFacility:
    """Return the process-wide facility, loading it from the environment on first use."""

    global _facility
    if _facility is None:
        with _facility_lock:
            if _facility is None:
                _facility = CtypeFacility.load(ConfigLoader.from_env())
    return _facility


def set_facility(facility: CtypeFacility | None) -> None:
    """Replace the process-wide facility; `None` reloads it on next use."""

    global _facility
    with _facility_lock:
        _facility = facility
