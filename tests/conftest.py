"""Shared pytest fixtures for the full safe-cctype test suite."""

from __future__ import annotations

import locale
from types import SimpleNamespace
from typing import Callable, Iterator

import pytest
from loguru import logger

from safe_cctype.facility import CLASSIFIERS, CONVERTERS, set_facility

_LATIN1_LOCALE_CANDIDATES = (
    "de_DE.ISO-8859-1",
    "de_DE.ISO8859-1",
    "de_DE.iso88591",
    "en_US.ISO-8859-1",
    "en_US.ISO8859-1",
    "en_US.iso88591",
    "fr_FR.ISO8859-1",
)


@pytest.fixture(autouse=True)
def _restore_process_state() -> Iterator[None]:
    """Restore `LC_CTYPE`, the loaded facility and loguru handlers after each test."""

    previous_locale = locale.setlocale(locale.LC_CTYPE)
    yield
    locale.setlocale(locale.LC_CTYPE, previous_locale)
    set_facility(None)
    logger.remove()
    logger.disable("safe_cctype")


@pytest.fixture
def c_locale() -> None:
    """Pin `LC_CTYPE` to "C"; the interpreter applies the user locale at startup."""

    locale.setlocale(locale.LC_CTYPE, "C")


@pytest.fixture
def latin1_locale() -> str:
    """Switch `LC_CTYPE` to an installed ISO-8859-1 locale, or skip when none exists."""

    for name in _LATIN1_LOCALE_CANDIDATES:
        try:
            return locale.setlocale(locale.LC_CTYPE, name)
        except locale.Error:
            continue
    pytest.skip("No ISO-8859-1 locale is installed.")


@pytest.fixture
def fake_library() -> Callable[..., SimpleNamespace]:
    """Provide a builder for stand-in C libraries answering like the "C" locale."""

    def _false(code: int) -> int:
        _ = code
        return 0

    def _identity(code: int) -> int:
        return code

    def _build(**overrides: object) -> SimpleNamespace:
        routines: dict[str, object] = {name: _false for name in CLASSIFIERS}
        routines.update({name: _identity for name in CONVERTERS})
        routines.update(overrides)
        return SimpleNamespace(**routines)

    return _build
