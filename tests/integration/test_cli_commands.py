"""CLI tests for the byte table and conversion commands."""

from __future__ import annotations

import locale

from pytest import MonkeyPatch
from typer.testing import CliRunner

from safe_cctype.cli import app


def test_table_command_prints_header_and_requested_rows() -> None:
    """Table should print one row per byte in [start, stop) under the given locale."""

    runner = CliRunner()

    result = runner.invoke(app, ["table", "--locale", "C", "--start", "48", "--stop", "50"])

    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0].startswith("dec hex")
    assert len(lines) == 3
    assert lines[1].startswith(" 48 0x30 0    .dn...rgx")
    assert lines[2].startswith(" 49 0x31 1    .dn...rgx")


def test_table_command_reports_letter_mappings() -> None:
    """Rows for letters should show both locale-aware and ASCII mappings."""

    runner = CliRunner()

    result = runner.invoke(app, ["table", "--locale", "C", "--start", "97", "--stop", "98"])

    assert result.exit_code == 0
    assert " 97 0x61 a    a.n...rgx 0x41  0x61  0x41  0x61" in result.output


def test_table_command_restores_previous_locale() -> None:
    """Running with `--locale` should not leak the locale into the calling process."""

    before = locale.setlocale(locale.LC_CTYPE)
    runner = CliRunner()

    result = runner.invoke(app, ["table", "--locale", "C", "--stop", "1"])

    assert result.exit_code == 0
    assert locale.setlocale(locale.LC_CTYPE) == before


def test_convert_command_uppercases_and_lowercases() -> None:
    """Convert should apply the copying transforms to the argument."""

    runner = CliRunner()

    upper = runner.invoke(app, ["convert", "hello, World! 123", "--locale", "C"])
    lower = runner.invoke(app, ["convert", "Hello", "--lower", "--ascii"])

    assert upper.exit_code == 0
    assert upper.output.strip() == "HELLO, WORLD! 123"
    assert lower.exit_code == 0
    assert lower.output.strip() == "hello"


def test_convert_command_reports_wide_characters_with_hint() -> None:
    """Characters beyond Latin-1 should fail with exit code 1 and a hint."""

    runner = CliRunner()

    result = runner.invoke(app, ["convert", "price €5"])

    assert result.exit_code == 1
    assert "convert failed: Expected a narrow character" in result.output
    assert "Hint:" in result.output


def test_unknown_locale_is_reported() -> None:
    """An unavailable locale should fail clearly."""

    runner = CliRunner()

    result = runner.invoke(app, ["table", "--locale", "xx_NOT.A-LOCALE"])

    assert result.exit_code == 1
    assert "table failed: Locale `xx_NOT.A-LOCALE` is not available" in result.output
    assert "Hint: List installed locales with `locale -a`." in result.output


def test_invalid_log_level_environment_fails_before_commands(monkeypatch: MonkeyPatch) -> None:
    """A bad `SAFE_CCTYPE_LOG_LEVEL` should abort the invocation."""

    monkeypatch.setenv("SAFE_CCTYPE_LOG_LEVEL", "chatty")
    runner = CliRunner()

    result = runner.invoke(app, ["convert", "abc"])

    assert result.exit_code == 1
    assert "safe-cctype failed: `SAFE_CCTYPE_LOG_LEVEL` must be a log level" in result.output
