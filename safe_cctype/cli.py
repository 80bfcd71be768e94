"""Diagnostic command-line interface for safe-cctype.

Responsibilities:
- Print how the active `LC_CTYPE` locale classifies and maps each byte.
- Convert text with the copying transforms for quick manual checks.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from contextlib import contextmanager
import locale
from typing import Annotated, Iterator

import typer

from .ascii_fast import ascii_to_lower, ascii_to_upper
from .cli_rendering import TABLE_HEADER, exit_with_command_error, format_byte_row
from .config import ConfigLoader
from .errors import SafeCctypeError
from .telemetry.logger import EventLogger, configure_logging
from .transform import to_lower_copy, to_upper_copy

app = typer.Typer(
    name="safe-cctype",
    no_args_is_help=True,
    help="Inspect locale-aware byte classification and case mapping.",
)

_LOCALE_OPTION_HELP = "LC_CTYPE locale to apply while the command runs (e.g. `C`, `de_DE.ISO-8859-1`)."


@contextmanager
def _ctype_locale(locale_name: str | None) -> Iterator[None]:
    """Apply `locale_name` to `LC_CTYPE` for the block and restore the previous locale."""

    if locale_name is None:
        yield
        return

    previous = locale.setlocale(locale.LC_CTYPE)
    try:
        effective = locale.setlocale(locale.LC_CTYPE, locale_name)
    except locale.Error as exc:
        raise SafeCctypeError(
            f"Locale `{locale_name}` is not available: {exc}",
            hint="List installed locales with `locale -a`.",
        ) from exc
    EventLogger().log_locale_applied(locale_name, effective)
    try:
        yield
    finally:
        locale.setlocale(locale.LC_CTYPE, previous)


@app.callback()
def main_callback() -> None:
    """Configure logging from the environment before any command runs."""

    try:
        config = ConfigLoader.from_env()
    except ValueError as exc:
        exit_with_command_error("safe-cctype", exc)
    configure_logging(level=config.log_level)


@app.command("table")
def table_command(
    locale_name: Annotated[
        str | None, typer.Option("--locale", help=_LOCALE_OPTION_HELP)
    ] = None,
    start: Annotated[
        int, typer.Option("--start", min=0, max=255, help="First byte value to print.")
    ] = 0,
    stop: Annotated[
        int, typer.Option("--stop", min=0, max=256, help="Byte value to stop before.")
    ] = 256,
) -> None:
    """Print classification flags and case mappings for a range of byte values."""

    try:
        with _ctype_locale(locale_name):
            rows = [format_byte_row(code) for code in range(start, stop)]
    except Exception as exc:
        exit_with_command_error("table", exc)

    typer.echo(TABLE_HEADER)
    for row in rows:
        typer.echo(row)


@app.command("convert")
def convert_command(
    text: Annotated[str, typer.Argument(help="Latin-1 text to convert.")],
    lower: Annotated[
        bool, typer.Option("--lower", help="Lowercase instead of uppercase.")
    ] = False,
    ascii_only: Annotated[
        bool, typer.Option("--ascii", help="Use the locale-independent ASCII mapping.")
    ] = False,
    locale_name: Annotated[
        str | None, typer.Option("--locale", help=_LOCALE_OPTION_HELP)
    ] = None,
) -> None:
    """Print TEXT converted with the copying case transforms."""

    try:
        with _ctype_locale(locale_name):
            if ascii_only:
                mapping = ascii_to_lower if lower else ascii_to_upper
                converted = "".join(mapping(character) for character in text)
            else:
                converted = to_lower_copy(text) if lower else to_upper_copy(text)
    except Exception as exc:
        exit_with_command_error("convert", exc)

    typer.echo(converted)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
