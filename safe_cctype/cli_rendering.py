"""Rendering helpers for diagnostic CLI output and failures."""

from __future__ import annotations

from typing import NoReturn

import typer

from .ascii_fast import ascii_to_lower, ascii_to_upper
from .classify import (
    is_alnum,
    is_alpha,
    is_cntrl,
    is_digit,
    is_graph,
    is_print,
    is_punct,
    is_space,
    is_xdigit,
)
from .errors import SafeCctypeError
from .transform import to_lower, to_upper

_FLAG_COLUMNS = (
    ("a", is_alpha),
    ("d", is_digit),
    ("n", is_alnum),
    ("s", is_space),
    ("c", is_cntrl),
    ("p", is_punct),
    ("r", is_print),
    ("g", is_graph),
    ("x", is_xdigit),
)

TABLE_HEADER = "dec hex  chr  adnscprgx upper lower a-upr a-lwr"


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    if isinstance(exc, SafeCctypeError) and exc.hint:
        typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def _display_character(code: int) -> str:
    """Return a fixed-width glyph for a byte, or a placeholder when not visible ASCII."""

    if code == 0x20:
        return "sp"
    if 0x21 <= code <= 0x7E:
        return chr(code)
    return "--"


def format_byte_row(code: int) -> str:
    """Return one table row with the classification flags and mappings of `code`."""

    flags = "".join(letter if predicate(code) else "." for letter, predicate in _FLAG_COLUMNS)
    return (
        f"{code:3d} 0x{code:02X} {_display_character(code):<4} {flags} "
        f"0x{to_upper(code):02X}  0x{to_lower(code):02X}  "
        f"0x{ascii_to_upper(code):02X}  0x{ascii_to_lower(code):02X}"
    )
