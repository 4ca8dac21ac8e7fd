"""Terminal helpers: password prompt, cursor movement, colours and size."""

from __future__ import annotations

import getpass
import shutil
import sys
from collections.abc import Callable

PASSWORD = "password"
DEFAULT_ATTEMPTS = 3
DEFAULT_SIZE = (80, 25)

CLEAR_SCREEN = "\x1b[2J\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def check_password(
    read_password: Callable[[str], str] | None = None,
    attempts: int = DEFAULT_ATTEMPTS,
    expected: str = PASSWORD,
) -> bool:
    """Ask for the password up to *attempts* times; True once it matches."""
    reader = read_password if read_password is not None else getpass.getpass
    for _ in range(attempts):
        if reader("Password :") == expected:
            return True
        print("\nPassword sai. Hay nhap lai")
    return False


def move_cursor(x: int, y: int) -> None:
    """Place the cursor at zero-based column *x*, row *y*."""
    _write(f"\x1b[{y + 1};{x + 1}H")


def _ansi_index(color: int) -> tuple[int, bool]:
    color &= 0xF
    index = ((color & 0x4) >> 2) | (color & 0x2) | ((color & 0x1) << 2)
    return index, bool(color & 0x8)


def foreground(color: int) -> None:
    """Set the text colour from a 4-bit console colour (blue=1, green=2, red=4, bright=8)."""
    index, bright = _ansi_index(color)
    _write(f"\x1b[{(90 if bright else 30) + index}m")


def background(color: int) -> None:
    """Set the background colour from a 4-bit console colour."""
    index, bright = _ansi_index(color)
    _write(f"\x1b[{(100 if bright else 40) + index}m")


def clear_screen() -> None:
    _write(CLEAR_SCREEN)


def hide_cursor() -> None:
    _write(HIDE_CURSOR)


def show_cursor() -> None:
    _write(SHOW_CURSOR)


def console_size() -> tuple[int, int]:
    """Visible terminal (columns, rows), falling back to 80x25."""
    size = shutil.get_terminal_size(DEFAULT_SIZE)
    return size.columns, size.lines