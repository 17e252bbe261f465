"""
Board notation: column letters, row numbers, and token parsing.

Tokens look like "A7": one column letter followed by a 1-based row number.
Columns run A..Z, which caps the board at 26×26.
"""
from __future__ import annotations

import re
import string

from .errors import MalformedInput, RowOutOfRange, UnknownColumn
from .grid import Position

COLUMN_LETTERS: tuple[str, ...] = tuple(string.ascii_uppercase)
COLUMN_INDEX: dict[str, int] = {letter: i for i, letter in enumerate(COLUMN_LETTERS)}
MAX_BOARD_SIZE = len(COLUMN_LETTERS)

ROW_RE = re.compile(r"^[0-9]{1,2}$")
HINT = "Try something like A7"


def column_label(index: int) -> str:
    return COLUMN_LETTERS[index]


def row_label(index: int) -> str:
    return str(index + 1)


def position_label(pos: Position) -> str:
    """Inverse of parse_position: Position(6, 0) -> "A7"."""
    return f"{column_label(pos.col)}{row_label(pos.row)}"


def parse_position(token: str, size: int, ignore_case: bool = False) -> Position:
    """Turn a token like "A7" into a 0-indexed Position on a size×size board.

    Raises MalformedInput, UnknownColumn or RowOutOfRange.
    """
    text = (token or "").strip()
    if len(text) not in (2, 3):
        raise MalformedInput(f"'{text}' is not a valid position. {HINT}")

    letter, digits = text[0], text[1:]
    if ignore_case:
        letter = letter.upper()
    col = COLUMN_INDEX.get(letter)
    if col is None or col >= size:
        raise UnknownColumn(f"column {text[0]} does not exist on the board")

    if not ROW_RE.match(digits):
        raise RowOutOfRange(f"'{digits}' is not a row number. {HINT}")
    row = int(digits)
    if not 1 <= row <= size:
        raise RowOutOfRange(f"row {row} does not exist on the board")
    return Position(row - 1, col)


__all__ = [
    "COLUMN_LETTERS",
    "MAX_BOARD_SIZE",
    "column_label",
    "row_label",
    "position_label",
    "parse_position",
]
