"""Core value types for the Othello board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

BOARD_SIZE = 8

# dx outer, dy inner; (0, 0) is not a direction.
DIRECTIONS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)

_SYMBOLS = {0: ".", 1: "x", -1: "o"}


class Color(IntEnum):
    """
    Cell color / player token.

    Stored directly in the int8 grid: 1 for black, -1 for white, 0 for empty.
    """

    NONE = 0
    BLACK = 1
    WHITE = -1

    def opposite(self) -> "Color":
        if self is Color.NONE:
            raise ValueError("Color.NONE has no opposite")
        return Color(-int(self))

    @property
    def symbol(self) -> str:
        return _SYMBOLS[int(self)]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Color":
        for value, sym in _SYMBOLS.items():
            if sym == symbol:
                return cls(value)
        raise ValueError(f"Unknown cell symbol: {symbol!r}")

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Parse a player color name ('white'/'black', case-insensitive)."""
        key = name.strip().lower()
        if key == "white":
            return cls.WHITE
        if key == "black":
            return cls.BLACK
        raise ValueError(f"Unknown player color: {name!r}")


@dataclass(frozen=True)
class Cell:
    """Board coordinate; (0, 0) is the top-left corner, shown as '1a'."""

    row: int
    col: int

    def in_square(self, mn: int, mx: int) -> bool:
        """Check that the cell is in the square [mn..mx] x [mn..mx]."""
        return mn <= self.row <= mx and mn <= self.col <= mx

    def on_board(self) -> bool:
        return self.in_square(0, BOARD_SIZE - 1)

    def is_corner(self) -> bool:
        edge = (0, BOARD_SIZE - 1)
        return self.row in edge and self.col in edge

    def shifted(self, dx: int, dy: int) -> "Cell":
        return Cell(self.row + dx, self.col + dy)

    def to_notation(self) -> str:
        return f"{self.row + 1}{chr(ord('a') + self.col)}"

    @classmethod
    def from_notation(cls, token: str) -> "Cell":
        """
        Parse a two-character move token such as '3d' or '5A'.

        Raises:
            ValueError: If the token is not a row digit 1-8 followed by a column letter a-h.
        """
        text = token.strip()
        if len(text) != 2:
            raise ValueError(f"Move token must have 2 characters, got {token!r}")
        row_ch, col_ch = text[0], text[1].lower()
        if not ("1" <= row_ch <= str(BOARD_SIZE)) or not ("a" <= col_ch <= chr(ord("a") + BOARD_SIZE - 1)):
            raise ValueError(f"Malformed move token: {token!r}")
        return cls(ord(row_ch) - ord("1"), ord(col_ch) - ord("a"))

    def __str__(self) -> str:
        return self.to_notation()
