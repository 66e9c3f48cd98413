"""Othello board package."""

from .board import Board, IllegalMoveError
from .types import BOARD_SIZE, DIRECTIONS, Cell, Color
from .utils import count_pieces, get_flips

__all__ = [
    "BOARD_SIZE",
    "DIRECTIONS",
    "Board",
    "Cell",
    "Color",
    "IllegalMoveError",
    "count_pieces",
    "get_flips",
]
