"""Pure helpers for Othello board logic."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .types import BOARD_SIZE, DIRECTIONS, Cell, Color


def empty_grid(size: int = BOARD_SIZE) -> np.ndarray:
    return np.zeros((size, size), dtype=np.int8)


def get_flips(grid: np.ndarray, cell: Cell, color: Color) -> List[Cell]:
    """
    Get all pieces that would be flipped by placing ``color`` at ``cell``.

    Does not look at whether ``cell`` itself is occupied; callers that need
    legality check that separately.

    Args:
        grid: Board snapshot, int8 array holding Color values.
        cell: Target cell.
        color: Color being placed (BLACK or WHITE).

    Returns:
        Flipped cells, grouped by direction in DIRECTIONS order and in walk
        order inside each direction.
    """
    size = grid.shape[0]
    flips: List[Cell] = []

    for dx, dy in DIRECTIONS:
        run: List[Cell] = []
        current = cell.shifted(dx, dy)

        while current.in_square(0, size - 1):
            value = grid[current.row, current.col]
            if value == Color.NONE or value == color:
                break
            run.append(current)
            current = current.shifted(dx, dy)

        if current.in_square(0, size - 1) and grid[current.row, current.col] == color:
            flips.extend(run)

    return flips


def count_pieces(grid: np.ndarray) -> Tuple[int, int]:
    """
    Count pieces for each player.

    Returns:
        Tuple of (black_count, white_count).
    """
    black = np.sum(grid == Color.BLACK)
    white = np.sum(grid == Color.WHITE)
    return int(black), int(white)


def parse_rows(rows: List[str]) -> np.ndarray:
    """
    Build a grid from rows of 'x' (black), 'o' (white) and '.' (empty).

    Whitespace inside a row is ignored, so rows may be written as "x . o ...".
    """
    cleaned = ["".join(row.split()) for row in rows]
    if len(cleaned) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cleaned):
        raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells")

    grid = empty_grid()
    for r, row in enumerate(cleaned):
        for c, symbol in enumerate(row):
            grid[r, c] = Color.from_symbol(symbol)
    return grid
