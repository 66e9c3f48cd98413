"""Tests for the pure flip computation."""

import numpy as np

from othello.board import DIRECTIONS, Cell, Color, count_pieces, get_flips
from othello.board.utils import empty_grid, parse_rows


def test_directions_are_row_delta_major():
    assert DIRECTIONS == (
        (-1, -1), (-1, 0), (-1, 1),
        (0, -1), (0, 1),
        (1, -1), (1, 0), (1, 1),
    )


def test_get_flips_does_not_touch_grid():
    grid = parse_rows(["xoo....."] + ["........"] * 7)
    before = grid.copy()

    flips = get_flips(grid, Cell(0, 3), Color.BLACK)

    assert flips == [Cell(0, 2), Cell(0, 1)]
    assert np.array_equal(grid, before)


def test_get_flips_only_counts_bracketed_runs():
    grid = parse_rows(
        [
            "x.......",
            ".o......",
            "..o.....",
            "........",
            "....o...",
            ".....o..",
            "......o.",
            "........",
        ]
    )
    # Up-left run is closed by the black corner; down-right run ends at an empty cell.
    assert get_flips(grid, Cell(3, 3), Color.BLACK) == [Cell(2, 2), Cell(1, 1)]
    assert get_flips(grid, Cell(7, 7), Color.BLACK) == []


def test_get_flips_for_white():
    grid = parse_rows(["..xxo..."] + ["........"] * 7)
    assert get_flips(grid, Cell(0, 1), Color.WHITE) == [Cell(0, 2), Cell(0, 3)]
    assert get_flips(grid, Cell(0, 1), Color.BLACK) == []


def test_count_pieces():
    grid = empty_grid()
    assert count_pieces(grid) == (0, 0)
    grid[0, 0] = Color.BLACK
    grid[0, 1] = Color.WHITE
    grid[0, 2] = Color.WHITE
    assert count_pieces(grid) == (1, 2)


def test_parse_rows_ignores_spaces():
    grid = parse_rows(["x . o . . . . ."] + ["........"] * 7)
    assert grid[0, 0] == Color.BLACK
    assert grid[0, 2] == Color.WHITE
