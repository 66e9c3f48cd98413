"""Othello board engine: grid of colors plus per-color piece counts."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence

import numpy as np

from .types import BOARD_SIZE, Cell, Color
from .utils import count_pieces, empty_grid, get_flips, parse_rows


class IllegalMoveError(ValueError):
    """Raised when make_move is called with a placement that is not legal."""


class Board:
    """
    Othello board.

    The grid is only mutated through :meth:`make_move`; all queries are
    side-effect free.
    """

    size = BOARD_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None) -> None:
        if grid is None:
            grid = empty_grid()
        if grid.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board grid must be {BOARD_SIZE}x{BOARD_SIZE}, got {grid.shape}")
        self._grid = grid.astype(np.int8, copy=True)
        black, white = count_pieces(self._grid)
        self._scores: Dict[Color, int] = {Color.WHITE: white, Color.BLACK: black}

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from 8 rows of 'x'/'o'/'.' symbols."""
        return cls(parse_rows(list(rows)))

    @classmethod
    def initial(cls) -> "Board":
        board = cls()
        board.init_othello()
        return board

    def init_othello(self) -> None:
        """Reset to the standard starting position."""
        self._grid = empty_grid()
        self._grid[3, 3] = self._grid[4, 4] = Color.WHITE
        self._grid[3, 4] = self._grid[4, 3] = Color.BLACK
        self._scores = {Color.WHITE: 2, Color.BLACK: 2}

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the grid."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def __getitem__(self, cell: Cell) -> Color:
        return Color(int(self._grid[cell.row, cell.col]))

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield Cell(row, col)

    def copy(self) -> "Board":
        return Board(self._grid)

    def flips(self, cell: Cell, color: Color) -> List[Cell]:
        """Cells that would flip if ``color`` were placed at ``cell``."""
        if color is Color.NONE or not cell.on_board():
            return []
        if self._grid[cell.row, cell.col] != Color.NONE:
            return []
        return get_flips(self._grid, cell, color)

    def count_flips(self, cell: Cell, color: Color) -> int:
        """Number of pieces ``color`` would flip at ``cell``; occupied or off-board cells count as zero."""
        return len(self.flips(cell, color))

    def valid_move(self, cell: Cell, color: Color) -> bool:
        """Check that ``color`` may be placed at ``cell``."""
        if not cell.on_board() or self[cell] is not Color.NONE:
            return False
        return self.count_flips(cell, color) > 0

    def make_move(self, cell: Cell, color: Color) -> List[Cell]:
        """
        Place ``color`` at ``cell`` and flip the bracketed pieces.

        Returns:
            The flipped cells.

        Raises:
            IllegalMoveError: If the placement is not a legal move.
        """
        flipped = self.flips(cell, color)
        if not flipped:
            raise IllegalMoveError(f"Invalid move {color.name} at {cell}")

        self._grid[cell.row, cell.col] = color
        for flip in flipped:
            self._grid[flip.row, flip.col] = color

        self._scores[color] += 1 + len(flipped)
        self._scores[color.opposite()] -= len(flipped)
        return flipped

    def legal_moves(self, color: Color) -> List[Cell]:
        """All legal cells for ``color`` in row-major order."""
        return [cell for cell in self.cells() if self.valid_move(cell, color)]

    def can_move(self, color: Color) -> bool:
        return any(self.valid_move(cell, color) for cell in self.cells())

    def get_scores(self) -> Dict[Color, int]:
        return dict(self._scores)

    def empty_count(self) -> int:
        return int(np.sum(self._grid == Color.NONE))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __repr__(self) -> str:
        rows = ["".join(Color(int(v)).symbol for v in row) for row in self._grid]
        return f"Board({rows!r})"
