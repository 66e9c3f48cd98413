"""Tests for Color and Cell."""

import pytest

from othello.board import Cell, Color


def test_color_opposite():
    assert Color.BLACK.opposite() is Color.WHITE
    assert Color.WHITE.opposite() is Color.BLACK
    with pytest.raises(ValueError):
        Color.NONE.opposite()


def test_color_symbols_and_names():
    assert Color.WHITE.symbol == "o"
    assert Color.BLACK.symbol == "x"
    assert Color.NONE.symbol == "."
    assert Color.from_name("White") is Color.WHITE
    assert Color.from_name(" BLACK ") is Color.BLACK
    with pytest.raises(ValueError):
        Color.from_name("red")


def test_cell_in_square():
    assert Cell(0, 0).in_square(0, 7)
    assert Cell(7, 7).in_square(0, 7)
    assert not Cell(8, 0).in_square(0, 7)
    assert not Cell(0, -1).in_square(0, 7)
    assert Cell(3, 4).in_square(3, 4)
    assert not Cell(2, 4).in_square(3, 4)


def test_cell_corners():
    corners = {Cell(0, 0), Cell(0, 7), Cell(7, 0), Cell(7, 7)}
    found = {Cell(r, c) for r in range(8) for c in range(8) if Cell(r, c).is_corner()}
    assert found == corners


@pytest.mark.parametrize(
    "token, cell",
    [("1a", Cell(0, 0)), ("3d", Cell(2, 3)), ("8H", Cell(7, 7)), (" 5a\n", Cell(4, 0))],
)
def test_cell_notation(token, cell):
    assert Cell.from_notation(token) == cell


@pytest.mark.parametrize("token", ["", "3", "3dd", "0a", "9a", "3i", "d3", "aa"])
def test_cell_notation_rejects_malformed(token):
    with pytest.raises(ValueError):
        Cell.from_notation(token)


def test_cell_to_notation():
    assert Cell(2, 3).to_notation() == "3d"
    assert str(Cell(7, 0)) == "8a"
