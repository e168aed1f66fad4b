"""Unit tests for /src/chess/square.py"""

import pytest

from src.chess.square import BOARD_DIMENSIONS, Square


def test_board_has_8_rows_and_10_columns() -> None:
    assert BOARD_DIMENSIONS == (8, 10)


@pytest.mark.parametrize(
    "row, col",
    [(0, 0), (7, 9), (0, 9), (7, 0), (3, 8)],
)
def test_squares_within_bounds(row: int, col: int) -> None:
    """Columns 8 and 9 exist on this board, rows stop at 7"""
    assert Square(row, col).is_within_bounds()


@pytest.mark.parametrize(
    "row, col",
    [(-1, 0), (0, -1), (8, 0), (0, 10), (8, 10), (9, 4)],
)
def test_squares_out_of_bounds(row: int, col: int) -> None:
    assert not Square(row, col).is_within_bounds()


def test_offset_creates_new_square() -> None:
    square = Square(3, 3)
    assert square.offset(-1, 2) == Square(2, 5)
    assert square == Square(3, 3)


def test_squares_sort_row_first() -> None:
    squares = {Square(4, 0), Square(3, 9), Square(3, 1)}
    assert sorted(squares) == [Square(3, 1), Square(3, 9), Square(4, 0)]
