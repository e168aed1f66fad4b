"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Color, Piece, PieceType
from tests.helpers import RecordingChannel

PiecePlacement = tuple[PieceType, Color, int, int]


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def board_with() -> Callable[..., Board]:
    """Call the inner function with (piece type, color, row, col) tuples for every piece that should be on the board"""

    def _create_board(*placements: PiecePlacement) -> Board:
        board = Board()
        for piece_type, color, row, col in placements:
            board.set_piece(row, col, Piece(piece_type, color, row, col))
        return board

    return _create_board
