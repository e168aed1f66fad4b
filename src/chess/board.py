"""The Board only stores which piece stands where. It has no rules of its own, see src/chess/moves.py for those."""

import logging
from typing import Iterable, Optional

from src.chess.pieces import Piece, color_from_name, piece_type_from_name
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.models import PieceModel

logger = logging.getLogger("chess_client.board")

Grid = list[list[Optional[Piece]]]


def empty_grid() -> Grid:
    rows, cols = BOARD_DIMENSIONS
    return [[None] * cols for _ in range(rows)]


class Board:
    def __init__(self) -> None:
        self._grid: Grid = empty_grid()

    def is_valid_position(self, square: Square) -> bool:
        return square.is_within_bounds()

    def get_piece(self, row: int, col: int) -> Optional[Piece]:
        """Off-board coordinates simply hold no piece"""
        if not self.is_valid_position(Square(row, col)):
            return None
        return self._grid[row][col]

    def set_piece(self, row: int, col: int, piece: Optional[Piece]) -> None:
        """Place (or remove, with None) a piece. The piece's own coordinates are updated to match the cell.

        Off-board coordinates are ignored.
        """
        if not self.is_valid_position(Square(row, col)):
            return
        self._grid[row][col] = piece
        if piece is not None:
            piece.row = row
            piece.col = col

    def list_pieces(self) -> list[Piece]:
        """All placed pieces, top row first"""
        return [piece for row in self._grid for piece in row if piece is not None]

    def replace_from_snapshot(self, pieces: Iterable[PieceModel]) -> None:
        """
        Throw away the current contents and rebuild the board from the server's flat piece list.
        ---

        NOTE: Piece kinds (and colors) this client does not know are skipped on purpose, so that the server can
        introduce new pieces without breaking older clients.
        """
        self._grid = empty_grid()
        for entry in pieces:
            piece_type = piece_type_from_name(entry.type)
            if piece_type is None:
                logger.debug(
                    f"Skipping unknown piece kind {entry.type!r} at ({entry.row}, {entry.col})"
                )
                continue
            color = color_from_name(entry.color)
            if color is None:
                logger.debug(
                    f"Skipping piece of unknown color {entry.color!r} at ({entry.row}, {entry.col})"
                )
                continue
            piece = Piece(
                piece_type, color, entry.row, entry.col, has_moved=entry.has_moved
            )
            self.set_piece(entry.row, entry.col, piece)
