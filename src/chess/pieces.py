"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.chess.square import Square


class PieceType(Enum):
    """Values are the names the server uses in its piece list"""

    PAWN = "pawn"
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"
    # Extra piece of this variant: moves like a king, but carries no check / checkmate meaning
    MANN = "mann"


class Color(Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


NAME_TO_PIECE: dict[str, PieceType] = {
    piece_type.value: piece_type for piece_type in PieceType
}


def piece_type_from_name(name: str) -> Optional[PieceType]:
    """None for names this client does not know (yet)."""
    return NAME_TO_PIECE.get(name)


NAME_TO_COLOR: dict[str, Color] = {color.value: color for color in Color}


def color_from_name(name: str) -> Optional[Color]:
    return NAME_TO_COLOR.get(name)


@dataclass
class Piece:
    type: PieceType
    color: Color
    row: int
    col: int
    has_moved: bool = False

    @property
    def square(self) -> Square:
        return Square(self.row, self.col)

    @property
    def image_key(self) -> str:
        """Sprite name used by the renderer, ex. 'mann_w' or 'pawn_b'"""
        return f"{self.type.value}_{'w' if self.color == Color.WHITE else 'b'}"

    def is_opponent(self, other: "Piece") -> bool:
        return self.color != other.color
