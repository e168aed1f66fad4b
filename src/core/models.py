"""
Boundary layer data model(s).

The transport layer delivers wire payloads; after validation (see src/api/models.py) they are converted into the
objects defined here before they reach the GameController.
Outbound intents are defined here as well, so the chess layer never has to know about wire formats.
"""

from dataclasses import dataclass
from typing import Optional

from src.chess.pieces import Color

SessionId = str


@dataclass
class PieceModel:
    """One entry of the flat piece list of a snapshot. `type` and `color` stay plain strings: unknown ones get skipped later."""

    type: str
    color: str
    row: int
    col: int
    has_moved: bool = False


@dataclass
class RoomSnapshot:
    """Complete authoritative description of the room state, pushed by the server."""

    pieces: list[PieceModel]
    current_turn: Color
    game_status: str
    selecting_session_id: SessionId = ""
    selected_row: int = -1
    selected_col: int = -1
    winner: Optional[str] = None
    game_started: bool = False


@dataclass(frozen=True)
class SelectIntent:
    row: int
    col: int

    def to_payload(self) -> dict[str, int]:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class MoveIntent:
    from_row: int
    from_col: int
    to_row: int
    to_col: int

    def to_payload(self) -> dict[str, int]:
        """Server expects camelCase keys"""
        return {
            "fromRow": self.from_row,
            "fromCol": self.from_col,
            "toRow": self.to_row,
            "toCol": self.to_col,
        }

