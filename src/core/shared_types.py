"""
Type definitions used across layers
"""

from enum import StrEnum
from typing import Optional

from src.chess.pieces import Color

# Status tokens are declared by the server. Only these two are known to the client.
WAITING = "waiting"
PLAYING = "playing"


class Role(StrEnum):
    """The role the server assigned to this session when joining the room."""

    WHITE = "white"
    BLACK = "black"
    SPECTATOR = "spectator"

    @property
    def color(self) -> Optional[Color]:
        """Spectators do not play with any color"""
        if self == Role.SPECTATOR:
            return None
        return Color(self.value)


class MessageType(StrEnum):
    # --- outbound (client -> server) ---
    SELECT = "select"
    DESELECT = "deselect"
    MOVE = "move"
    RESTART = "restart"

    # --- inbound (server -> client) ---
    GAME_STATE = "gameState"
    PLAYER_JOINED = "playerJoined"
    MOVE_EXECUTED = "moveExecuted"
    PIECE_SELECTED = "pieceSelected"
    PIECE_DESELECTED = "pieceDeselected"
    ERROR = "error"
    GAME_RESTARTED = "gameRestarted"
