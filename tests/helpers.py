"""Builders for the payloads the server sends, plus a fake outbound channel. Shared by several test modules."""

from typing import Optional

OWN_SESSION = "own-session"
OTHER_SESSION = "other-session"


class RecordingChannel:
    """Mock the IntentChannel: remember everything that would have been sent to the server."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, Optional[dict[str, int]]]] = []

    def send(self, message_type: str, payload: Optional[dict[str, int]] = None) -> None:
        self.sent.append((message_type, payload))


def piece_entry(
    piece_type: str, color: str, row: int, col: int, has_moved: bool = False
) -> dict[str, object]:
    """One entry of the room state's piece list"""
    return {"type": piece_type, "color": color, "row": row, "col": col, "hasMoved": has_moved}


def room_state(
    pieces: list[dict[str, object]],
    current_turn: str = "white",
    game_status: str = "playing",
    selecting: str = "",
    selected: tuple[int, int] = (-1, -1),
    **extra: object,
) -> dict[str, object]:
    """A room state payload"""
    return {
        "pieces": pieces,
        "currentTurn": current_turn,
        "gameStatus": game_status,
        "selectedPiecePlayer": selecting,
        "selectedRow": selected[0],
        "selectedCol": selected[1],
        **extra,
    }
