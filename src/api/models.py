"""Messages the server pushes into the room, and the view handed to the renderer"""

from typing import Any, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from src.chess.pieces import Color
from src.core.exceptions import InvalidMessageError
from src.core.models import PieceModel, RoomSnapshot
from src.core.shared_types import Role


class ServerMessage(BaseModel):
    """Server payloads use camelCase and may carry fields this client does not care about."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


MessageT = TypeVar("MessageT", bound=ServerMessage)


def parse_message(model: type[MessageT], payload: Any) -> MessageT:
    """Validate a raw payload. The pydantic error is kept as the cause."""
    try:
        return model.model_validate(payload if payload is not None else {})
    except ValidationError as err:
        raise InvalidMessageError(f"Invalid {model.__name__} payload: {err}") from err


# --- INBOUND MESSAGES ---
class PieceMessage(ServerMessage):
    type: str
    color: str
    row: int
    col: int
    has_moved: bool = Field(default=False, alias="hasMoved")

    def to_model(self) -> PieceModel:
        return PieceModel(
            type=self.type,
            color=self.color,
            row=self.row,
            col=self.col,
            has_moved=self.has_moved,
        )


class RoomStateMessage(ServerMessage):
    pieces: list[PieceMessage] = Field(default_factory=list)
    current_turn: Color = Field(alias="currentTurn")
    game_status: str = Field(alias="gameStatus")
    selecting_session_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "selectingSessionId", "selectedPiecePlayer", "selecting_session_id"
        ),
    )
    selected_row: int = Field(default=-1, alias="selectedRow")
    selected_col: int = Field(default=-1, alias="selectedCol")
    winner: Optional[str] = None
    game_started: bool = Field(default=False, alias="gameStarted")

    def to_model(self) -> RoomSnapshot:
        return RoomSnapshot(
            pieces=[piece.to_model() for piece in self.pieces],
            current_turn=self.current_turn,
            game_status=self.game_status,
            selecting_session_id=self.selecting_session_id or "",
            selected_row=self.selected_row,
            selected_col=self.selected_col,
            # the room state uses an empty string while there is no winner
            winner=self.winner or None,
            game_started=self.game_started,
        )


class RoleMessage(ServerMessage):
    """Sent once after joining: which color (or spectator) this session got"""

    color: Role


class PieceSelectedMessage(ServerMessage):
    row: int
    col: int
    player: Optional[str] = None


class ErrorMessage(ServerMessage):
    message: str


# --- VIEW FOR THE RENDERER ---
class SquareView(BaseModel):
    row: int
    col: int


class PieceView(BaseModel):
    type: str
    color: Color
    row: int
    col: int
    image_key: str


class GameView(BaseModel):
    """Everything needed to (re)draw the board and the text below it"""

    pieces: list[PieceView]
    current_turn: Color
    status: str
    role: Role
    winner: Optional[str]
    game_started: bool
    connected: bool
    selected: Optional[SquareView]
    legal_destinations: list[SquareView]
    opponent_selection: Optional[SquareView]
    last_error: Optional[str]
    turn_text: str
    status_text: str
    player_text: str

