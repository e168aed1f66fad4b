"""
Orchestration between the transport (room messages in, intents out), the GameController and the renderer.

The transport adapter calls `on_state_change` / `on_message` / `on_leave` from its event loop and forwards clicks
through `handle_click`. The renderer only ever reads `view()`.
"""

import logging
from typing import Any, Callable, Optional, Self

from src.api.models import (
    ErrorMessage,
    GameView,
    PieceSelectedMessage,
    PieceView,
    RoleMessage,
    RoomStateMessage,
    SquareView,
    parse_message,
)
from src.chess.game import GameController
from src.chess.square import Square
from src.core.channel import IntentChannel
from src.core.config import ClientConfig
from src.core.models import SessionId
from src.core.shared_types import MessageType

logger = logging.getLogger("chess_client.service")

ErrorSink = Callable[[str], None]

# Messages the server sends for information only. The room state that follows carries the actual changes.
INFORMATIONAL_MESSAGES = (MessageType.PLAYER_JOINED, MessageType.MOVE_EXECUTED)


class RoomService:
    """Connects one GameController to the room it joined."""

    def __init__(
        self, game: GameController, error_sink: Optional[ErrorSink] = None
    ) -> None:
        self.game = game
        self.error_sink = error_sink
        self.last_error: Optional[str] = None
        self.connected = True

    @classmethod
    def create(
        cls,
        session_id: SessionId,
        channel: Optional[IntentChannel],
        config: Optional[ClientConfig] = None,
        error_sink: Optional[ErrorSink] = None,
    ) -> Self:
        """Build the controller + service for a freshly joined room."""
        config = config or ClientConfig()
        game = GameController(session_id, channel, active_status=config.active_status)
        logger.info(f"Joined {config.room_name!r} as session {session_id}")
        return cls(game, error_sink)

    # -- INBOUND ---
    def on_state_change(self, state: Any) -> None:
        """A new authoritative room state. Raises InvalidMessageError when it cannot be read (nothing is changed)."""
        room_state = parse_message(RoomStateMessage, state)
        self.game.reconcile(room_state.to_model())

    def on_message(self, message_type: str, payload: Any = None) -> None:
        """Dispatch a named room message"""
        if message_type == MessageType.GAME_STATE:
            role_message = parse_message(RoleMessage, payload)
            self.game.assign_role(role_message.color)
        elif message_type == MessageType.PIECE_SELECTED:
            selected = parse_message(PieceSelectedMessage, payload)
            self._show_opponent_selection(selected)
        elif message_type == MessageType.PIECE_DESELECTED:
            self.game.clear_opponent_selection()
        elif message_type == MessageType.ERROR:
            error = parse_message(ErrorMessage, payload)
            self._relay_error(error.message)
        elif message_type == MessageType.GAME_RESTARTED:
            logger.info("Game restarted")
            self.game.clear_opponent_selection()
        elif message_type in INFORMATIONAL_MESSAGES:
            logger.debug(f"{message_type}: {payload}")
        else:
            logger.debug(f"Ignoring unknown message type {message_type!r}")

    def on_leave(self, code: int) -> None:
        """The transport lost (or closed) the room. No more room states will arrive."""
        self.connected = False
        logger.info(f"Left room with code {code}")

    # -- INPUT FROM THE RENDERER ---
    def handle_click(self, row: int, col: int) -> bool:
        """
        Translate a click on the board into an intent.
        ---

        * empty square: move the selected piece there
        * piece and nothing selected: select it
        * piece of the other color while something is selected: capture it
        * the selected piece itself: deselect it
        * another own piece while one is selected: nothing

        Returns True if an intent was sent.
        """
        if not self.game.can_act():
            return False

        piece = self.game.board.get_piece(row, col)
        if piece is None:
            return self.game.attempt_move(row, col)

        selected = self.game.selected_piece
        if selected is None:
            return self.game.select(row, col)

        if selected.color != piece.color:
            return self.game.attempt_move(row, col)

        if selected is piece:
            return self.game.deselect()
        return False

    def request_restart(self) -> bool:
        return self.game.request_restart()

    # -- OUTPUT FOR THE RENDERER ---
    def view(self) -> GameView:
        game = self.game
        selected = game.selected_piece
        return GameView(
            pieces=[
                PieceView(
                    type=piece.type.value,
                    color=piece.color,
                    row=piece.row,
                    col=piece.col,
                    image_key=piece.image_key,
                )
                for piece in game.board.list_pieces()
            ],
            current_turn=game.current_turn,
            status=game.status,
            role=game.role,
            winner=game.winner,
            game_started=game.game_started,
            connected=self.connected,
            selected=_square_view(selected.square) if selected else None,
            legal_destinations=[
                _square_view(square) for square in sorted(game.legal_destinations())
            ],
            opponent_selection=(
                _square_view(game.opponent_selection)
                if game.opponent_selection
                else None
            ),
            last_error=self.last_error,
            turn_text=self._turn_text(),
            status_text=f"Game Status: {game.status}",
            player_text=f"Player: {game.role.value}",
        )

    # -- Internal helpers --
    def _show_opponent_selection(self, selected: PieceSelectedMessage) -> None:
        """Our own selection already shows through the room state"""
        if selected.player is not None and selected.player == self.game.role.value:
            return
        self.game.show_opponent_selection(selected.row, selected.col)

    def _relay_error(self, message: str) -> None:
        """Server errors are shown to the user as they are"""
        logger.warning(f"Game error: {message}")
        self.last_error = message
        if self.error_sink is not None:
            self.error_sink(message)

    def _turn_text(self) -> str:
        current_turn = self.game.current_turn.value
        if current_turn == self.game.role.value:
            return f"Current turn: {current_turn} (Your turn!)"
        return f"Current turn: {current_turn}"


def _square_view(square: Square) -> SquareView:
    return SquareView(row=square.row, col=square.col)
