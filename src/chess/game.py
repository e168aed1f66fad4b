"""
The GameController is the client's view of one game room.

The server is the only authority on the game: board, turn, status and selection are written exclusively by
`reconcile()`, which absorbs the room state the server pushes. Everything the player does (select, deselect, move,
restart) is only ever sent out as an intent. Its effect becomes visible once the server pushes the next room state.
"""

import logging
from typing import Optional

from src.chess.board import Board
from src.chess.moves import generate_moves
from src.chess.pieces import Color, Piece
from src.chess.square import Square
from src.core.channel import IntentChannel, Payload
from src.core.models import MoveIntent, RoomSnapshot, SelectIntent, SessionId
from src.core.shared_types import PLAYING, WAITING, MessageType, Role

logger = logging.getLogger("chess_client.game")


class GameController:
    def __init__(
        self,
        session_id: SessionId,
        channel: Optional[IntentChannel] = None,
        active_status: str = PLAYING,
    ) -> None:
        self.session_id = session_id
        self.channel = channel
        self.active_status = active_status

        self._board = Board()
        self._current_turn = Color.WHITE
        self._status = WAITING
        self._selected_piece: Optional[Piece] = None
        self._winner: Optional[str] = None
        self._game_started = False

        # Until the server tells us otherwise, we may only watch
        self._role = Role.SPECTATOR
        self._opponent_selection: Optional[Square] = None

    # --- READ-ONLY VIEWS ---
    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_turn(self) -> Color:
        return self._current_turn

    @property
    def status(self) -> str:
        return self._status

    @property
    def role(self) -> Role:
        return self._role

    @property
    def selected_piece(self) -> Optional[Piece]:
        return self._selected_piece

    @property
    def winner(self) -> Optional[str]:
        return self._winner

    @property
    def game_started(self) -> bool:
        return self._game_started

    @property
    def opponent_selection(self) -> Optional[Square]:
        return self._opponent_selection

    # --- INBOUND: AUTHORITATIVE STATE ---
    def reconcile(self, snapshot: RoomSnapshot) -> None:
        """
        Take over the room state pushed by the server.
        ---

        The board is rebuilt from scratch. The selection is only taken over when the server attributes it to our
        own session; a selection pointing to an empty square counts as no selection.
        """
        self._board.replace_from_snapshot(snapshot.pieces)
        self._current_turn = snapshot.current_turn
        self._status = snapshot.game_status
        self._winner = snapshot.winner
        self._game_started = snapshot.game_started

        if snapshot.selecting_session_id == self.session_id:
            self._selected_piece = self._board.get_piece(
                snapshot.selected_row, snapshot.selected_col
            )
        else:
            self._selected_piece = None

        logger.debug(
            f"Reconciled room state: turn={self._current_turn.value}, "
            f"status={self._status!r}, pieces={len(self._board.list_pieces())}, "
            f"selected={self._selection_label()}"
        )

    def assign_role(self, role: Role) -> None:
        self._role = role
        logger.info(f"Session {self.session_id} plays as {role.value}")

    def show_opponent_selection(self, row: int, col: int) -> None:
        self._opponent_selection = Square(row, col)

    def clear_opponent_selection(self) -> None:
        self._opponent_selection = None

    # --- PLAYER INTENTS ---
    def can_act(self) -> bool:
        """A player may act when it is their color's turn and the game is being played"""
        own_color = self._role.color
        return (
            own_color is not None
            and self._current_turn == own_color
            and self._status == self.active_status
        )

    def select(self, row: int, col: int) -> bool:
        """Ask the server to select one of our own pieces. Local selection only changes with the next room state."""
        if not self.can_act():
            return False

        piece = self._board.get_piece(row, col)
        if piece is None or piece.color != self._role.color:
            return False

        return self._send(MessageType.SELECT, SelectIntent(row, col).to_payload())

    def deselect(self) -> bool:
        """Always allowed to try: the server decides whether there was anything to deselect"""
        return self._send(MessageType.DESELECT)

    def legal_destinations(self) -> set[Square]:
        """Candidate squares of the selected piece. The server may still refuse some of them."""
        if self._selected_piece is None:
            return set()
        return generate_moves(self._selected_piece, self._board)

    def attempt_move(self, to_row: int, to_col: int) -> bool:
        """Send the move of the selected piece. The board itself is only updated by the next room state."""
        if self._selected_piece is None or self._role == Role.SPECTATOR:
            return False

        if Square(to_row, to_col) not in self.legal_destinations():
            return False

        move = MoveIntent(
            from_row=self._selected_piece.row,
            from_col=self._selected_piece.col,
            to_row=to_row,
            to_col=to_col,
        )
        return self._send(MessageType.MOVE, move.to_payload())

    def request_restart(self) -> bool:
        """Spectators cannot restart the game"""
        if self._role == Role.SPECTATOR:
            return False
        return self._send(MessageType.RESTART)

    # -- PRIVATE HELPERS ---
    def _send(
        self, message_type: MessageType, payload: Optional[Payload] = None
    ) -> bool:
        """Returns False when there is no room to send to"""
        if self.channel is None:
            return False
        logger.debug(f"Sending {message_type.value!r} {payload or ''}")
        self.channel.send(message_type.value, payload)
        return True

    def _selection_label(self) -> str:
        if self._selected_piece is None:
            return "none"
        piece = self._selected_piece
        return f"{piece.type.value} at ({piece.row}, {piece.col})"
