"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the candidate destination squares for each piece type.

These are purely geometric. Whether a move is actually accepted (turn order, check, ...) is decided by the server.
"""

from typing import Callable, Optional, Protocol

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def get_piece(self, row: int, col: int) -> Optional[Piece]: ...
    def is_valid_position(self, square: Square) -> bool: ...


Vector = tuple[int, int]  # (delta row, delta column)

ORTHOGONALS: list[Vector] = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
KNIGHT_JUMPS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_STEPS: list[Vector] = ORTHOGONALS + DIAGONALS

# White moves up the board (towards row 0), black moves down.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# --- MOVEMENT RULES ---
def raycasting_move(
    piece: Piece, board: Board, directions: list[Vector]
) -> set[Square]:
    """
    Raycasting algorithm
    -----

    We define move directions and move along them until we hit another piece or
    the edge of the board. The ray is only bounded by the board itself, so it covers the 10 columns as well.
    """
    squares: set[Square] = set()
    for d_row, d_col in directions:
        target_square = piece.square
        while True:
            target_square = target_square.offset(d_row, d_col)
            if not board.is_valid_position(target_square):
                break

            occupant = board.get_piece(target_square.row, target_square.col)
            if occupant is not None:
                # only the first occupied square counts, and only if it can be captured
                if piece.is_opponent(occupant):
                    squares.add(target_square)
                break

            squares.add(target_square)
    return squares


def single_step_move(
    piece: Piece, board: Board, deltas: list[Vector]
) -> set[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings, manns and knights that just jump a fixed offset"""
    squares: set[Square] = set()
    for d_row, d_col in deltas:
        target_square = piece.square.offset(d_row, d_col)
        if not board.is_valid_position(target_square):
            continue

        occupant = board.get_piece(target_square.row, target_square.col)
        if occupant is None or piece.is_opponent(occupant):
            squares.add(target_square)
    return squares


def candidate_pawn_moves(piece: Piece, board: Board) -> set[Square]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square only.
    - can move by two from its home row, whatever its hasMoved flag says (both squares must be empty)
    - takes diagonally, which is only possible when an opponent's piece stands there
    """
    squares: set[Square] = set()
    direction = PAWN_DIRECTION[piece.color]

    one_forward = piece.square.offset(direction, 0)
    if _is_empty(one_forward, board):
        squares.add(one_forward)

        on_home_row = piece.row == PAWN_HOME_ROW[piece.color]
        two_forward = piece.square.offset(2 * direction, 0)
        if on_home_row and _is_empty(two_forward, board):
            squares.add(two_forward)

    for d_col in (-1, 1):
        target_square = piece.square.offset(direction, d_col)
        if not board.is_valid_position(target_square):
            continue
        occupant = board.get_piece(target_square.row, target_square.col)
        if occupant is not None and piece.is_opponent(occupant):
            squares.add(target_square)
    return squares


def _is_empty(square: Square, board: Board) -> bool:
    if not board.is_valid_position(square):
        return False
    return board.get_piece(square.row, square.col) is None


def candidate_knight_moves(piece: Piece, board: Board) -> set[Square]:
    """Knights always move such that |delta_row| + |delta_col| = 3"""
    return single_step_move(piece, board, KNIGHT_JUMPS)


def candidate_bishop_moves(piece: Piece, board: Board) -> set[Square]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(piece, board, DIAGONALS)


def candidate_rook_moves(piece: Piece, board: Board) -> set[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(piece, board, ORTHOGONALS)


def candidate_queen_moves(piece: Piece, board: Board) -> set[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return candidate_rook_moves(piece, board) | candidate_bishop_moves(piece, board)


def candidate_king_moves(piece: Piece, board: Board) -> set[Square]:
    """
    The king can move by a single square at the time. The mann shares this rule.
    """
    return single_step_move(piece, board, KING_STEPS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Piece, Board], set[Square]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
    PieceType.MANN: candidate_king_moves,
}


def generate_moves(piece: Piece, board: Board) -> set[Square]:
    """Candidate destination squares of the piece, evaluated on the current board"""
    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(piece, board)
