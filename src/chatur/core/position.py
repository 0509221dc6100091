"""Position: board + turn + promotion state, advanced one move at a time.

Every operation here returns fresh objects; the board passed in is never
written to, so a :class:`Position` can be kept around as history.
"""

from __future__ import annotations

from dataclasses import dataclass

from chatur.core.board import Board
from chatur.core.enums import PROMOTION_TYPES, Color, GameResult, GameStatus, PieceType
from chatur.core.errors import GameOverError, IllegalMoveError, PromotionError
from chatur.core.move import Move
from chatur.core.move_generator import MoveGenerator
from chatur.core.piece import Piece
from chatur.core.rules import Rules
from chatur.core.types import Square, square_name, validate_square


@dataclass(frozen=True, slots=True)
class PendingPromotion:
    """A pawn or chatur waiting on the far rank for its new piece type."""

    square: Square
    color: Color


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :func:`apply_move`."""

    board: Board
    captured: Piece | None = None
    promotion: PendingPromotion | None = None


# ── Board-level operations ───────────────────────────────────────────────


def apply_move(board: Board, move: Move) -> MoveOutcome:
    """Play *move* on a copy of *board*.

    Raises :class:`IllegalMoveError` unless *move* is one of the legal moves
    of the piece on ``move.from_sq``.
    """
    from_sq = validate_square(move.from_sq)
    validate_square(move.to_sq)
    piece = board[from_sq]
    if piece is None:
        raise IllegalMoveError(f"No piece on {square_name(from_sq)}")
    if move not in MoveGenerator(board).legal_moves(from_sq):
        raise IllegalMoveError(
            f"Illegal move for {piece.color} {piece.piece_type}: {move}"
        )

    new_board = board.copy()
    captured = new_board.move_piece(from_sq, move.to_sq)

    if move.castling is not None:
        row = from_sq[0]
        rook_to = (row, move.to_col - move.castling.direction)
        new_board.move_piece((row, move.castling.rook_col), rook_to)

    promotion = None
    if Rules.needs_promotion(new_board, move.to_sq):
        promotion = PendingPromotion(move.to_sq, piece.color)
    return MoveOutcome(new_board, captured, promotion)


def choose_promotion(
    board: Board,
    pending: PendingPromotion,
    piece_type: PieceType,
) -> Board:
    """Replace the promoting piece with *piece_type*, returning a new board."""
    if piece_type not in PROMOTION_TYPES:
        raise PromotionError(f"Cannot promote to {piece_type}")
    if not Rules.needs_promotion(board, pending.square):
        raise PromotionError(f"Nothing to promote on {square_name(pending.square)}")
    piece = board[pending.square]
    assert piece is not None
    if piece.color != pending.color:
        raise PromotionError(
            f"Piece on {square_name(pending.square)} is {piece.color}, "
            f"expected {pending.color}"
        )

    new_board = board.copy()
    new_board[pending.square] = Piece(pending.color, piece_type, has_moved=True)
    return new_board


# ── Game-level value ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable game state: board, side to move, pending promotion, status.

    ``status`` describes ``side_to_move``. While a promotion is pending the
    turn has not passed yet and no move is accepted.
    """

    board: Board
    side_to_move: Color = Color.WHITE
    pending_promotion: PendingPromotion | None = None
    status: GameStatus = GameStatus.IN_PROGRESS

    @classmethod
    def initial(cls) -> Position:
        return cls(Board.initial())

    @classmethod
    def from_board(cls, board: Board, side_to_move: Color = Color.WHITE) -> Position:
        """Wrap an arbitrary board, evaluating its status for *side_to_move*."""
        return cls(board, side_to_move, None, Rules.game_status(board, side_to_move))

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def result(self) -> GameResult:
        return Rules.game_result(self.status, self.side_to_move)

    @property
    def in_check(self) -> bool:
        return self.status in (GameStatus.CHECK, GameStatus.CHECKMATE)

    def legal_moves(self, sq: Square) -> list[Move]:
        """Legal moves from *sq* for the side to move.

        Empty when the game is over, a promotion is pending, or *sq* holds
        the opponent's piece.
        """
        piece = self.board[validate_square(sq)]
        if (
            piece is None
            or piece.color != self.side_to_move
            or self.game_over
            or self.pending_promotion is not None
        ):
            return []
        return MoveGenerator(self.board).legal_moves(sq)

    # ── Transitions ──────────────────────────────────────────────────────

    def play(self, move: Move) -> Position:
        """Position after *move*; may stop short of the turn on promotion."""
        if self.game_over:
            raise GameOverError(f"Game is over ({self.status.name.lower()})")
        if self.pending_promotion is not None:
            raise IllegalMoveError("A promotion choice is pending")
        piece = self.board[validate_square(move.from_sq)]
        if piece is not None and piece.color != self.side_to_move:
            raise IllegalMoveError(f"It is {self.side_to_move}'s turn")

        outcome = apply_move(self.board, move)
        if outcome.promotion is not None:
            return Position(
                outcome.board,
                self.side_to_move,
                outcome.promotion,
                self.status,
            )
        return self._finish_turn(outcome.board)

    def promote(self, piece_type: PieceType) -> Position:
        """Complete a pending promotion and pass the turn."""
        if self.pending_promotion is None:
            raise PromotionError("No promotion is pending")
        board = choose_promotion(self.board, self.pending_promotion, piece_type)
        return self._finish_turn(board)

    def _finish_turn(self, board: Board) -> Position:
        next_color = self.side_to_move.opposite
        return Position(board, next_color, None, Rules.game_status(board, next_color))


def new_game() -> Position:
    """Fresh game in the chatur starting position."""
    return Position.initial()
