"""Game state machine tracking phase transitions, captures and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from chatur.core.enums import Color, GameResult, GameStatus, PieceType
from chatur.core.move import Move
from chatur.core.notation import STARTING_FEN, position_from_fen
from chatur.core.piece import Piece
from chatur.core.position import PendingPromotion, Position
from chatur.core.types import Square
from chatur.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    mover: Color
    position_before: Position
    captured: Piece | None = None
    promotion: PieceType | None = None
    status_after: GameStatus = GameStatus.IN_PROGRESS


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, captures, move history.

    This is a pure data/logic class with no threading or UI. Rule violations
    surface as :class:`~chatur.core.errors.ChaturError` and leave the state
    untouched.
    """

    position: Position = field(default_factory=Position.initial, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    captured: dict[Color, list[Piece]] = field(
        default_factory=lambda: {Color.WHITE: [], Color.BLACK: []}, init=False
    )
    start_fen: str = field(default=STARTING_FEN, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        self.position = position_from_fen(self.start_fen)
        self.move_history.clear()
        self.captured = {Color.WHITE: [], Color.BLACK: []}
        self._update_phase()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Play *move* and return its history record.

        When the move lands a pawn or chatur on the far rank the record is
        left open and the phase becomes ``AWAITING_PROMOTION``.
        """
        before = self.position
        target = before.board[move.to_sq]
        after = before.play(move)

        record = MoveRecord(
            move=move,
            mover=before.side_to_move,
            position_before=before,
            captured=target,
        )
        self.position = after
        self.move_history.append(record)
        if target is not None:
            self.captured[target.color].append(target)
        if after.pending_promotion is None:
            record.status_after = after.status
        self._update_phase()
        return record

    def promote(self, piece_type: PieceType) -> MoveRecord:
        """Finish the pending promotion and close the last record."""
        self.position = self.position.promote(piece_type)
        record = self.move_history[-1]
        record.promotion = piece_type
        record.status_after = self.position.status
        self._update_phase()
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.position = record.position_before
        if record.captured is not None:
            self.captured[record.captured.color].pop()
        self._update_phase()
        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def status(self) -> GameStatus:
        return self.position.status

    @property
    def result(self) -> GameResult:
        return self.position.result

    @property
    def pending_promotion(self) -> PendingPromotion | None:
        return self.position.pending_promotion

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_moves(self, sq: Square) -> list[Move]:
        """Legal moves from *sq* in the current position."""
        return self.position.legal_moves(sq)

    # ── Internal ─────────────────────────────────────────────────────────

    def _update_phase(self) -> None:
        if self.position.game_over:
            self.phase = GamePhase.GAME_OVER
        elif self.position.pending_promotion is not None:
            self.phase = GamePhase.AWAITING_PROMOTION
        else:
            self.phase = GamePhase.AWAITING_MOVE
