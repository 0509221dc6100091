"""Qt bridge exposing a :class:`GameController` through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chatur.core.enums import GameResult, GameStatus, PieceType
from chatur.core.move import Move
from chatur.core.position import PendingPromotion
from chatur.game.controller import GameController
from chatur.game.interfaces import GamePhase, GameSettings
from chatur.game.state import GameState, MoveRecord


class GameSession(QObject):
    """GUI-thread adapter that re-emits controller events as Qt signals.

    Rendering, click routing and the promotion dialog live in the consumer;
    this object only forwards requests and reports outcomes.
    """

    move_applied = pyqtSignal(object)  # MoveRecord
    promotion_required = pyqtSignal(int, int, int)  # row, col, color
    status_changed = pyqtSignal(int)  # GameStatus
    phase_changed = pyqtSignal(int)  # GamePhase
    game_over = pyqtSignal(int)  # GameResult
    move_rejected = pyqtSignal(str)

    __slots__ = ("_controller",)

    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self._controller = controller if controller is not None else GameController()
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_promotion_required.append(self._on_promotion_required)
        events.on_status_changed.append(self._on_status_changed)
        events.on_phase_changed.append(self._on_phase_changed)
        events.on_game_over.append(self._on_game_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(object)
    def new_game(self, settings: object = None) -> None:
        """Start over, optionally with a :class:`GameSettings`."""
        if settings is not None and not isinstance(settings, GameSettings):
            self.move_rejected.emit("Session received invalid settings")
            return
        self._controller.new_game(settings)

    def legal_moves(self, row: int, col: int) -> list[Move]:
        """Legal moves from ``(row, col)``.

        Raises :class:`~chatur.core.errors.OutOfBoundsError` for off-board
        input; ``move_rejected`` is reserved for submitted moves.
        """
        return self._controller.legal_moves((row, col))

    @pyqtSlot(object)
    def submit_move(self, move_obj: object) -> None:
        """Play *move_obj* (a :class:`Move`) or emit ``move_rejected``."""
        if not isinstance(move_obj, Move):
            self.move_rejected.emit("Session received invalid move")
            return
        if not self._controller.submit_move(move_obj):
            self.move_rejected.emit(f"Illegal move: {move_obj}")

    @pyqtSlot(int)
    def choose_promotion(self, piece_type: int) -> None:
        """Complete a pending promotion with a :class:`PieceType` value."""
        try:
            ptype = PieceType(piece_type)
        except ValueError:
            self.move_rejected.emit(f"Unknown piece type: {piece_type}")
            return
        if not self._controller.choose_promotion(ptype):
            self.move_rejected.emit(f"Cannot promote to {ptype}")

    @pyqtSlot()
    def undo(self) -> None:
        if not self._controller.undo_move():
            self.move_rejected.emit("Nothing to undo")

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, record: MoveRecord, _state: GameState) -> None:
        self.move_applied.emit(record)

    def _on_promotion_required(self, pending: PendingPromotion) -> None:
        row, col = pending.square
        self.promotion_required.emit(row, col, int(pending.color))

    def _on_status_changed(self, status: GameStatus) -> None:
        self.status_changed.emit(int(status))

    def _on_phase_changed(self, phase: GamePhase) -> None:
        self.phase_changed.emit(int(phase))

    def _on_game_over(self, result: GameResult) -> None:
        self.game_over.emit(int(result))
