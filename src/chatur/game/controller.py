"""GameController: the central orchestrator of a chatur game.

Coordinates GameState and the rules engine, turning rule violations into
``False`` returns. Emits events via simple callbacks so the UI / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chatur.core.enums import GameResult, GameStatus, PieceType
from chatur.core.errors import ChaturError
from chatur.core.move import Move
from chatur.core.position import PendingPromotion
from chatur.core.types import Square
from chatur.game.interfaces import GamePhase, GameSettings, IGameController
from chatur.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
PromotionCallback = Callable[[PendingPromotion], None]
StatusCallback = Callable[[GameStatus], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion_required: list[PromotionCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, suspends for promotion,
    switches turns, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_settings", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._settings = GameSettings()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, settings: GameSettings | None = None) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._state = GameState()
        self._state.setup(self._settings.start_fen)
        _LOGGER.info("New game from %s", self._state.start_fen)

        self._emit_phase(self._state.phase)
        self._emit_status(self._state.status)
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)

    def legal_moves(self, sq: Square) -> list[Move]:
        return self._state.legal_moves(sq)

    def submit_move(self, move: Move) -> bool:
        if self._state.phase != GamePhase.AWAITING_MOVE:
            _LOGGER.warning(
                "Rejected %s: not accepting moves in phase %s",
                move,
                self._state.phase.name,
            )
            return False

        try:
            record = self._state.apply_move(move)
        except ChaturError as exc:
            _LOGGER.warning("Rejected %s: %s", move, exc)
            return False

        _LOGGER.debug("%s played %s", record.mover, move)
        self._emit_move(record)

        pending = self._state.pending_promotion
        if pending is not None:
            self._emit_phase(GamePhase.AWAITING_PROMOTION)
            self._emit_promotion(pending)
            return True

        self._after_turn()
        return True

    def choose_promotion(self, piece_type: PieceType) -> bool:
        if self._state.phase != GamePhase.AWAITING_PROMOTION:
            _LOGGER.warning("Rejected promotion to %s: none pending", piece_type)
            return False

        try:
            record = self._state.promote(piece_type)
        except ChaturError as exc:
            _LOGGER.warning("Rejected promotion to %s: %s", piece_type, exc)
            return False

        _LOGGER.debug("%s promoted to %s", record.mover, piece_type)
        self._after_turn()
        return True

    def undo_move(self) -> bool:
        if not self._settings.allow_undo:
            return False
        if self._state.is_game_over or not self._state.move_history:
            return False

        undone = self._state.undo_last_move()
        _LOGGER.debug("Undid %s", undone)
        self._emit_phase(self._state.phase)
        self._emit_status(self._state.status)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_turn(self) -> None:
        self._emit_status(self._state.status)
        if self._state.is_game_over:
            _LOGGER.info(
                "Game over: %s (%s)",
                self._state.status.name.lower(),
                self._state.result.name.lower(),
            )
            self._emit_game_over(self._state.result)
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_promotion(self, pending: PendingPromotion) -> None:
        for cb in self.events.on_promotion_required:
            cb(pending)

    def _emit_status(self, status: GameStatus) -> None:
        for cb in self.events.on_status_changed:
            cb(status)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
