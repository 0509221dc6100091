"""Abstract interfaces and settings for the game layer.

The concrete :class:`~chatur.game.controller.GameController` depends on
these definitions; UI collaborators depend on them too.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chatur.core.notation import STARTING_FEN

if TYPE_CHECKING:
    from chatur.core.enums import PieceType
    from chatur.core.move import Move
    from chatur.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()
    GAME_OVER = auto()


# ── Settings ─────────────────────────────────────────────────────────────────


@dataclass
class GameSettings:
    """User-configurable game options."""

    start_fen: str = STARTING_FEN
    allow_undo: bool = True


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, settings: GameSettings | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def legal_moves(self, sq: Square) -> list[Move]:
        """Legal moves of the side to move from *sq*."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def choose_promotion(self, piece_type: PieceType) -> bool:
        """Finish a pending promotion. Returns True on success."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
