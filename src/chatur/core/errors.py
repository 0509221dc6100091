"""Exception hierarchy raised by the rules engine."""

from __future__ import annotations


class ChaturError(ValueError):
    """Base class for every rejected engine request."""


class OutOfBoundsError(ChaturError):
    """A coordinate outside the 8×8 board was supplied."""


class IllegalMoveError(ChaturError):
    """The submitted move is not in the current legal-move set."""


class PromotionError(ChaturError):
    """A promotion choice was invalid or nothing awaits promotion."""


class GameOverError(ChaturError):
    """A move was submitted after checkmate or stalemate."""
