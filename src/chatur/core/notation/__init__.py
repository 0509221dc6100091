"""Notation package: FEN-style board setup and serialisation."""

from chatur.core.notation.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "position_from_fen",
    "position_to_fen",
]
