"""Core domain layer: pure chatur chess rules with zero external dependencies.

Quick start::

    from chatur.core import Position, parse_square

    pos = Position.initial()
    for move in pos.legal_moves(parse_square("b2")):
        print(move)
"""

from chatur.core.board import Board
from chatur.core.enums import (
    PROMOTION_TYPES,
    CastleSide,
    Color,
    GameResult,
    GameStatus,
    PieceType,
)
from chatur.core.errors import (
    ChaturError,
    GameOverError,
    IllegalMoveError,
    OutOfBoundsError,
    PromotionError,
)
from chatur.core.move import Move
from chatur.core.move_generator import MoveGenerator
from chatur.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    position_from_fen,
    position_to_fen,
)
from chatur.core.piece import Piece
from chatur.core.position import (
    MoveOutcome,
    PendingPromotion,
    Position,
    apply_move,
    choose_promotion,
    new_game,
)
from chatur.core.rules import Rules, game_status, legal_moves
from chatur.core.types import Square, is_valid_square, parse_square, square_name

__all__ = [
    # Enums / constants
    "PROMOTION_TYPES",
    "CastleSide",
    "Color",
    "GameResult",
    "GameStatus",
    "PieceType",
    # Errors
    "ChaturError",
    "GameOverError",
    "IllegalMoveError",
    "OutOfBoundsError",
    "PromotionError",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveOutcome",
    "PendingPromotion",
    "Piece",
    "Position",
    "Rules",
    # Engine entry points
    "apply_move",
    "choose_promotion",
    "game_status",
    "legal_moves",
    "new_game",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "position_from_fen",
    "position_to_fen",
]
