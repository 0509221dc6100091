"""High-level rules: check, checkmate, stalemate and game status."""

from __future__ import annotations

from chatur.core.board import Board
from chatur.core.enums import Color, GameResult, GameStatus, PieceType
from chatur.core.move import Move
from chatur.core.move_generator import MoveGenerator
from chatur.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def legal_moves(board: Board, sq: Square) -> list[Move]:
        return MoveGenerator(board).legal_moves(sq)

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def has_any_legal_moves(board: Board, color: Color) -> bool:
        return MoveGenerator(board).has_any_legal_moves(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        return not gen.has_any_legal_moves(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if gen.is_in_check(color):
            return False
        return not gen.has_any_legal_moves(color)

    @staticmethod
    def needs_promotion(board: Board, sq: Square) -> bool:
        """Does the piece on *sq* stand on its promotion row as a pawn or chatur?"""
        piece = board[sq]
        if piece is None:
            return False
        return (
            piece.piece_type in (PieceType.PAWN, PieceType.CHATUR)
            and sq[0] == piece.color.promotion_row
        )

    @staticmethod
    def game_status(board: Board, color_to_move: Color) -> GameStatus:
        """Status of *color_to_move* on *board*."""
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(color_to_move)

        if not gen.has_any_legal_moves(color_to_move):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        if in_check:
            return GameStatus.CHECK
        return GameStatus.IN_PROGRESS

    @staticmethod
    def game_result(status: GameStatus, color_to_move: Color) -> GameResult:
        """Translate a status into a result; the mated side loses."""
        if status == GameStatus.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if color_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if status == GameStatus.STALEMATE:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS


def legal_moves(board: Board, sq: Square) -> list[Move]:
    """Legal moves of the piece on *sq*."""
    return Rules.legal_moves(board, sq)


def game_status(board: Board, color_to_move: Color) -> GameStatus:
    """Status of *color_to_move* on *board*."""
    return Rules.game_status(board, color_to_move)
