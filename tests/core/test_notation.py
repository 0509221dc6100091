"""Tests for FEN-style board setup."""

import pytest

from chatur.core.board import Board
from chatur.core.enums import Color, GameStatus, PieceType
from chatur.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    position_from_fen,
    position_to_fen,
)
from chatur.core.piece import Piece
from chatur.core.position import Position
from chatur.core.types import parse_square


class TestFenParse:
    def test_starting_fen_matches_initial(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.board == Board.initial()
        assert pos.side_to_move == Color.WHITE
        assert pos.status == GameStatus.IN_PROGRESS

    def test_side_defaults_to_white(self) -> None:
        pos = position_from_fen(STARTING_FEN.split()[0])
        assert pos.side_to_move == Color.WHITE

    def test_black_to_move(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 b")
        assert pos.side_to_move == Color.BLACK

    def test_home_square_pieces_load_unmoved(self) -> None:
        board = board_from_fen("r3k2r/8/8/8/8/8/3C4/R3K2R")
        assert board[parse_square("a1")] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[parse_square("e8")] == Piece(Color.BLACK, PieceType.KING)
        assert board[parse_square("d2")] == Piece(Color.WHITE, PieceType.CHATUR)

    def test_displaced_pieces_load_moved(self) -> None:
        board = board_from_fen("4k3/8/8/8/4P3/8/2C5/3K4")
        assert board[parse_square("e4")].has_moved
        assert board[parse_square("d1")].has_moved
        # c2 is a pawn square in the starting setup
        assert board[parse_square("c2")].has_moved

    def test_status_evaluated_on_load(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b")
        assert pos.status == GameStatus.STALEMATE
        assert pos.game_over

    @pytest.mark.parametrize("fen", [
        "",
        "8/8/8/8/8/8/8",
        "9/8/8/8/8/8/8/8",
        "8/8/8/8/8/8/8/7",
        "8/8/8/8/8/8/8/44P",
        "8/8/8/8/8/8/8/7x",
        "8/8/8/8/8/8/8/8 x",
        "8/8/8/8/8/8/8/8 w extra",
        "k7/8/8/8/8/8/8/K6k",
        "4k3/8/8/8/8/8/8/4R1K1 w",
    ])
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)


class TestFenSerialise:
    def test_initial_round_trip(self) -> None:
        assert position_to_fen(Position.initial()) == STARTING_FEN

    def test_placement_text(self) -> None:
        board = board_from_fen("4k3/8/8/8/4P3/8/2C5/3K4")
        assert board_to_fen(board) == "4k3/8/8/8/4P3/8/2C5/3K4"

    def test_after_a_move(self) -> None:
        pos = Position.initial().play(
            next(
                m
                for m in Position.initial().legal_moves(parse_square("b2"))
                if m.to_sq == parse_square("c3")
            )
        )
        assert position_to_fen(pos) == (
            "rnbqkbnr/pcpcpcpc/8/8/8/2C5/P1PCPCPC/RNBQKBNR b"
        )
