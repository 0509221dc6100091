"""Tests for Board."""

import pytest

from chatur.core.board import Board
from chatur.core.enums import Color, PieceType
from chatur.core.errors import OutOfBoundsError
from chatur.core.piece import Piece
from chatur.core.types import parse_square

E1 = parse_square("e1")
E8 = parse_square("e8")
E4 = parse_square("e4")


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for col, pt in enumerate(expected):
            assert board[(7, col)] == Piece(Color.WHITE, pt), f"Mismatch at col {col}"
            assert board[(0, col)] == Piece(Color.BLACK, pt), f"Mismatch at col {col}"

    def test_front_ranks_alternate_pawn_and_chatur(self) -> None:
        board = Board.initial()
        for col in range(8):
            pt = PieceType.PAWN if col % 2 == 0 else PieceType.CHATUR
            assert board[(6, col)] == Piece(Color.WHITE, pt)
            assert board[(1, col)] == Piece(Color.BLACK, pt)

    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE, PieceType.PAWN)) == 4
        assert len(board.pieces(Color.WHITE, PieceType.CHATUR)) == 4
        assert len(board.pieces(Color.BLACK)) == 16

    def test_nothing_has_moved(self) -> None:
        board = Board.initial()
        assert all(not piece.has_moved for _, piece in board.items())

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board[(row, col)] is None


class TestBoardKings:
    def test_king_square_cached(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_missing_king_is_none(self) -> None:
        assert Board().king_square(Color.WHITE) is None

    def test_second_king_rejected(self) -> None:
        board = Board()
        board[E1] = Piece(Color.WHITE, PieceType.KING)
        with pytest.raises(ValueError):
            board[E4] = Piece(Color.WHITE, PieceType.KING)
        assert board[E4] is None

    def test_replacing_king_on_same_square(self) -> None:
        board = Board()
        board[E1] = Piece(Color.WHITE, PieceType.KING)
        board[E1] = Piece(Color.WHITE, PieceType.KING, has_moved=True)
        assert board.king_square(Color.WHITE) == E1

    def test_king_cache_follows_move(self) -> None:
        board = Board.initial()
        board[parse_square("e2")] = None
        board.move_piece(E1, parse_square("e2"))
        assert board.king_square(Color.WHITE) == parse_square("e2")
        assert board[E1] is None

    def test_capturing_king_clears_cache(self) -> None:
        board = Board()
        board[E4] = Piece(Color.BLACK, PieceType.KING)
        board[E1] = Piece(Color.WHITE, PieceType.ROOK)
        board.move_piece(E1, E4)
        assert board.king_square(Color.BLACK) is None


class TestBoardMutation:
    def test_move_piece_marks_moved_and_returns_capture(self) -> None:
        board = Board()
        board[E1] = Piece(Color.WHITE, PieceType.ROOK)
        board[E4] = Piece(Color.BLACK, PieceType.KNIGHT)
        captured = board.move_piece(E1, E4)
        assert captured == Piece(Color.BLACK, PieceType.KNIGHT)
        assert board[E4] == Piece(Color.WHITE, PieceType.ROOK, has_moved=True)
        assert board[E1] is None

    def test_move_from_empty_square_raises(self) -> None:
        with pytest.raises(ValueError):
            Board().move_piece(E1, E4)

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[E1] = None
        assert board[E1] is not None
        assert board.king_square(Color.WHITE) == E1
        assert clone.king_square(Color.WHITE) is None

    def test_equality(self) -> None:
        assert Board.initial() == Board.initial()
        assert Board.initial() != Board()

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.items()) == []
        assert board.king_square(Color.BLACK) is None


class TestBoardBounds:
    @pytest.mark.parametrize("sq", [(-1, 0), (0, 8), (8, 8), (3, -2)])
    def test_out_of_bounds_read(self, sq: tuple[int, int]) -> None:
        with pytest.raises(OutOfBoundsError):
            Board()[sq]

    def test_out_of_bounds_write(self) -> None:
        with pytest.raises(OutOfBoundsError):
            Board()[(8, 0)] = Piece(Color.WHITE, PieceType.PAWN)

    def test_repr_shows_chaturs(self) -> None:
        text = repr(Board.initial())
        assert "2 P C P C P C P C" in text
        assert "8 r n b q k b n r" in text


class TestPiece:
    def test_fen_chars(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.CHATUR)) == "C"
        assert Piece.from_char("c") == Piece(Color.BLACK, PieceType.CHATUR)

    def test_bad_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.CHATUR).symbol == "⛃"
        assert Piece(Color.BLACK, PieceType.CHATUR).symbol == "⛂"
        assert Piece(Color.BLACK, PieceType.KING).symbol == "♚"

    def test_moved_returns_flagged_copy(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        assert piece.moved() == Piece(Color.WHITE, PieceType.ROOK, has_moved=True)
        assert not piece.has_moved
