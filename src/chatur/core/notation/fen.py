"""FEN-style board setup with chatur letters (``C`` / ``c``).

Only the placement and side-to-move fields are used. ``has_moved`` is not
part of the format: a piece standing where the starting position has the
same piece loads as unmoved, anything else as moved.
"""

from __future__ import annotations

from chatur.core.board import Board
from chatur.core.enums import Color
from chatur.core.piece import Piece
from chatur.core.position import Position
from chatur.core.rules import Rules
from chatur.core.types import BOARD_SIZE

STARTING_FEN = "rnbqkbnr/pcpcpcpc/8/8/8/8/PCPCPCPC/RNBQKBNR w"

_INITIAL = Board.initial()


def board_from_fen(placement: str) -> Board:
    """Parse the placement field of a FEN string into a :class:`Board`."""
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                piece = Piece.from_char(ch)
                if _INITIAL[(row, col)] != piece:
                    piece = piece.moved()
                board[(row, col)] = piece
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise the placement of *board*."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def position_from_fen(fen: str) -> Position:
    """Parse ``"<placement> [w|b]"`` into a :class:`Position`."""
    parts = fen.split()
    if not (1 <= len(parts) <= 2):
        raise ValueError(f"Invalid FEN (need 1-2 fields): {fen!r}")

    board = board_from_fen(parts[0])

    side_part = parts[1] if len(parts) > 1 else "w"
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    if Rules.is_in_check(board, side.opposite):
        raise ValueError(f"Side not to move is in check: {fen!r}")

    return Position.from_board(board, side)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to ``"<placement> <side>"``."""
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    return f"{board_to_fen(pos.board)} {side_str}"
