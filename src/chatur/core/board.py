"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chatur.core.enums import Color, PieceType
from chatur.core.piece import Piece
from chatur.core.types import BOARD_SIZE, Square, validate_square

_COLOR_COUNT = 2

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def front_rank_type(col: int) -> PieceType:
    """Pawns on files a, c, e, g; chaturs on b, d, f, h."""
    return PieceType.PAWN if col % 2 == 0 else PieceType.CHATUR


class Board:
    """Mutable 64-square board addressed by ``(row, col)``.

    Holds at most one king per color; the king squares are cached.
    """

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None] * _COLOR_COUNT

    @staticmethod
    def _index(sq: Square) -> int:
        row, col = validate_square(sq)
        return row * BOARD_SIZE + col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        sq = validate_square(sq)
        idx = sq[0] * BOARD_SIZE + sq[1]
        old_piece = self._squares[idx]

        if piece is not None and piece.piece_type == PieceType.KING:
            current = self._king_squares[int(piece.color)]
            if current is not None and current != sq:
                raise ValueError(
                    f"{piece.color} already has a king on {current}; "
                    "clear it before placing another"
                )

        if (
            old_piece is not None
            and old_piece.piece_type == PieceType.KING
            and self._king_squares[int(old_piece.color)] == sq
        ):
            self._king_squares[int(old_piece.color)] = None

        self._squares[idx] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = sq

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def items(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, row by row."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield divmod(idx, BOARD_SIZE), piece

    def pieces(self, color: Color, piece_type: PieceType | None = None) -> list[Square]:
        """Squares occupied by *color* (optionally only its *piece_type*)."""
        return [
            sq
            for sq, piece in self.items()
            if piece.color == color
            and (piece_type is None or piece.piece_type == piece_type)
        ]

    def king_square(self, color: Color) -> Square | None:
        """The king square for *color*, or ``None`` if it has no king."""
        return self._king_squares[int(color)]

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate the piece on *from_sq*, marking it moved.

        Returns whatever stood on *to_sq* before. The origin is cleared
        first so a moving king never coexists with itself.
        """
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")
        captured = self[to_sq]
        self[from_sq] = None
        self[to_sq] = piece.moved()
        return captured

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)
        self._king_squares = [None] * _COLOR_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Chatur starting position."""
        b = cls()
        for col, pt in enumerate(BACK_RANK):
            b[(Color.BLACK.home_row, col)] = Piece(Color.BLACK, pt)
            b[(Color.WHITE.home_row, col)] = Piece(Color.WHITE, pt)
        for col in range(BOARD_SIZE):
            pt = front_rank_type(col)
            b[(Color.BLACK.start_row, col)] = Piece(Color.BLACK, pt)
            b[(Color.WHITE.start_row, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
