"""Core enumerations for the chatur chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a forward step (white moves towards row 0)."""
        return -1 if self == Color.WHITE else 1

    @property
    def home_row(self) -> int:
        """Row holding this side's back rank."""
        return 7 if self == Color.WHITE else 0

    @property
    def start_row(self) -> int:
        """Row holding this side's pawns and chaturs at game start."""
        return 6 if self == Color.WHITE else 1

    @property
    def promotion_row(self) -> int:
        """The opponent's home row."""
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece kinds, the chatur ranked alongside the pawn."""

    PAWN = 1
    CHATUR = 2
    KNIGHT = 3
    BISHOP = 4
    ROOK = 5
    QUEEN = 6
    KING = 7

    def __str__(self) -> str:
        return self.name.lower()


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class CastleSide(IntEnum):
    """Which rook the king castles with."""

    KINGSIDE = 1
    QUEENSIDE = 2

    @property
    def direction(self) -> int:
        return 1 if self == CastleSide.KINGSIDE else -1

    @property
    def rook_col(self) -> int:
        return 7 if self == CastleSide.KINGSIDE else 0

    def __str__(self) -> str:
        return self.name.lower()


class GameStatus(IntEnum):
    """Status of the side to move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
