"""Square type alias and coordinate helpers.

Board layout (row-major, as seen from white):
    row 0 = rank 8 (black's home), row 7 = rank 1 (white's home)
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from typing import TypeAlias

from chatur.core.errors import OutOfBoundsError

Square: TypeAlias = tuple[int, int]  # (row, col), both 0–7

BOARD_SIZE = 8


def is_valid_square(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def validate_square(sq: Square) -> Square:
    """Return *sq* unchanged, or raise :class:`OutOfBoundsError`."""
    try:
        row, col = sq
    except (TypeError, ValueError):
        raise OutOfBoundsError(f"Not a (row, col) pair: {sq!r}") from None
    if not (isinstance(row, int) and isinstance(col, int)):
        raise OutOfBoundsError(f"Square coordinates must be integers: {sq!r}")
    if not is_valid_square(row, col):
        raise OutOfBoundsError(f"Square off the board: {sq!r}")
    return (row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 4) → 'e1'."""
    row, col = validate_square(sq)
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → (6, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise OutOfBoundsError(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


def all_squares() -> list[Square]:
    """Every square, row by row from row 0."""
    return [(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
