"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chatur.core.enums import CastleSide
from chatur.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    ``castling`` is set only on the king's castling candidates; it is what
    tells a castle apart from any other two-square king step.
    """

    from_sq: Square
    to_sq: Square
    castling: CastleSide | None = None

    @property
    def to_row(self) -> int:
        return self.to_sq[0]

    @property
    def to_col(self) -> int:
        return self.to_sq[1]

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
