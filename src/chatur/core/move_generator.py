"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from collections.abc import Callable

from chatur.core.board import Board
from chatur.core.enums import CastleSide, Color, PieceType
from chatur.core.move import Move
from chatur.core.piece import Piece
from chatur.core.types import (
    BOARD_SIZE,
    Square,
    all_squares,
    is_valid_square,
    validate_square,
)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# Column deltas of the pawn's captures and the chatur's steps.
SIDEWAYS: tuple[int, int] = (-1, 1)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for row, col in all_squares():
        targets[(row, col)] = tuple(
            (row + dr, col + dc)
            for dr, dc in offsets
            if is_valid_square(row + dr, col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row, col in all_squares():
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r = row + dr
            c = col + dc
            ray: list[Square] = []
            while is_valid_square(r, c):
                ray.append((r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[(row, col)] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS: dict[PieceType, dict[Square, tuple[tuple[Square, ...], ...]]] = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}

MoveRule = Callable[["MoveGenerator", Square, Piece], list[Move]]
AttackRule = Callable[["MoveGenerator", Square, Piece], list[Square]]


class MoveGenerator:
    """Generates moves and answers attack queries for a :class:`Board`.

    The board handed in is never mutated: every "what if" question is asked
    of a scratch copy.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> list[Move]:
        """Strictly legal moves of the piece on *sq* (empty square → ``[]``)."""
        sq = validate_square(sq)
        piece = self._board[sq]
        if piece is None:
            return []
        return [
            move
            for move in self._pseudo_legal(sq, piece)
            if not self.would_be_in_check(sq, move.to_sq, piece.color)
        ]

    def all_legal_moves(self, color: Color) -> list[Move]:
        """Every legal move available to *color*."""
        moves: list[Move] = []
        for sq in self._board.pieces(color):
            moves.extend(self.legal_moves(sq))
        return moves

    def has_any_legal_moves(self, color: Color) -> bool:
        """Whether *color* has at least one legal move (stops at the first)."""
        return any(self.legal_moves(sq) for sq in self._board.pieces(color))

    def pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Moves of the piece on *sq* that may still leave its king in check."""
        sq = validate_square(sq)
        piece = self._board[sq]
        if piece is None:
            return []
        return self._pseudo_legal(sq, piece)

    def attacked_squares(self, sq: Square) -> list[Square]:
        """Squares threatened by the piece on *sq*, for check detection."""
        sq = validate_square(sq)
        piece = self._board[sq]
        if piece is None:
            return []
        return _ATTACK_RULES[piece.piece_type](self, sq, piece)

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked? A side without a king never is."""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color)

    def is_square_attacked(self, sq: Square, defending_color: Color) -> bool:
        """Is *sq* attacked by any piece of the side opposing *defending_color*?"""
        sq = validate_square(sq)
        attacking_color = defending_color.opposite
        for from_sq, piece in self._board.items():
            if piece.color != attacking_color:
                continue
            if sq in _ATTACK_RULES[piece.piece_type](self, from_sq, piece):
                return True
        return False

    def would_be_in_check(self, from_sq: Square, to_sq: Square, color: Color) -> bool:
        """Would *color*'s king be in check after moving *from_sq* → *to_sq*?"""
        piece = self._board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")
        scratch = self._board.copy()
        scratch[from_sq] = None
        scratch[to_sq] = piece
        return MoveGenerator(scratch).is_in_check(color)

    # -- Castling -----------------------------------------------------------

    def can_castle(self, king_sq: Square, color: Color, side: CastleSide) -> bool:
        """Rook unmoved, path clear, and no attacked square on the king's walk.

        The king's own eligibility (unmoved, not in check) is checked by the
        king generator before it asks.
        """
        row, col = validate_square(king_sq)
        king = self._board[king_sq]
        if king is None or king.piece_type != PieceType.KING or king.color != color:
            return False
        # King and rook must both land strictly between their start squares.
        if abs(side.rook_col - col) <= 2:
            return False

        rook = self._board[(row, side.rook_col)]
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != color
            or rook.has_moved
        ):
            return False

        lo, hi = sorted((col, side.rook_col))
        for c in range(lo + 1, hi):
            if self._board[(row, c)] is not None:
                return False

        for step in range(3):
            path_sq = (row, col + step * side.direction)
            if self.would_be_in_check(king_sq, path_sq, color):
                return False
        return True

    # -- Piece-specific generators (private) -------------------------------

    def _pseudo_legal(self, sq: Square, piece: Piece) -> list[Move]:
        return _MOVE_RULES[piece.piece_type](self, sq, piece)

    def _is_enemy(self, sq: Square, color: Color) -> bool:
        target = self._board[sq]
        return target is not None and target.color != color

    def _gen_pawn(self, sq: Square, piece: Piece) -> list[Move]:
        board = self._board
        row, col = sq
        forward = piece.color.forward
        moves: list[Move] = []

        one_step = (row + forward, col)
        if is_valid_square(*one_step) and board.is_empty(one_step):
            moves.append(Move(sq, one_step))
            if row == piece.color.start_row:
                two_step = (row + 2 * forward, col)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for dc in SIDEWAYS:
            cap_sq = (row + forward, col + dc)
            if is_valid_square(*cap_sq) and self._is_enemy(cap_sq, piece.color):
                moves.append(Move(sq, cap_sq))
        return moves

    def _gen_chatur(self, sq: Square, piece: Piece) -> list[Move]:
        board = self._board
        row, col = sq
        forward = piece.color.forward
        may_jump = row == piece.color.start_row and not piece.has_moved
        moves: list[Move] = []

        for dc in SIDEWAYS:
            step = (row + forward, col + dc)
            if not is_valid_square(*step) or not board.is_empty(step):
                continue
            moves.append(Move(sq, step))
            if may_jump:
                jump = (row + 2 * forward, col + 2 * dc)
                if is_valid_square(*jump) and board.is_empty(jump):
                    moves.append(Move(sq, jump))

        cap_sq = (row + forward, col)
        if is_valid_square(*cap_sq) and self._is_enemy(cap_sq, piece.color):
            moves.append(Move(sq, cap_sq))
        return moves

    def _gen_knight(self, sq: Square, piece: Piece) -> list[Move]:
        targets = self._step_targets(sq, piece, _KNIGHT_TARGETS)
        return [Move(sq, to_sq) for to_sq in targets]

    def _gen_sliding(self, sq: Square, piece: Piece) -> list[Move]:
        return [Move(sq, to_sq) for to_sq in self._slide_targets(sq, piece)]

    def _gen_king(self, sq: Square, piece: Piece) -> list[Move]:
        targets = self._step_targets(sq, piece, _KING_TARGETS)
        moves = [Move(sq, to_sq) for to_sq in targets]

        if not piece.has_moved and not self.is_in_check(piece.color):
            row, col = sq
            for side in (CastleSide.KINGSIDE, CastleSide.QUEENSIDE):
                if self.can_castle(sq, piece.color, side):
                    moves.append(Move(sq, (row, col + 2 * side.direction), side))
        return moves

    def _step_targets(
        self,
        sq: Square,
        piece: Piece,
        table: dict[Square, tuple[Square, ...]],
    ) -> list[Square]:
        board = self._board
        targets: list[Square] = []
        for to_sq in table[sq]:
            target = board[to_sq]
            if target is None or target.color != piece.color:
                targets.append(to_sq)
        return targets

    def _slide_targets(self, sq: Square, piece: Piece) -> list[Square]:
        board = self._board
        targets: list[Square] = []
        for ray in _SLIDER_RAYS[piece.piece_type][sq]:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    targets.append(to_sq)
                    continue
                if target.color != piece.color:
                    targets.append(to_sq)
                break
        return targets

    # -- Attack generators (private) ---------------------------------------

    def _pawn_attacks(self, sq: Square, piece: Piece) -> list[Square]:
        row, col = sq
        forward = piece.color.forward
        return [
            (row + forward, col + dc)
            for dc in SIDEWAYS
            if is_valid_square(row + forward, col + dc)
        ]

    def _chatur_attacks(self, sq: Square, piece: Piece) -> list[Square]:
        row, col = sq
        ahead = row + piece.color.forward
        return [(ahead, col)] if 0 <= ahead < BOARD_SIZE else []

    def _knight_attacks(self, sq: Square, piece: Piece) -> list[Square]:
        return self._step_targets(sq, piece, _KNIGHT_TARGETS)

    def _sliding_attacks(self, sq: Square, piece: Piece) -> list[Square]:
        return self._slide_targets(sq, piece)

    def _king_attacks(self, sq: Square, piece: Piece) -> list[Square]:
        return list(_KING_TARGETS[sq])


_MOVE_RULES: dict[PieceType, MoveRule] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.CHATUR: MoveGenerator._gen_chatur,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_sliding,
    PieceType.ROOK: MoveGenerator._gen_sliding,
    PieceType.QUEEN: MoveGenerator._gen_sliding,
    PieceType.KING: MoveGenerator._gen_king,
}

_ATTACK_RULES: dict[PieceType, AttackRule] = {
    PieceType.PAWN: MoveGenerator._pawn_attacks,
    PieceType.CHATUR: MoveGenerator._chatur_attacks,
    PieceType.KNIGHT: MoveGenerator._knight_attacks,
    PieceType.BISHOP: MoveGenerator._sliding_attacks,
    PieceType.ROOK: MoveGenerator._sliding_attacks,
    PieceType.QUEEN: MoveGenerator._sliding_attacks,
    PieceType.KING: MoveGenerator._king_attacks,
}
