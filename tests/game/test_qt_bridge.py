"""Tests for the Qt game session bridge."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from chatur.core.enums import Color, GameResult, GameStatus, PieceType
from chatur.core.errors import OutOfBoundsError
from chatur.core.move import Move
from chatur.core.types import parse_square
from chatur.game.controller import GameController
from chatur.game.interfaces import GamePhase, GameSettings
from chatur.game.qt_bridge import GameSession


def mv(uci: str) -> Move:
    return Move(parse_square(uci[:2]), parse_square(uci[2:4]))


def _started_session(fen: str | None = None) -> GameSession:
    session = GameSession()
    settings = GameSettings() if fen is None else GameSettings(start_fen=fen)
    session.new_game(settings)
    return session


class TestGameSession:
    def test_wraps_given_controller(self) -> None:
        controller = GameController()
        session = GameSession(controller)
        assert session.controller is controller

    def test_new_game_emits_phase(self) -> None:
        session = GameSession()
        phases = QSignalSpy(session.phase_changed)
        statuses = QSignalSpy(session.status_changed)

        session.new_game(None)

        assert len(phases) == 1
        assert phases[0][0] == int(GamePhase.AWAITING_MOVE)
        assert len(statuses) == 1
        assert statuses[0][0] == int(GameStatus.IN_PROGRESS)

    def test_new_game_rejects_bad_settings(self) -> None:
        session = GameSession()
        rejected = QSignalSpy(session.move_rejected)

        session.new_game("not settings")

        assert len(rejected) == 1

    def test_submit_move_emits_move_applied(self) -> None:
        session = _started_session()
        applied = QSignalSpy(session.move_applied)
        rejected = QSignalSpy(session.move_rejected)

        session.submit_move(mv("e2e4"))

        assert len(applied) == 1
        assert len(rejected) == 0
        assert session.controller.state.side_to_move == Color.BLACK

    def test_illegal_move_emits_rejected(self) -> None:
        session = _started_session()
        applied = QSignalSpy(session.move_applied)
        rejected = QSignalSpy(session.move_rejected)

        session.submit_move(mv("e2e5"))

        assert len(applied) == 0
        assert len(rejected) == 1
        assert rejected[0][0] == "Illegal move: e2e5"

    def test_non_move_payload_rejected(self) -> None:
        session = _started_session()
        rejected = QSignalSpy(session.move_rejected)

        session.submit_move("e2e4")

        assert len(rejected) == 1

    def test_legal_moves_off_board(self) -> None:
        session = _started_session()
        rejected = QSignalSpy(session.move_rejected)

        with pytest.raises(OutOfBoundsError):
            session.legal_moves(8, 0)
        assert len(rejected) == 0
        assert len(session.legal_moves(6, 4)) == 2

    def test_promotion_round_trip(self) -> None:
        session = _started_session("4k3/P7/8/8/8/8/8/4K3 w")
        required = QSignalSpy(session.promotion_required)
        statuses = QSignalSpy(session.status_changed)

        session.submit_move(mv("a7a8"))

        assert len(required) == 1
        assert (required[0][0], required[0][1]) == parse_square("a8")
        assert required[0][2] == int(Color.WHITE)
        assert len(statuses) == 0

        session.choose_promotion(int(PieceType.QUEEN))

        assert len(statuses) == 1
        assert statuses[0][0] == int(GameStatus.CHECK)

    def test_unknown_piece_type_rejected(self) -> None:
        session = _started_session("4k3/P7/8/8/8/8/8/4K3 w")
        session.submit_move(mv("a7a8"))
        rejected = QSignalSpy(session.move_rejected)

        session.choose_promotion(99)
        session.choose_promotion(int(PieceType.KING))

        assert len(rejected) == 2
        assert session.controller.state.pending_promotion is not None

    def test_game_over_signal(self) -> None:
        session = _started_session()
        over = QSignalSpy(session.game_over)

        for uci in ("e2e4", "a7a6", "f1c4", "a6a5", "d1h5", "a5a4", "h5f7"):
            session.submit_move(mv(uci))

        assert len(over) == 1
        assert over[0][0] == int(GameResult.WHITE_WINS)

    def test_undo(self) -> None:
        session = _started_session()
        rejected = QSignalSpy(session.move_rejected)

        session.undo()
        assert len(rejected) == 1

        session.submit_move(mv("e2e4"))
        session.undo()
        assert len(rejected) == 1
        assert session.controller.state.ply_count == 0
