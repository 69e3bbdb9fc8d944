"""Tests for GameController — the orchestrator."""

import logging

import pytest

from chesskern.core.enums import GameEndReason, GameResult, PieceColor
from chesskern.core.errors import IllegalMoveError, NotEnoughFields
from chesskern.core.move import DoublePawnPush, Move, Normal
from chesskern.core.move_generator import legal_moves
from chesskern.core.notation import STARTING_FEN, parse_uci
from chesskern.core.position import E2, E3, E4, E5
from chesskern.game.controller import GameController
from chesskern.game.interfaces import GamePhase
from chesskern.game.player import CallbackPlayer
from chesskern.game.settings import GameSettings

STALEMATE = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"


def _scripted(*moves: str, name: str = "") -> CallbackPlayer:
    """Player that replays *moves* (UCI text) in order."""
    it = iter(moves)
    return CallbackPlayer(lambda state: parse_uci(state, next(it)), name)


def _first_legal(name: str = "") -> CallbackPlayer:
    return CallbackPlayer(lambda state: legal_moves(state)[0], name)


def _make_controller(
    settings: GameSettings | None = None, fen: str | None = None
) -> GameController:
    """Helper: two first-legal-move players."""
    ctrl = GameController(settings)
    ctrl.new_game(_first_legal("W"), _first_legal("B"), fen=fen)
    return ctrl


class TestNewGame:
    def test_not_started_before_new_game(self) -> None:
        ctrl = GameController()
        assert ctrl.phase == GamePhase.NOT_STARTED
        assert ctrl.current_player is None
        assert ctrl.submit_move(DoublePawnPush(E2, E4, E3)) is False

    def test_phase_awaiting(self) -> None:
        ctrl = _make_controller()
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        assert ctrl.result == GameResult.IN_PROGRESS
        assert ctrl.end_reason is None

    def test_players_assigned(self) -> None:
        ctrl = _make_controller()
        assert ctrl.player(PieceColor.WHITE).name == "W"
        assert ctrl.player(PieceColor.BLACK).name == "B"
        assert ctrl.current_player is ctrl.player(PieceColor.WHITE)

    def test_default_start_position(self) -> None:
        ctrl = _make_controller()
        assert ctrl.state.to_fen() == STARTING_FEN

    def test_custom_fen(self) -> None:
        fen = "4k3/8/8/8/8/8/4P3/4K3 w - - 0 1"
        ctrl = _make_controller(fen=fen)
        assert ctrl.state.to_fen() == fen

    def test_settings_start_fen(self) -> None:
        fen = "4k3/8/8/8/8/8/4P3/4K3 b - - 0 1"
        ctrl = _make_controller(GameSettings(start_fen=fen))
        assert ctrl.state.turn == PieceColor.BLACK

    def test_bad_fen_raises(self) -> None:
        with pytest.raises(ValueError):
            _make_controller(fen="not a fen")

    def test_empty_fen_is_not_the_default(self) -> None:
        with pytest.raises(NotEnoughFields):
            _make_controller(fen="")

    def test_already_over(self) -> None:
        over: list[tuple[GameResult, GameEndReason]] = []
        ctrl = GameController()
        ctrl.events.on_game_over.append(lambda r, why: over.append((r, why)))
        ctrl.new_game(_first_legal(), _first_legal(), fen=STALEMATE)
        assert ctrl.is_game_over
        assert ctrl.result == GameResult.DRAW
        assert ctrl.end_reason == GameEndReason.STALEMATE
        assert over == [(GameResult.DRAW, GameEndReason.STALEMATE)]

    def test_new_game_resets_history(self) -> None:
        ctrl = _make_controller()
        ctrl.step()
        ctrl.new_game(_first_legal(), _first_legal())
        assert ctrl.history == ()


class TestSubmitMove:
    def test_legal_move(self) -> None:
        ctrl = _make_controller()
        move = DoublePawnPush(E2, E4, E3)
        assert ctrl.submit_move(move) is True
        assert ctrl.history == (move,)
        assert ctrl.state.turn == PieceColor.BLACK
        assert ctrl.state.en_passant == E3

    def test_illegal_move_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = _make_controller()
        with caplog.at_level(logging.WARNING, logger="chesskern.game.controller"):
            assert ctrl.submit_move(Normal(E2, E5)) is False
        assert ctrl.history == ()
        assert ctrl.state.to_fen() == STARTING_FEN
        assert "Rejected illegal move e2e5" in caplog.text

    def test_verification_can_be_disabled(self) -> None:
        ctrl = _make_controller(GameSettings(verify_moves=False))
        # A three-square pawn jump is applied as-is.
        assert ctrl.submit_move(Normal(E2, E5)) is True
        assert ctrl.state.board[E2] is None
        assert ctrl.state.board[E5] is not None

    def test_unverified_bad_move_keeps_state(self) -> None:
        ctrl = _make_controller(GameSettings(verify_moves=False))
        with pytest.raises(ValueError, match="No piece"):
            ctrl.submit_move(Normal(E4, E5))
        assert ctrl.state.to_fen() == STARTING_FEN
        assert ctrl.history == ()

    def test_on_move_event(self) -> None:
        seen: list[tuple[Move, str]] = []
        ctrl = _make_controller()
        ctrl.events.on_move.append(lambda m, s: seen.append((m, s.to_fen())))
        ctrl.submit_move(DoublePawnPush(E2, E4, E3))
        assert len(seen) == 1
        assert seen[0][0] == DoublePawnPush(E2, E4, E3)
        assert " b " in seen[0][1]

    def test_rejected_move_fires_nothing(self) -> None:
        seen: list[Move] = []
        ctrl = _make_controller()
        ctrl.events.on_move.append(lambda m, s: seen.append(m))
        ctrl.submit_move(Normal(E2, E5))
        assert seen == []


class TestGameOver:
    def test_fools_mate(self) -> None:
        phases: list[GamePhase] = []
        over: list[tuple[GameResult, GameEndReason]] = []
        ctrl = GameController()
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.events.on_game_over.append(lambda r, why: over.append((r, why)))
        ctrl.new_game(_scripted("f2f3", "g2g4"), _scripted("e7e5", "d8h4"))
        assert ctrl.run() == GameResult.BLACK_WINS
        assert ctrl.end_reason == GameEndReason.CHECKMATE
        assert ctrl.phase == GamePhase.GAME_OVER
        assert len(ctrl.history) == 4
        assert phases == [GamePhase.AWAITING_MOVE, GamePhase.GAME_OVER]
        assert over == [(GameResult.BLACK_WINS, GameEndReason.CHECKMATE)]

    def test_no_moves_after_game_over(self) -> None:
        ctrl = GameController()
        ctrl.new_game(_scripted("f2f3", "g2g4"), _scripted("e7e5", "d8h4"))
        ctrl.run()
        assert ctrl.step() is None
        assert ctrl.submit_move(DoublePawnPush(E2, E4, E3)) is False

    def test_fifty_move_draw(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4K1N1 w - - 99 80"
        ctrl = _make_controller(fen=fen)
        ctrl.step()
        assert ctrl.result == GameResult.DRAW
        assert ctrl.end_reason == GameEndReason.FIFTY_MOVE_RULE

    def test_fifty_move_rule_ignored(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4K1N1 w - - 99 80"
        ctrl = _make_controller(GameSettings(fifty_move_ends_game=False), fen=fen)
        ctrl.step()
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        assert ctrl.state.is_fifty_move_rule()


class TestStepAndRun:
    def test_step_plays_current_player(self) -> None:
        ctrl = GameController()
        ctrl.new_game(_scripted("e2e4"), _scripted("e7e5"))
        assert ctrl.step() == DoublePawnPush(E2, E4, E3)
        assert ctrl.current_player is ctrl.player(PieceColor.BLACK)

    def test_step_rejects_illegal_player_move(self) -> None:
        ctrl = GameController()
        cheat = CallbackPlayer(lambda state: Normal(E2, E5), "Cheat")
        ctrl.new_game(cheat, _first_legal())
        with pytest.raises(IllegalMoveError, match="Cheat"):
            ctrl.step()

    def test_run_respects_max_plies(self) -> None:
        ctrl = _make_controller(GameSettings(max_plies=6))
        assert ctrl.run() == GameResult.IN_PROGRESS
        assert len(ctrl.history) == 6
        assert ctrl.phase == GamePhase.AWAITING_MOVE

    def test_history_is_a_snapshot(self) -> None:
        ctrl = _make_controller()
        history = ctrl.history
        ctrl.step()
        assert history == ()
        assert len(ctrl.history) == 1
