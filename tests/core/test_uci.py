"""Tests for UCI long-algebraic move text."""

import pytest

from chesskern.core.enums import PieceColor, PieceKind
from chesskern.core.errors import IllegalMoveError
from chesskern.core.move import Castle, DoublePawnPush, Normal, Promotion, PromotionCapture
from chesskern.core.notation import move_to_uci, parse_uci
from chesskern.core.piece import Piece
from chesskern.core.position import A7, A8, B8, E1, E2, E3, E4, F1, G1, H1
from chesskern.core.state import GameState

WHITE_QUEEN = Piece(PieceKind.QUEEN, PieceColor.WHITE)
WHITE_KNIGHT = Piece(PieceKind.KNIGHT, PieceColor.WHITE)


class TestMoveToUci:
    def test_plain(self) -> None:
        assert move_to_uci(DoublePawnPush(E2, E4, E3)) == "e2e4"

    def test_castle_is_king_move(self) -> None:
        assert move_to_uci(Castle(E1, G1, H1, F1)) == "e1g1"

    def test_promotion_suffix(self) -> None:
        assert move_to_uci(Promotion(A7, A8, WHITE_QUEEN)) == "a7a8q"
        assert move_to_uci(Promotion(A7, A8, WHITE_KNIGHT)) == "a7a8n"

    def test_promotion_capture_suffix(self) -> None:
        black_rook = Piece(PieceKind.ROOK, PieceColor.BLACK)
        assert move_to_uci(PromotionCapture(A7, B8, black_rook, WHITE_QUEEN)) == "a7b8q"


class TestParseUci:
    def test_double_push(self, start_state: GameState) -> None:
        assert parse_uci(start_state, "e2e4") == DoublePawnPush(E2, E4, E3)

    def test_single_push(self, start_state: GameState) -> None:
        assert parse_uci(start_state, "e2e3") == Normal(E2, E3)

    def test_castle(self) -> None:
        state = GameState.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        assert parse_uci(state, "e1g1") == Castle(E1, G1, H1, F1)

    def test_promotion_choice(self) -> None:
        state = GameState.from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        assert parse_uci(state, "a7a8n") == Promotion(A7, A8, WHITE_KNIGHT)
        assert parse_uci(state, "a7a8q") == Promotion(A7, A8, WHITE_QUEEN)

    def test_promotion_needs_suffix(self) -> None:
        state = GameState.from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        with pytest.raises(IllegalMoveError):
            parse_uci(state, "a7a8")

    def test_illegal(self, start_state: GameState) -> None:
        with pytest.raises(IllegalMoveError):
            parse_uci(start_state, "e2e5")

    @pytest.mark.parametrize("text", ["e2", "e2e4e5", "z2e4", "e2e4x"])
    def test_malformed(self, start_state: GameState, text: str) -> None:
        with pytest.raises(ValueError):
            parse_uci(start_state, text)

    def test_round_trip_over_legal_moves(self, kiwipete: GameState) -> None:
        for move in kiwipete.legal_moves():
            assert parse_uci(kiwipete, move_to_uci(move)) == move
