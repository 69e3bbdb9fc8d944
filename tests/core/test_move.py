"""Tests for move variant helpers."""

from chesskern.core.board import Board
from chesskern.core.enums import PieceColor, PieceKind
from chesskern.core.move import (
    Capture,
    Castle,
    DoublePawnPush,
    EnPassant,
    Normal,
    Promotion,
    PromotionCapture,
    captured_piece,
    is_capture,
)
from chesskern.core.piece import Piece
from chesskern.core.position import A1, A7, A8, B8, C1, D1, D5, D6, E1, E2, E3, E4, E5

BLACK_PAWN = Piece(PieceKind.PAWN, PieceColor.BLACK)
BLACK_ROOK = Piece(PieceKind.ROOK, PieceColor.BLACK)
WHITE_QUEEN = Piece(PieceKind.QUEEN, PieceColor.WHITE)


class TestIsCapture:
    def test_captures(self) -> None:
        assert is_capture(Capture(E4, D5, BLACK_PAWN))
        assert is_capture(EnPassant(E5, D6, D5))
        assert is_capture(PromotionCapture(A7, B8, BLACK_ROOK, WHITE_QUEEN))

    def test_quiet(self) -> None:
        assert not is_capture(Normal(E2, E3))
        assert not is_capture(DoublePawnPush(E2, E4, E3))
        assert not is_capture(Promotion(A7, A8, WHITE_QUEEN))
        assert not is_capture(Castle(E1, C1, A1, D1))


class TestCapturedPiece:
    def test_carried_by_move(self) -> None:
        assert captured_piece(Capture(E4, D5, BLACK_PAWN), Board()) == BLACK_PAWN

    def test_en_passant_reads_board(self) -> None:
        board = Board()
        board[D5] = BLACK_PAWN
        assert captured_piece(EnPassant(E5, D6, D5), board) == BLACK_PAWN

    def test_none_for_quiet(self) -> None:
        assert captured_piece(Normal(E2, E3), Board()) is None

    def test_moves_are_values(self) -> None:
        assert Normal(E2, E3) == Normal(E2, E3)
        assert Normal(E2, E3) != DoublePawnPush(E2, E3, E3)
        assert len({Normal(E2, E3), Normal(E2, E3)}) == 1
