"""Tests for Position and Piece value objects."""

import copy

import pytest

from chesskern.core.enums import PieceColor, PieceKind
from chesskern.core.piece import Piece
from chesskern.core.position import A1, E4, H8, Position


class TestPositionConstruction:
    def test_corners(self) -> None:
        assert Position(0, 0).rank == 0
        assert Position(0, 0).file == 0
        assert Position(7, 7).rank == 7
        assert Position(7, 7).file == 7

    @pytest.mark.parametrize(("rank", "file"), [(8, 0), (0, 8), (-1, 0), (0, -1)])
    def test_out_of_range_raises(self, rank: int, file: int) -> None:
        with pytest.raises(ValueError):
            Position(rank, file)

    def test_flat_encoding(self) -> None:
        assert Position(3, 4).index == 28
        assert int(Position(7, 7)) == 63
        assert Position.from_index(28) == Position(3, 4)

    def test_from_index_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Position.from_index(64)

    def test_usable_as_sequence_index(self) -> None:
        data = list(range(64))
        assert data[E4] == 28

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            E4._index = 3  # type: ignore[misc]


class TestPositionAlgebraic:
    @pytest.mark.parametrize(
        ("name", "rank", "file"),
        [
            ("a1", 0, 0),
            ("b2", 1, 1),
            ("c3", 2, 2),
            ("d4", 3, 3),
            ("e5", 4, 4),
            ("f6", 5, 5),
            ("g7", 6, 6),
            ("h8", 7, 7),
        ],
    )
    def test_parse(self, name: str, rank: int, file: int) -> None:
        assert Position.from_algebraic(name) == Position(rank, file)

    @pytest.mark.parametrize("name", ["a", "i1", "a9", "a0", "e44", ""])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            Position.from_algebraic(name)

    def test_to_string(self) -> None:
        assert str(A1) == "a1"
        assert str(H8) == "h8"
        assert str(Position(3, 4)) == "e4"

    def test_repr(self) -> None:
        assert repr(E4) == "Position('e4')"


class TestPositionValueSemantics:
    def test_equality_and_hash(self) -> None:
        assert Position(3, 4) == E4
        assert len({Position(3, 4), E4, Position.from_algebraic("e4")}) == 1

    def test_copy_is_equal(self) -> None:
        assert copy.deepcopy(E4) == E4

    def test_offset_on_board(self) -> None:
        assert E4.offset(1, -1) == Position.from_algebraic("d5")

    def test_offset_off_board(self) -> None:
        assert H8.offset(1, 0) is None
        assert A1.offset(0, -1) is None


class TestPiece:
    def test_fen_char(self) -> None:
        assert str(Piece(PieceKind.KNIGHT, PieceColor.WHITE)) == "N"
        assert str(Piece(PieceKind.QUEEN, PieceColor.BLACK)) == "q"

    def test_from_char(self) -> None:
        assert Piece.from_char("k") == Piece(PieceKind.KING, PieceColor.BLACK)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_no_identity_beyond_kind_and_color(self) -> None:
        a = Piece(PieceKind.PAWN, PieceColor.WHITE)
        b = Piece(PieceKind.PAWN, PieceColor.WHITE)
        assert a == b
        assert hash(a) == hash(b)

    def test_color_opposite(self) -> None:
        assert PieceColor.WHITE.opposite == PieceColor.BLACK
        assert PieceColor.BLACK.opposite == PieceColor.WHITE
