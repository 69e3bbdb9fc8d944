"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chesskern.core.enums import PieceColor, PieceKind
from chesskern.core.piece import Piece
from chesskern.core.position import ALL_SQUARES, Position

Square = Piece | None

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 64-square board indexed by :class:`Position`.

    The backing list is addressed by the position's flat index, so
    ``board[Position(3, 4)]`` and ``board.squares()[28]`` are the same square.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Square] = [None] * 64

    # -- Element access -----------------------------------------------------

    def get(self, position: Position) -> Square:
        return self._squares[position]

    def set(self, position: Position, square: Square) -> None:
        self._squares[position] = square

    # Subscript access is an alias of get/set.
    __getitem__ = get
    __setitem__ = set

    def is_empty(self, position: Position) -> bool:
        return self._squares[position] is None

    def squares(self) -> tuple[Square, ...]:
        """Read-only snapshot of all 64 squares, a1 first."""
        return tuple(self._squares)

    def squares_mut(self) -> list[Square]:
        """The backing list itself; writes go straight to the board."""
        return self._squares

    def rank(self, rank: int) -> tuple[Square, ...]:
        """The eight squares of *rank* (0 = rank 1), file a first."""
        if not 0 <= rank <= 7:
            raise ValueError(f"Invalid rank: {rank}")
        return tuple(self._squares[rank * 8 : (rank + 1) * 8])

    def file(self, file: int) -> tuple[Square, ...]:
        """The eight squares of *file* (0 = file a), rank 1 first."""
        if not 0 <= file <= 7:
            raise ValueError(f"Invalid file: {file}")
        return tuple(self._squares[file::8])

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: PieceColor) -> Iterator[tuple[Position, Piece]]:
        """Occupied squares of *color* in index order."""
        for position, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None and piece.color == color:
                yield position, piece

    def find_king(self, color: PieceColor) -> Position | None:
        """Square of *color*'s king, or None if it has none."""
        for position, piece in self.pieces(color):
            if piece.kind == PieceKind.KING:
                return position
        return None

    # -- Copying --------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, kind in enumerate(_BACK_RANK):
            b[Position(0, f)] = Piece(kind, PieceColor.WHITE)
            b[Position(1, f)] = Piece(PieceKind.PAWN, PieceColor.WHITE)
            b[Position(6, f)] = Piece(PieceKind.PAWN, PieceColor.BLACK)
            b[Position(7, f)] = Piece(kind, PieceColor.BLACK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [str(p) if p else "." for p in self.rank(rank)]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
