"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class PieceColor(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> PieceColor:
        return PieceColor(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastleSide(IntEnum):
    KINGSIDE = 0
    QUEENSIDE = 1


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    BLACK_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    WHITE_KINGSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: PieceColor, side: CastleSide) -> CastlingRights:
        """The single right bit for *color* castling on *side*."""
        if color == PieceColor.WHITE:
            return (
                cls.WHITE_KINGSIDE if side == CastleSide.KINGSIDE else cls.WHITE_QUEENSIDE
            )
        return cls.BLACK_KINGSIDE if side == CastleSide.KINGSIDE else cls.BLACK_QUEENSIDE

    @classmethod
    def for_color(cls, color: PieceColor) -> CastlingRights:
        """Both right bits of *color*."""
        return cls.WHITE_BOTH if color == PieceColor.WHITE else cls.BLACK_BOTH


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3


class GameEndReason(IntEnum):
    """Why a finished game ended."""

    CHECKMATE = auto()
    STALEMATE = auto()
    FIFTY_MOVE_RULE = auto()
