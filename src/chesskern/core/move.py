"""Move variants.

A move is one of a closed set of frozen records, each carrying exactly the
data needed to apply it without looking anything up.  Code that inspects a
move matches on the concrete class and ends with ``assert_never`` so that a
new variant cannot slip past any call site.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias, assert_never

from chesskern.core.piece import Piece
from chesskern.core.position import Position

if TYPE_CHECKING:
    from chesskern.core.board import Board


@dataclass(frozen=True, slots=True)
class Normal:
    """Quiet move onto an empty square (including single pawn pushes)."""

    from_sq: Position
    to_sq: Position


@dataclass(frozen=True, slots=True)
class Capture:
    from_sq: Position
    to_sq: Position
    captured: Piece


@dataclass(frozen=True, slots=True)
class EnPassant:
    """Pawn capture onto the en-passant target.

    ``captured`` is the square of the pawn being taken, which is beside the
    capturing pawn and never equal to ``to_sq``.
    """

    from_sq: Position
    to_sq: Position
    captured: Position


@dataclass(frozen=True, slots=True)
class DoublePawnPush:
    """Two-square pawn advance; ``en_passant`` is the skipped square."""

    from_sq: Position
    to_sq: Position
    en_passant: Position


@dataclass(frozen=True, slots=True)
class Promotion:
    from_sq: Position
    to_sq: Position
    promoted: Piece


@dataclass(frozen=True, slots=True)
class PromotionCapture:
    from_sq: Position
    to_sq: Position
    captured: Piece
    promoted: Piece


@dataclass(frozen=True, slots=True)
class Castle:
    """King move of two squares plus the matching rook hop."""

    from_sq: Position
    to_sq: Position
    rook_from: Position
    rook_to: Position


Move: TypeAlias = (
    Normal | Capture | EnPassant | DoublePawnPush | Promotion | PromotionCapture | Castle
)


def is_capture(move: Move) -> bool:
    """Whether *move* removes an enemy piece from the board."""
    match move:
        case Capture() | EnPassant() | PromotionCapture():
            return True
        case Normal() | DoublePawnPush() | Promotion() | Castle():
            return False
        case _:
            assert_never(move)


def captured_piece(move: Move, board: Board) -> Piece | None:
    """The piece *move* takes, read from *board* for en passant."""
    match move:
        case Capture(captured=piece) | PromotionCapture(captured=piece):
            return piece
        case EnPassant(captured=square):
            return board[square]
        case Normal() | DoublePawnPush() | Promotion() | Castle():
            return None
        case _:
            assert_never(move)
