"""Long-algebraic (UCI-style) move text: ``e2e4``, ``e7e8q``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesskern.core.enums import PieceKind
from chesskern.core.errors import IllegalMoveError
from chesskern.core.move import Move, Promotion, PromotionCapture
from chesskern.core.move_generator import legal_moves
from chesskern.core.position import Position

if TYPE_CHECKING:
    from chesskern.core.state import GameState

_PROMO_CHARS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
}


def move_to_uci(move: Move) -> str:
    """UCI long-algebraic notation for *move*."""
    base = f"{move.from_sq}{move.to_sq}"
    if isinstance(move, (Promotion, PromotionCapture)):
        base += _PROMO_CHARS[move.promoted.kind]
    return base


def parse_uci(state: GameState, text: str) -> Move:
    """Resolve *text* to the matching legal move in *state*.

    Raises ValueError for malformed text and IllegalMoveError when the text
    is well formed but names no legal move.
    """
    text = text.strip()
    if len(text) not in (4, 5):
        raise ValueError(f"Invalid UCI move: {text!r}")
    from_sq = Position.from_algebraic(text[0:2])
    to_sq = Position.from_algebraic(text[2:4])
    promo = text[4:].lower()
    if promo and promo not in _PROMO_CHARS.values():
        raise ValueError(f"Invalid promotion piece in UCI move: {text!r}")

    for move in legal_moves(state):
        if move.from_sq != from_sq or move.to_sq != to_sq:
            continue
        if isinstance(move, (Promotion, PromotionCapture)):
            if _PROMO_CHARS[move.promoted.kind] == promo:
                return move
        elif not promo:
            return move
    raise IllegalMoveError(f"Illegal move in this position: {text!r}")
