"""Notation package: FEN and UCI move text."""

from chesskern.core.notation.fen import (
    STARTING_FEN,
    state_from_fen,
    state_to_fen,
    tokenize_fen,
)
from chesskern.core.notation.uci import move_to_uci, parse_uci

__all__ = [
    "STARTING_FEN",
    "state_from_fen",
    "state_to_fen",
    "tokenize_fen",
    "move_to_uci",
    "parse_uci",
]
