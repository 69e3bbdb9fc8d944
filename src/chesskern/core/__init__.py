"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesskern.core import GameState, STARTING_FEN, move_to_uci

    state = GameState.from_fen(STARTING_FEN)
    for move in state.legal_moves():
        print(move_to_uci(move))
"""

from chesskern.core.board import Board
from chesskern.core.enums import (
    CastleSide,
    CastlingRights,
    GameEndReason,
    GameResult,
    PieceColor,
    PieceKind,
)
from chesskern.core.errors import ChessError, FenError, IllegalMoveError
from chesskern.core.move import (
    Capture,
    Castle,
    DoublePawnPush,
    EnPassant,
    Move,
    Normal,
    Promotion,
    PromotionCapture,
    captured_piece,
    is_capture,
)
from chesskern.core.move_generator import (
    castle_moves,
    legal_moves,
    prune_moves_into_check,
    pseudo_legal_moves,
    pseudo_legal_moves_for_square,
)
from chesskern.core.notation import (
    STARTING_FEN,
    move_to_uci,
    parse_uci,
    state_from_fen,
    state_to_fen,
)
from chesskern.core.piece import Piece
from chesskern.core.position import Position
from chesskern.core.rules import PositionStatus, Rules
from chesskern.core.state import GameState

__all__ = [
    # Enums / flags
    "CastleSide",
    "CastlingRights",
    "GameEndReason",
    "GameResult",
    "PieceColor",
    "PieceKind",
    # Errors
    "ChessError",
    "FenError",
    "IllegalMoveError",
    # Domain objects
    "Board",
    "GameState",
    "Piece",
    "Position",
    "PositionStatus",
    "Rules",
    # Moves
    "Capture",
    "Castle",
    "DoublePawnPush",
    "EnPassant",
    "Move",
    "Normal",
    "Promotion",
    "PromotionCapture",
    "captured_piece",
    "is_capture",
    # Generation
    "castle_moves",
    "legal_moves",
    "prune_moves_into_check",
    "pseudo_legal_moves",
    "pseudo_legal_moves_for_square",
    # Notation
    "STARTING_FEN",
    "move_to_uci",
    "parse_uci",
    "state_from_fen",
    "state_to_fen",
]
