"""High-level chess rules: checkmate, stalemate, fifty-move detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesskern.core.enums import GameEndReason, GameResult, PieceColor
from chesskern.core.move_generator import legal_moves

if TYPE_CHECKING:
    from chesskern.core.move import Move
    from chesskern.core.state import GameState


@dataclass(frozen=True, slots=True)
class PositionStatus:
    """Everything a board display needs to know about the side to move."""

    turn: PieceColor
    in_check: bool
    checkmate: bool
    stalemate: bool
    fifty_move: bool
    legal_moves: tuple[Move, ...]


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    # Product policy:
    # - Checkmate and stalemate end the game.
    # - The fifty-move rule is reported; whether it ends the game is up to
    #   the caller (see GameSettings.fifty_move_ends_game).

    @staticmethod
    def is_in_check(state: GameState) -> bool:
        return state.is_in_check()

    @staticmethod
    def is_checkmate(state: GameState) -> bool:
        return state.is_checkmate()

    @staticmethod
    def is_stalemate(state: GameState) -> bool:
        return state.is_stalemate()

    @staticmethod
    def is_fifty_move_rule(state: GameState) -> bool:
        return state.is_fifty_move_rule()

    @staticmethod
    def status(state: GameState) -> PositionStatus:
        """Snapshot of check/mate/stalemate flags plus the legal moves."""
        moves = legal_moves(state)
        in_check = state.is_in_check()
        return PositionStatus(
            turn=state.turn,
            in_check=in_check,
            checkmate=in_check and not moves,
            stalemate=not in_check and not moves,
            fifty_move=state.is_fifty_move_rule(),
            legal_moves=tuple(moves),
        )

    @staticmethod
    def end_reason(
        state: GameState, *, fifty_move_ends_game: bool = True
    ) -> GameEndReason | None:
        """Why the game is over in *state*, or None if play continues."""
        if not legal_moves(state):
            if state.is_in_check():
                return GameEndReason.CHECKMATE
            return GameEndReason.STALEMATE
        if fifty_move_ends_game and state.is_fifty_move_rule():
            return GameEndReason.FIFTY_MOVE_RULE
        return None

    @staticmethod
    def game_result(
        state: GameState, *, fifty_move_ends_game: bool = True
    ) -> GameResult:
        """Determine the current game result."""
        reason = Rules.end_reason(state, fifty_move_ends_game=fifty_move_ends_game)
        if reason is None:
            return GameResult.IN_PROGRESS
        if reason == GameEndReason.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if state.turn == PieceColor.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW
