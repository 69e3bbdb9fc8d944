"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on concrete players.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesskern.core.move import Move
    from chesskern.core.state import GameState


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class IPlayer(ABC):
    """Anything that can choose a move: a UI adapter, a script, an engine.

    The returned move is not guaranteed to be legal; callers that accept
    untrusted players must check it against ``legal_moves``.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def get_move(self, state: GameState) -> Move:
        """Return the move to play from *state*."""
