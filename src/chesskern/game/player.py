"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chesskern.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chesskern.core.move import Move
    from chesskern.core.state import GameState


class CallbackPlayer(IPlayer):
    """A participant that delegates move choice to a callable.

    The chess logic never picks moves itself; a UI, a test script or an
    external engine supplies ``choose(state) -> Move`` and this class adapts
    it to :class:`IPlayer`.

    Args:
        choose: Called with the current state whenever a move is needed.
        name: Display name.
    """

    __slots__ = ("_choose", "_name")

    def __init__(self, choose: Callable[[GameState], Move], name: str = "") -> None:
        self._choose = choose
        self._name = name or "Player"

    @property
    def name(self) -> str:
        return self._name

    def get_move(self, state: GameState) -> Move:
        return self._choose(state)
