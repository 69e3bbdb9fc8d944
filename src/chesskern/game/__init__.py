"""Game management layer — controller, players, settings.

Quick start::

    from chesskern.game import CallbackPlayer, GameController

    ctrl = GameController()
    ctrl.new_game(
        white=CallbackPlayer(pick_white_move, "Alice"),
        black=CallbackPlayer(pick_black_move, "Bob"),
    )
    ctrl.run()
"""

from chesskern.game.controller import GameController, GameEvents
from chesskern.game.interfaces import GamePhase, IPlayer
from chesskern.game.player import CallbackPlayer
from chesskern.game.settings import GameSettings

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "CallbackPlayer",
    "GameController",
    "GameEvents",
    "GameSettings",
]
