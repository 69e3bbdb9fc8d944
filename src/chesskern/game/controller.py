"""GameController — drives a game between two players.

Coordinates: Players, GameState, Rules.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesskern.core.enums import GameEndReason, GameResult, PieceColor
from chesskern.core.errors import IllegalMoveError
from chesskern.core.move import Move
from chesskern.core.move_generator import legal_moves
from chesskern.core.notation.uci import move_to_uci
from chesskern.core.rules import Rules
from chesskern.core.state import GameState
from chesskern.game.interfaces import GamePhase, IPlayer
from chesskern.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]  # move, state after the move
GameOverCallback = Callable[[GameResult, GameEndReason], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs a game: asks players for moves, validates, applies, notifies.

    Single-threaded; players are called synchronously from :meth:`step`.
    Moves coming from elsewhere (e.g. a board UI) go through
    :meth:`submit_move`.
    """

    __slots__ = (
        "_settings",
        "_state",
        "_players",
        "_phase",
        "_result",
        "_end_reason",
        "_history",
        "events",
    )

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._state = GameState.from_fen(self._settings.start_fen)
        self._players: dict[PieceColor, IPlayer] = {}
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self._end_reason: GameEndReason | None = None
        self._history: list[Move] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def end_reason(self) -> GameEndReason | None:
        return self._end_reason

    @property
    def history(self) -> tuple[Move, ...]:
        """Moves played so far, oldest first."""
        return tuple(self._history)

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.turn)

    def player(self, color: PieceColor) -> IPlayer | None:
        return self._players.get(color)

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, white: IPlayer, black: IPlayer, fen: str | None = None) -> None:
        """Set up a new game; *fen* overrides ``settings.start_fen``."""
        if fen is None:
            fen = self._settings.start_fen
        state = GameState.from_fen(fen)

        self._players = {PieceColor.WHITE: white, PieceColor.BLACK: black}
        self._state = state
        self._history = []
        self._result = GameResult.IN_PROGRESS
        self._end_reason = None
        _LOGGER.info("New game: %s vs %s from %s", white.name, black.name, state.to_fen())

        self._set_phase(GamePhase.AWAITING_MOVE)
        self._check_game_over()

    def submit_move(self, move: Move) -> bool:
        """Play *move* for the side to move. Returns True if it was applied."""
        if self._phase != GamePhase.AWAITING_MOVE:
            return False

        if self._settings.verify_moves and move not in legal_moves(self._state):
            _LOGGER.warning(
                "Rejected illegal move %s in %s", move_to_uci(move), self._state.to_fen()
            )
            return False

        self._state.play(move)
        self._history.append(move)
        _LOGGER.debug("Played %s, now %s", move_to_uci(move), self._state.to_fen())

        for cb in self.events.on_move:
            cb(move, self._state)

        self._check_game_over()
        return True

    def step(self) -> Move | None:
        """Ask the current player for a move and play it.

        Returns the move, or None if the game is not awaiting a move.
        Raises IllegalMoveError if the player returns an illegal move.
        """
        if self._phase != GamePhase.AWAITING_MOVE:
            return None
        player = self.current_player
        if player is None:
            return None

        move = player.get_move(self._state)
        if not self.submit_move(move):
            raise IllegalMoveError(
                f"{player.name} returned illegal move {move_to_uci(move)}"
            )
        return move

    def run(self) -> GameResult:
        """Step until the game ends or ``settings.max_plies`` is reached."""
        limit = self._settings.max_plies
        while self._phase == GamePhase.AWAITING_MOVE:
            if limit is not None and len(self._history) >= limit:
                _LOGGER.info("Stopping after %d plies", limit)
                break
            if self.step() is None:
                break
        return self._result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        reason = Rules.end_reason(
            self._state, fifty_move_ends_game=self._settings.fifty_move_ends_game
        )
        if reason is None:
            return
        self._end_reason = reason
        self._result = Rules.game_result(
            self._state, fifty_move_ends_game=self._settings.fifty_move_ends_game
        )
        _LOGGER.info("Game over: %s (%s)", self._result.name, reason.name)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(self._result, reason)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
