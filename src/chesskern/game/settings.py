"""Game configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from chesskern.core.notation.fen import STARTING_FEN


@dataclass
class GameSettings:
    """All user-configurable settings for a controlled game."""

    # Position the game starts from
    start_fen: str = STARTING_FEN

    # Reject player output that is not in legal_moves
    verify_moves: bool = True

    # End the game as a draw once the halfmove clock reaches 100
    fifty_move_ends_game: bool = True

    # Stop GameController.run() after this many plies (None = no cap)
    max_plies: int | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> GameSettings:
        """Build settings from a plain mapping, ignoring unknown keys."""
        settings = cls()
        for f in fields(cls):
            if f.name not in values:
                continue
            value = values[f.name]
            default = getattr(settings, f.name)
            if f.name == "max_plies":
                if value is not None and (
                    not isinstance(value, int) or isinstance(value, bool) or value < 0
                ):
                    raise ValueError(f"Invalid setting max_plies: {value!r}")
            elif type(value) is not type(default):
                raise ValueError(f"Invalid setting {f.name}: {value!r}")
            setattr(settings, f.name, value)
        return settings
