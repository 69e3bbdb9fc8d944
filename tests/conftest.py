"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesskern.core.notation import STARTING_FEN
from chesskern.core.state import GameState

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


@pytest.fixture
def start_state() -> GameState:
    """Standard starting position, freshly parsed."""
    return GameState.from_fen(STARTING_FEN)


@pytest.fixture
def kiwipete() -> GameState:
    """Tactics-rich position with castling, en passant and promotions nearby."""
    return GameState.from_fen(KIWIPETE)
