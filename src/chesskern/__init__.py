"""chesskern — chess rules engine: positions, legal moves, FEN."""

__version__ = "0.1.0"
