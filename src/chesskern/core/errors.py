"""Exception hierarchy for rejected input.

All of these subclass :class:`ValueError`, so callers that only know about
``ValueError`` keep working.
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for errors raised on invalid chess input."""


class FenError(ChessError, ValueError):
    """A FEN string could not be parsed."""


class NotEnoughFields(FenError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Invalid FEN (need 6 fields, got {count})")


class InvalidArgument(FenError):
    """A field has the wrong shape, e.g. a non-numeric clock."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid FEN argument: {value!r}")


class InvalidPiece(FenError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid FEN piece character: {char!r}")


class InvalidTurn(FenError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid FEN side-to-move field: {char!r}")


class InvalidCastle(FenError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid FEN castling character: {char!r}")


class InvalidEnPassant(FenError):
    def __init__(self, file: str, rank: str) -> None:
        self.file = file
        self.rank = rank
        super().__init__(f"Invalid FEN en-passant square: {file + rank!r}")


class InvalidRankCount(FenError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Invalid FEN board (must contain 8 ranks, got {count})")


class InvalidFileCount(FenError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Invalid FEN rank width: {count} files")


class IllegalMoveError(ChessError, ValueError):
    """A move (or move text) is not legal in the given position."""
