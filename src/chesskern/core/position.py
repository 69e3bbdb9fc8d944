"""Square identifier and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

The flat index is ``rank * 8 + file`` and doubles as the :class:`Board`
array index.
"""

from __future__ import annotations

_FILES = "abcdefgh"
_RANKS = "12345678"


class Position:
    """Immutable board square, stored as its flat index 0–63."""

    __slots__ = ("_index",)

    _index: int

    def __init__(self, rank: int, file: int) -> None:
        if not 0 <= rank <= 7:
            raise ValueError(f"Invalid rank: {rank}")
        if not 0 <= file <= 7:
            raise ValueError(f"Invalid file: {file}")
        object.__setattr__(self, "_index", (rank << 3) | file)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_index(cls, index: int) -> Position:
        """Square for flat index 0–63, e.g. 28 → e4."""
        if not 0 <= index < 64:
            raise ValueError(f"Invalid square index: {index}")
        return cls(index >> 3, index & 7)

    @classmethod
    def from_algebraic(cls, name: str) -> Position:
        """Parse square name, e.g. 'e4' → Position(3, 4)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_RANKS.index(name[1]), _FILES.index(name[0]))

    # ── Coordinates ──────────────────────────────────────────────────────

    @property
    def rank(self) -> int:
        """Rank index 0–7 (1–8)."""
        return self._index >> 3

    @property
    def file(self) -> int:
        """File index 0–7 (a–h)."""
        return self._index & 7

    @property
    def index(self) -> int:
        return self._index

    def offset(self, drank: int, dfile: int) -> Position | None:
        """Square shifted by (*drank*, *dfile*), or None if off the board."""
        rank = self.rank + drank
        file = self.file + dfile
        if 0 <= rank < 8 and 0 <= file < 8:
            return Position(rank, file)
        return None

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Position is immutable")

    def __index__(self) -> int:
        return self._index

    def __int__(self) -> int:
        return self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._index == other._index

    def __hash__(self) -> int:
        return hash(self._index)

    def __lt__(self, other: Position) -> bool:
        return self._index < other._index

    def __str__(self) -> str:
        """Human-readable name, e.g. 'a1'."""
        return _FILES[self.file] + _RANKS[self.rank]

    def __repr__(self) -> str:
        return f"Position({str(self)!r})"

    def __reduce__(self) -> tuple[object, ...]:
        return (Position, (self.rank, self.file))


ALL_SQUARES: tuple[Position, ...] = tuple(Position.from_index(i) for i in range(64))

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
