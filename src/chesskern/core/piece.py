"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesskern.core.enums import PieceColor, PieceKind

# FEN character ↔ (PieceKind, PieceColor)
_CHAR_MAP: dict[str, tuple[PieceKind, PieceColor]] = {
    "P": (PieceKind.PAWN, PieceColor.WHITE),
    "N": (PieceKind.KNIGHT, PieceColor.WHITE),
    "B": (PieceKind.BISHOP, PieceColor.WHITE),
    "R": (PieceKind.ROOK, PieceColor.WHITE),
    "Q": (PieceKind.QUEEN, PieceColor.WHITE),
    "K": (PieceKind.KING, PieceColor.WHITE),
    "p": (PieceKind.PAWN, PieceColor.BLACK),
    "n": (PieceKind.KNIGHT, PieceColor.BLACK),
    "b": (PieceKind.BISHOP, PieceColor.BLACK),
    "r": (PieceKind.ROOK, PieceColor.BLACK),
    "q": (PieceKind.QUEEN, PieceColor.BLACK),
    "k": (PieceKind.KING, PieceColor.BLACK),
}

_FEN_CHARS: dict[tuple[PieceKind, PieceColor], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: what occupies a square."""

    kind: PieceKind
    color: PieceColor

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.kind, self.color)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            kind, color = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color)
