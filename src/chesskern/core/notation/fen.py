"""FEN parsing and serialization.

Parsing runs in two phases.  :func:`tokenize_fen` checks the field layout
and turns the string into a flat token list; :func:`state_from_fen` folds
those tokens into a fresh :class:`GameState`.  Any failure raises a
:class:`~chesskern.core.errors.FenError` subclass and the half-built state
is dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias, assert_never

from chesskern.core.enums import CastlingRights, PieceColor
from chesskern.core.errors import (
    FenError,
    InvalidArgument,
    InvalidCastle,
    InvalidEnPassant,
    InvalidFileCount,
    InvalidPiece,
    InvalidRankCount,
    InvalidTurn,
    NotEnoughFields,
)
from chesskern.core.piece import Piece
from chesskern.core.position import Position
from chesskern.core.state import GameState

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

_TURN_CHARS: dict[str, PieceColor] = {"w": PieceColor.WHITE, "b": PieceColor.BLACK}


# ── Tokens ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PieceToken:
    char: str


@dataclass(frozen=True, slots=True)
class EmptyToken:
    count: int


@dataclass(frozen=True, slots=True)
class EndOfRank:
    pass


@dataclass(frozen=True, slots=True)
class EndOfBoard:
    pass


@dataclass(frozen=True, slots=True)
class TurnToken:
    char: str


@dataclass(frozen=True, slots=True)
class CastleToken:
    char: str


@dataclass(frozen=True, slots=True)
class EnPassantToken:
    file: str
    rank: str


@dataclass(frozen=True, slots=True)
class HalfmoveClock:
    value: int


@dataclass(frozen=True, slots=True)
class FullmoveNumber:
    value: int


FenToken: TypeAlias = (
    PieceToken
    | EmptyToken
    | EndOfRank
    | EndOfBoard
    | TurnToken
    | CastleToken
    | EnPassantToken
    | HalfmoveClock
    | FullmoveNumber
)


# ── Phase 1: tokenize ───────────────────────────────────────────────────────


def _parse_counter(text: str) -> int:
    if not text.isdecimal() or not text.isascii():
        raise InvalidArgument(text)
    return int(text)


def tokenize_fen(fen: str) -> list[FenToken]:
    """Split *fen* into tokens, validating field count and field shape.

    Piece letters, the turn letter and castling letters are passed through
    unchecked; their meaning is validated while folding.
    """
    fields = fen.split()
    if len(fields) < 6:
        raise NotEnoughFields(len(fields))
    placement, turn, castling, en_passant, halfmove, fullmove = fields[:6]

    tokens: list[FenToken] = []
    for ch in placement:
        if ch in "12345678":
            tokens.append(EmptyToken(int(ch)))
        elif ch == "/":
            tokens.append(EndOfRank())
        else:
            tokens.append(PieceToken(ch))
    tokens.append(EndOfBoard())

    if len(turn) != 1:
        raise InvalidArgument(turn)
    tokens.append(TurnToken(turn))

    if castling != "-":
        tokens.extend(CastleToken(ch) for ch in castling)

    if en_passant != "-":
        if len(en_passant) != 2:
            raise InvalidArgument(en_passant)
        tokens.append(EnPassantToken(en_passant[0], en_passant[1]))

    tokens.append(HalfmoveClock(_parse_counter(halfmove)))
    tokens.append(FullmoveNumber(_parse_counter(fullmove)))
    return tokens


# ── Phase 2: fold ───────────────────────────────────────────────────────────


def _fold_tokens(tokens: list[FenToken]) -> GameState:
    state = GameState.empty()
    squares = state.board.squares_mut()
    rank = 7
    file = 0

    for token in tokens:
        match token:
            case PieceToken(char):
                if file > 7:
                    raise InvalidFileCount(file + 1)
                try:
                    piece = Piece.from_char(char)
                except ValueError:
                    raise InvalidPiece(char) from None
                squares[(rank << 3) | file] = piece
                file += 1
            case EmptyToken(count):
                file += count
                if file > 8:
                    raise InvalidFileCount(file)
            case EndOfRank():
                if rank == 0:
                    raise InvalidRankCount(9)
                rank -= 1
                file = 0
            case EndOfBoard():
                if rank > 0:
                    raise InvalidRankCount(8 - rank)
            case TurnToken(char):
                turn = _TURN_CHARS.get(char)
                if turn is None:
                    raise InvalidTurn(char)
                state.turn = turn
            case CastleToken(char):
                right = _CASTLING_CHARS.get(char)
                if right is None:
                    raise InvalidCastle(char)
                state.castling_rights |= right
            case EnPassantToken(file_char, rank_char):
                try:
                    state.en_passant = Position.from_algebraic(file_char + rank_char)
                except ValueError:
                    raise InvalidEnPassant(file_char, rank_char) from None
            case HalfmoveClock(value):
                state.halfmove_clock = value
            case FullmoveNumber(value):
                state.fullmove_number = value
            case _:
                assert_never(token)

    return state


def state_from_fen(fen: str) -> GameState:
    """Parse a FEN string into a :class:`GameState`."""
    try:
        return _fold_tokens(tokenize_fen(fen))
    except FenError as exc:
        _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
        raise


# ── Serialization ───────────────────────────────────────────────────────────


def state_to_fen(state: GameState) -> str:
    """Serialise a :class:`GameState` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for piece in state.board.rank(rank):
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if state.turn == PieceColor.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if state.castling_rights & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = str(state.en_passant) if state.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{state.halfmove_clock} {state.fullmove_number}"
    )
