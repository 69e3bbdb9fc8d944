"""GameState — the full position: board, side to move, rights and clocks."""

from __future__ import annotations

from typing import assert_never

from chesskern.core.board import Board
from chesskern.core.enums import CastleSide, CastlingRights, PieceColor, PieceKind
from chesskern.core.move import (
    Capture,
    Castle,
    DoublePawnPush,
    EnPassant,
    Move,
    Normal,
    Promotion,
    PromotionCapture,
)
from chesskern.core.move_generator import legal_moves, pseudo_legal_moves
from chesskern.core.piece import Piece
from chesskern.core.position import Position

# Home corner → the right a rook standing there still guards.
_ROOK_CORNERS: dict[Position, CastlingRights] = {
    Position(0, 0): CastlingRights.WHITE_QUEENSIDE,
    Position(0, 7): CastlingRights.WHITE_KINGSIDE,
    Position(7, 0): CastlingRights.BLACK_QUEENSIDE,
    Position(7, 7): CastlingRights.BLACK_KINGSIDE,
}


class GameState:
    """Board + side to move + castling + en passant + clocks + captures.

    :meth:`apply_move` is the only rule-level mutation.  It leaves ``turn``
    alone, which is what lets the legality filter ask "is the mover's king
    in check now?" on the very same object.  :meth:`play` is the game-order
    commit that also hands the move to the opponent.
    """

    __slots__ = (
        "board",
        "turn",
        "castling_rights",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "captured_pieces",
    )

    def __init__(
        self,
        board: Board | None = None,
        turn: PieceColor = PieceColor.WHITE,
        castling_rights: CastlingRights = CastlingRights.NONE,
        en_passant: Position | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.empty()
        self.turn = turn
        self.castling_rights = castling_rights
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.captured_pieces: list[Piece] = []

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> GameState:
        """Empty board, White to move, no rights."""
        return cls()

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position."""
        return cls(Board.initial(), castling_rights=CastlingRights.ALL)

    @classmethod
    def from_fen(cls, fen: str) -> GameState:
        """Parse *fen*; raises a :class:`~chesskern.core.errors.FenError`."""
        from chesskern.core.notation.fen import state_from_fen

        return state_from_fen(fen)

    def to_fen(self) -> str:
        from chesskern.core.notation.fen import state_to_fen

        return state_to_fen(self)

    # ── Castling rights ──────────────────────────────────────────────────

    def can_castle(self, color: PieceColor, side: CastleSide) -> bool:
        return bool(self.castling_rights & CastlingRights.for_side(color, side))

    def unset_castle(self, color: PieceColor, side: CastleSide) -> None:
        self.castling_rights &= ~CastlingRights.for_side(color, side)

    def _waive_castling(self, sq: Position, piece: Piece) -> None:
        """Drop the rights *piece* held by standing on *sq*."""
        if piece.kind == PieceKind.KING:
            self.castling_rights &= ~CastlingRights.for_color(piece.color)
        elif piece.kind == PieceKind.ROOK:
            right = _ROOK_CORNERS.get(sq)
            if right is not None and right & CastlingRights.for_color(piece.color):
                self.castling_rights &= ~right

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self) -> list[Move]:
        return legal_moves(self)

    def is_in_check(self) -> bool:
        """Is the side to move's king attacked?

        Raises ValueError if that king is missing from the board.
        """
        king_sq = self.board.find_king(self.turn)
        if king_sq is None:
            raise ValueError(f"No {self.turn.name} king on board")
        enemy_moves = pseudo_legal_moves(self, self.turn.opposite)
        return any(move.to_sq == king_sq for move in enemy_moves)

    def is_checkmate(self) -> bool:
        return self.is_in_check() and not self.legal_moves()

    def is_stalemate(self) -> bool:
        return not self.is_in_check() and not self.legal_moves()

    def is_fifty_move_rule(self) -> bool:
        return self.halfmove_clock >= 100  # 100 half-moves = 50 full moves

    # ── Core move operations ─────────────────────────────────────────────

    def apply_move(self, move: Move) -> None:
        """Apply *move* to the board, rights and clocks.

        The side to move is not changed; see :meth:`play`.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        # Look up every piece the move relies on before mutating anything.
        victim: Piece | None = None
        rook: Piece | None = None
        if isinstance(move, EnPassant):
            victim = self.board[move.captured]
            if victim is None:
                raise ValueError(f"No pawn to capture en passant on {move.captured}")
        elif isinstance(move, Castle):
            rook = self.board[move.rook_from]
            if rook is None:
                raise ValueError(f"No rook to castle with on {move.rook_from}")

        self.halfmove_clock += 1
        self.en_passant = None

        match move:
            case Normal(from_sq, to_sq):
                self._relocate(from_sq, to_sq, piece)
                if piece.kind == PieceKind.PAWN:
                    self.halfmove_clock = 0
                self._waive_castling(from_sq, piece)

            case Capture(from_sq, to_sq, captured):
                self._relocate(from_sq, to_sq, piece)
                self._record_capture(captured)
                self._waive_castling(from_sq, piece)
                self._waive_castling(to_sq, captured)

            case EnPassant(from_sq, to_sq, captured_sq):
                assert victim is not None
                self._relocate(from_sq, to_sq, piece)
                self.board[captured_sq] = None
                self._record_capture(victim)

            case DoublePawnPush(from_sq, to_sq, en_passant):
                self._relocate(from_sq, to_sq, piece)
                self.halfmove_clock = 0
                self.en_passant = en_passant

            case Promotion(from_sq, to_sq, promoted):
                self._relocate(from_sq, to_sq, promoted)
                self.halfmove_clock = 0

            case PromotionCapture(from_sq, to_sq, captured, promoted):
                self._relocate(from_sq, to_sq, promoted)
                self._record_capture(captured)
                self._waive_castling(to_sq, captured)

            case Castle(from_sq, to_sq, rook_from, rook_to):
                assert rook is not None
                self._relocate(from_sq, to_sq, piece)
                self._relocate(rook_from, rook_to, rook)
                self.castling_rights &= ~CastlingRights.for_color(piece.color)

            case _:
                assert_never(move)

    def play(self, move: Move) -> None:
        """Commit *move* in game order and pass the turn."""
        self.apply_move(move)
        if self.turn == PieceColor.BLACK:
            self.fullmove_number += 1
        self.turn = self.turn.opposite

    def _relocate(self, from_sq: Position, to_sq: Position, piece: Piece) -> None:
        self.board[from_sq] = None
        self.board[to_sq] = piece

    def _record_capture(self, captured: Piece) -> None:
        self.captured_pieces.append(captured)
        self.halfmove_clock = 0

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> GameState:
        """Independent deep copy (board and capture log included)."""
        state = GameState(
            board=self.board.copy(),
            turn=self.turn,
            castling_rights=self.castling_rights,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )
        state.captured_pieces = self.captured_pieces.copy()
        return state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.board == other.board
            and self.turn == other.turn
            and self.castling_rights == other.castling_rights
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
            and self.captured_pieces == other.captured_pieces
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"GameState({self.to_fen()!r})"
