"""Pseudo-legal and legal move generation.

Everything here is a pure function of a :class:`GameState`.  Legality is
decided by generate-and-test: each pseudo-legal candidate is applied to a
copy of the state and dropped if it leaves the mover's king in check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesskern.core.enums import CastleSide, PieceColor, PieceKind
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
from chesskern.core.piece import Piece
from chesskern.core.position import ALL_SQUARES, Position

if TYPE_CHECKING:
    from chesskern.core.state import GameState


# (rank delta, file delta)
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class _PawnInfo:
    start_rank: int
    promotion_rank: int
    direction: int


_PAWN_INFO: dict[PieceColor, _PawnInfo] = {
    PieceColor.WHITE: _PawnInfo(start_rank=1, promotion_rank=7, direction=1),
    PieceColor.BLACK: _PawnInfo(start_rank=6, promotion_rank=0, direction=-1),
}


@dataclass(frozen=True, slots=True)
class _CastleLayout:
    side: CastleSide
    king_from: Position
    king_to: Position
    rook_from: Position
    rook_to: Position
    between: tuple[Position, ...]


def _build_castle_layouts(rank: int) -> tuple[_CastleLayout, ...]:
    return (
        _CastleLayout(
            side=CastleSide.KINGSIDE,
            king_from=Position(rank, 4),
            king_to=Position(rank, 6),
            rook_from=Position(rank, 7),
            rook_to=Position(rank, 5),
            between=(Position(rank, 5), Position(rank, 6)),
        ),
        _CastleLayout(
            side=CastleSide.QUEENSIDE,
            king_from=Position(rank, 4),
            king_to=Position(rank, 2),
            rook_from=Position(rank, 0),
            rook_to=Position(rank, 3),
            between=(Position(rank, 1), Position(rank, 2), Position(rank, 3)),
        ),
    )


_CASTLE_LAYOUTS: dict[PieceColor, tuple[_CastleLayout, ...]] = {
    PieceColor.WHITE: _build_castle_layouts(0),
    PieceColor.BLACK: _build_castle_layouts(7),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Position, ...], ...]:
    targets: list[tuple[Position, ...]] = []
    for sq in ALL_SQUARES:
        on_board = (sq.offset(dr, df) for dr, df in offsets)
        targets.append(tuple(t for t in on_board if t is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Position, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Position, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Position, ...]] = []
        for dr, df in directions:
            ray: list[Position] = []
            target = sq.offset(dr, df)
            while target is not None:
                ray.append(target)
                target = target.offset(dr, df)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)


# -- Public API ---------------------------------------------------------


def legal_moves(state: GameState) -> list[Move]:
    """All strictly legal moves for the side to move."""
    return prune_moves_into_check(pseudo_legal_moves(state, state.turn), state)


def pseudo_legal_moves(state: GameState, color: PieceColor) -> list[Move]:
    """All pseudo-legal moves of *color* (may leave its king in check).

    Squares are scanned a1..h8; castle moves come last.
    """
    moves: list[Move] = []
    for position, _piece in state.board.pieces(color):
        moves.extend(pseudo_legal_moves_for_square(state, position, color))
    moves.extend(castle_moves(state, color))
    return moves


def pseudo_legal_moves_for_square(
    state: GameState, position: Position, color: PieceColor
) -> list[Move]:
    """Pseudo-legal moves of the piece on *position*, if it is *color*'s.

    Castling is not included; see :func:`castle_moves`.
    """
    piece = state.board[position]
    if piece is None or piece.color != color:
        return []

    moves: list[Move] = []
    match piece.kind:
        case PieceKind.PAWN:
            _gen_pawn(state, position, color, moves)
        case PieceKind.KNIGHT:
            _gen_step(state, position, color, _KNIGHT_TARGETS[position], moves)
        case PieceKind.BISHOP:
            _gen_sliding(state, position, color, _BISHOP_RAYS[position], moves)
        case PieceKind.ROOK:
            _gen_sliding(state, position, color, _ROOK_RAYS[position], moves)
        case PieceKind.QUEEN:
            _gen_sliding(state, position, color, _BISHOP_RAYS[position], moves)
            _gen_sliding(state, position, color, _ROOK_RAYS[position], moves)
        case PieceKind.KING:
            _gen_step(state, position, color, _KING_TARGETS[position], moves)
    return moves


def castle_moves(state: GameState, color: PieceColor) -> list[Move]:
    """Castles whose rights are intact and whose path is unobstructed.

    Attacks on the king's path are not considered here; they are handled
    by :func:`prune_moves_into_check`.
    """
    board = state.board
    king = Piece(PieceKind.KING, color)
    rook = Piece(PieceKind.ROOK, color)
    moves: list[Move] = []
    for layout in _CASTLE_LAYOUTS[color]:
        if not state.can_castle(color, layout.side):
            continue
        if board[layout.king_from] != king or board[layout.rook_from] != rook:
            continue
        if all(board.is_empty(sq) for sq in layout.between):
            moves.append(
                Castle(layout.king_from, layout.king_to, layout.rook_from, layout.rook_to)
            )
    return moves


def prune_moves_into_check(moves: list[Move], state: GameState) -> list[Move]:
    """Keep the moves of ``state.turn`` that do not leave its king in check.

    A castle must additionally start out of check and must not cross an
    attacked square; those conditions are settled before simulating it.
    """
    legal: list[Move] = []
    for move in moves:
        if isinstance(move, Castle):
            if state.is_in_check():
                continue
            if is_square_attacked(state, move.rook_to, state.turn.opposite):
                continue
        trial = state.copy()
        trial.apply_move(move)
        if not trial.is_in_check():
            legal.append(move)
    return legal


def is_square_attacked(
    state: GameState, square: Position, by_color: PieceColor
) -> bool:
    """Would a king of the other side standing on *square* be in check?

    The defender's king is lifted from its current square, so lines it was
    blocking count as open.
    """
    defender = by_color.opposite
    probe = state.copy()
    king_sq = probe.board.find_king(defender)
    if king_sq is not None:
        probe.board[king_sq] = None
    probe.board[square] = Piece(PieceKind.KING, defender)
    probe.turn = defender
    return probe.is_in_check()


# -- Piece-specific generators (private) -------------------------------


def _gen_pawn(
    state: GameState, sq: Position, color: PieceColor, moves: list[Move]
) -> None:
    board = state.board
    info = _PAWN_INFO[color]

    push = sq.offset(info.direction, 0)
    if push is None:
        return

    if board.is_empty(push):
        if push.rank == info.promotion_rank:
            for kind in PROMOTION_KINDS:
                moves.append(Promotion(sq, push, Piece(kind, color)))
        else:
            moves.append(Normal(sq, push))
            if sq.rank == info.start_rank:
                two_step = push.offset(info.direction, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(DoublePawnPush(sq, two_step, push))

    for dfile in (-1, 1):
        cap_sq = sq.offset(info.direction, dfile)
        if cap_sq is None:
            continue
        target = board[cap_sq]
        if target is not None:
            if target.color == color:
                continue
            if cap_sq.rank == info.promotion_rank:
                for kind in PROMOTION_KINDS:
                    moves.append(PromotionCapture(sq, cap_sq, target, Piece(kind, color)))
            else:
                moves.append(Capture(sq, cap_sq, target))
        elif cap_sq == state.en_passant:
            victim_sq = Position(sq.rank, cap_sq.file)
            victim = board[victim_sq]
            if victim == Piece(PieceKind.PAWN, color.opposite):
                moves.append(EnPassant(sq, cap_sq, victim_sq))


def _gen_step(
    state: GameState,
    sq: Position,
    color: PieceColor,
    targets: tuple[Position, ...],
    moves: list[Move],
) -> None:
    board = state.board
    for to_sq in targets:
        target = board[to_sq]
        if target is None:
            moves.append(Normal(sq, to_sq))
        elif target.color != color:
            moves.append(Capture(sq, to_sq, target))


def _gen_sliding(
    state: GameState,
    sq: Position,
    color: PieceColor,
    rays: tuple[tuple[Position, ...], ...],
    moves: list[Move],
) -> None:
    board = state.board
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(Normal(sq, to_sq))
                continue
            if target.color != color:
                moves.append(Capture(sq, to_sq, target))
            break
