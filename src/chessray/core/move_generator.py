"""Per-piece legal move generation over a position snapshot."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from chessray.core.config import DEFAULT_SCORING, ScoringConfig
from chessray.core.enums import PieceType, Side
from chessray.core.move import CandidateMove
from chessray.core.piece import Piece
from chessray.core.position import Position
from chessray.core.rays import (
    BISHOP_DIRS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    Direction,
    classify_square,
    scan_ray,
)

_LOGGER = logging.getLogger(__name__)

_PAWN_CAPTURE_FILES: tuple[int, ...] = (-1, 1)


class MoveGenerator:
    """Generates candidate moves for individual pieces of a :class:`Position`.

    Pieces are never moved: every result is a hypothetical destination with
    the material score a capture there would gain.
    """

    __slots__ = ("_pos", "_scoring")

    def __init__(
        self,
        position: Position,
        scoring: ScoringConfig = DEFAULT_SCORING,
    ) -> None:
        self._pos = position
        self._scoring = scoring

    @property
    def position(self) -> Position:
        return self._pos

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, piece: Piece) -> list[CandidateMove]:
        """All destinations of *piece*, in direction order, nearest first."""
        try:
            policy = _POLICIES[piece.kind]
        except KeyError:
            raise TypeError(f"Unsupported piece kind: {piece.kind!r}") from None

        moves: list[CandidateMove] = []
        policy(self, piece, moves)
        _LOGGER.debug(
            "%s %s on %s: %d candidate moves",
            piece.side,
            piece.kind,
            piece.location,
            len(moves),
        )
        return moves

    def all_moves(self, side: Side) -> list[tuple[Piece, list[CandidateMove]]]:
        """``(piece, moves)`` for every piece of *side*, in position order."""
        return [(p, self.legal_moves(p)) for p in self._pos.pieces(side)]

    # -- Piece-specific generators (private) -------------------------------

    def _gen_sliding(
        self,
        piece: Piece,
        directions: Iterable[Direction],
        moves: list[CandidateMove],
        max_steps: int | None = None,
    ) -> None:
        for direction in directions:
            moves.extend(
                scan_ray(
                    piece.location,
                    direction,
                    piece,
                    self._pos,
                    max_steps=max_steps,
                    scoring=self._scoring,
                )
            )

    def _gen_rook(self, piece: Piece, moves: list[CandidateMove]) -> None:
        self._gen_sliding(piece, ROOK_DIRS, moves)

    def _gen_bishop(self, piece: Piece, moves: list[CandidateMove]) -> None:
        self._gen_sliding(piece, BISHOP_DIRS, moves)

    def _gen_queen(self, piece: Piece, moves: list[CandidateMove]) -> None:
        self._gen_sliding(piece, QUEEN_DIRS, moves)

    def _gen_king(self, piece: Piece, moves: list[CandidateMove]) -> None:
        self._gen_sliding(piece, QUEEN_DIRS, moves, max_steps=1)

    def _gen_knight(self, piece: Piece, moves: list[CandidateMove]) -> None:
        origin = piece.location
        for d_file, d_rank in KNIGHT_OFFSETS:
            target = origin.offset(d_file, d_rank)
            if target is None:
                continue
            move = classify_square(target, piece, self._pos, scoring=self._scoring)
            if move is not None:
                moves.append(move)

    def _gen_pawn(self, piece: Piece, moves: list[CandidateMove]) -> None:
        forward = piece.side.forward
        moves.extend(
            scan_ray(
                piece.location,
                (0, forward),
                piece,
                self._pos,
                max_steps=1 if piece.has_moved else 2,
                can_capture=False,
                scoring=self._scoring,
            )
        )

        # Diagonals only ever yield captures.
        for d_file in _PAWN_CAPTURE_FILES:
            target = piece.location.offset(d_file, forward)
            if target is None or self._pos.is_empty(target):
                continue
            move = classify_square(target, piece, self._pos, scoring=self._scoring)
            if move is not None:
                moves.append(move)


_Policy = Callable[[MoveGenerator, Piece, list[CandidateMove]], None]

_POLICIES: dict[PieceType, _Policy] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
}

if set(PieceType) - _POLICIES.keys():
    raise RuntimeError(
        f"No move policy for piece kinds: {sorted(set(PieceType) - _POLICIES.keys())}"
    )


def legal_moves(
    piece: Piece,
    all_pieces: Iterable[Piece] | Position,
    scoring: ScoringConfig = DEFAULT_SCORING,
) -> list[CandidateMove]:
    """Destinations of *piece* given every piece currently on the board."""
    position = all_pieces if isinstance(all_pieces, Position) else Position(all_pieces)
    return MoveGenerator(position, scoring).legal_moves(piece)
