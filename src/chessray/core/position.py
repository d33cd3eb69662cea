"""Position - read-only occupancy snapshot built from a piece list."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from chessray.core.enums import PieceType, Side
from chessray.core.errors import OverlappingPiecesError
from chessray.core.piece import Piece
from chessray.core.roster import generate_standard_roster
from chessray.core.types import FILES, RANKS, Square

_LOGGER = logging.getLogger(__name__)


class Position:
    """Square → piece index over an ordered piece list.

    The list order is kept for iteration; lookups go through the index.
    A square may hold at most one piece.
    """

    __slots__ = ("_pieces", "_squares")

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        self._pieces: tuple[Piece, ...] = tuple(pieces)
        self._squares: dict[Square, Piece] = {}
        for piece in self._pieces:
            existing = self._squares.get(piece.location)
            if existing is not None:
                _LOGGER.warning(
                    "Rejecting position: %r and %r share %s",
                    existing,
                    piece,
                    piece.location,
                )
                raise OverlappingPiecesError(
                    f"Square {piece.location} is occupied by both "
                    f"{existing.side} {existing.kind} and {piece.side} {piece.kind}"
                )
            self._squares[piece.location] = piece

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Square) -> Piece | None:
        return self._squares.get(sq)

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares.get(sq)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._squares

    def __contains__(self, item: object) -> bool:
        """Occupancy for a :class:`Square`, membership for a :class:`Piece`."""
        if isinstance(item, Square):
            return item in self._squares
        return item in self._pieces

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    # -- Query helpers ------------------------------------------------------

    def pieces(
        self,
        side: Side | None = None,
        kind: PieceType | None = None,
    ) -> list[Piece]:
        """Pieces in list order, optionally filtered by *side* and *kind*."""
        return [
            p
            for p in self._pieces
            if (side is None or p.side == side) and (kind is None or p.kind == kind)
        ]

    def with_piece(self, piece: Piece) -> Position:
        """New snapshot with *piece* appended."""
        return Position((*self._pieces, piece))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def standard(cls) -> Position:
        """Standard starting position."""
        return cls(generate_standard_roster())

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(frozenset(self._squares.items()))

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in reversed(RANKS):
            row = []
            for file in FILES:
                p = self._squares.get(Square(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
