"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessray.core.enums import PieceType, Side
from chessray.core.types import Square, to_square

_FEN_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_UNICODE: dict[tuple[Side, PieceType], str] = {
    (Side.WHITE, PieceType.PAWN): "♙",
    (Side.WHITE, PieceType.KNIGHT): "♘",
    (Side.WHITE, PieceType.BISHOP): "♗",
    (Side.WHITE, PieceType.ROOK): "♖",
    (Side.WHITE, PieceType.QUEEN): "♕",
    (Side.WHITE, PieceType.KING): "♔",
    (Side.BLACK, PieceType.PAWN): "♟",
    (Side.BLACK, PieceType.KNIGHT): "♞",
    (Side.BLACK, PieceType.BISHOP): "♝",
    (Side.BLACK, PieceType.ROOK): "♜",
    (Side.BLACK, PieceType.QUEEN): "♛",
    (Side.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable snapshot of a piece on the board.

    ``value`` is whatever material score the caller assigned; the standard
    roster signs it by side.  ``has_moved`` only shortens a pawn's advance and
    is never changed by move generation.
    """

    kind: PieceType
    side: Side
    location: Square
    value: int
    has_moved: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        char = _FEN_CHARS[self.kind]
        return char if self.side == Side.WHITE else char.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.side, self.kind)]


def make_piece(
    kind: PieceType,
    side: Side,
    square: Square | tuple[str, int] | str,
    value: int,
) -> Piece:
    """Build a piece that has not moved yet, e.g. ``(ROOK, WHITE, "E4", 5)``."""
    return Piece(kind, side, to_square(square), value)
