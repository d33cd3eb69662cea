"""Standard 32-piece starting roster."""

from __future__ import annotations

from chessray.core.config import DEFAULT_PIECE_VALUES, PieceValues
from chessray.core.enums import PieceType, Side
from chessray.core.piece import Piece, make_piece
from chessray.core.types import FILES

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# side -> (back rank, pawn rank)
_HOME_RANKS: dict[Side, tuple[int, int]] = {
    Side.WHITE: (1, 2),
    Side.BLACK: (8, 7),
}


def generate_standard_roster(
    values: PieceValues = DEFAULT_PIECE_VALUES,
) -> list[Piece]:
    """Starting position as an ordered list.

    White back rank A1-H1, White pawns A2-H2, then Black back rank A8-H8 and
    Black pawns A7-H7.  Values are signed by side (Black negative).
    """
    pieces: list[Piece] = []
    for side in (Side.WHITE, Side.BLACK):
        back_rank, pawn_rank = _HOME_RANKS[side]
        for file, kind in zip(FILES, BACK_RANK):
            value = values.signed_for(kind, side)
            pieces.append(make_piece(kind, side, (file, back_rank), value))

        pawn_value = values.signed_for(PieceType.PAWN, side)
        for file in FILES:
            square = (file, pawn_rank)
            pieces.append(make_piece(PieceType.PAWN, side, square, pawn_value))
    return pieces
