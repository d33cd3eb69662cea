"""chessray - single-piece move generation with capture scoring."""

from chessray.core import (
    CandidateMove,
    Piece,
    PieceType,
    Position,
    Side,
    Square,
    generate_standard_roster,
    legal_moves,
    make_piece,
    select_best,
)

__version__ = "0.1.0"

__all__ = [
    "CandidateMove",
    "Piece",
    "PieceType",
    "Position",
    "Side",
    "Square",
    "__version__",
    "generate_standard_roster",
    "legal_moves",
    "make_piece",
    "select_best",
]
