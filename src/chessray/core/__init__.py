"""Core domain layer - pure move generation with zero external dependencies.

Quick start::

    from chessray.core import generate_standard_roster, legal_moves, select_best

    pieces = generate_standard_roster()
    moves = legal_moves(pieces[8], pieces)  # white a-pawn
    print(moves)  # [('A', 3, 0), ('A', 4, 0)]
    print(select_best(moves))
"""

from chessray.core.config import (
    DEFAULT_PIECE_VALUES,
    DEFAULT_SCORING,
    PieceValues,
    ScoringConfig,
)
from chessray.core.enums import CaptureScoring, PieceType, Side
from chessray.core.errors import (
    ChessrayError,
    EmptyMoveListError,
    InvalidSquareError,
    OverlappingPiecesError,
)
from chessray.core.move import CandidateMove
from chessray.core.move_generator import MoveGenerator, legal_moves
from chessray.core.piece import Piece, make_piece
from chessray.core.position import Position
from chessray.core.rays import classify_square, scan_ray
from chessray.core.roster import generate_standard_roster
from chessray.core.selector import select_best
from chessray.core.types import (
    FILES,
    RANKS,
    Square,
    board_squares,
    file_index,
    file_letter,
    parse_square,
)

__all__ = [
    # Enums
    "CaptureScoring",
    "PieceType",
    "Side",
    # Types / helpers
    "FILES",
    "RANKS",
    "Square",
    "board_squares",
    "file_index",
    "file_letter",
    "parse_square",
    # Configuration
    "DEFAULT_PIECE_VALUES",
    "DEFAULT_SCORING",
    "PieceValues",
    "ScoringConfig",
    # Errors
    "ChessrayError",
    "EmptyMoveListError",
    "InvalidSquareError",
    "OverlappingPiecesError",
    # Domain objects
    "CandidateMove",
    "MoveGenerator",
    "Piece",
    "Position",
    # Operations
    "classify_square",
    "generate_standard_roster",
    "legal_moves",
    "make_piece",
    "scan_ray",
    "select_best",
]
