"""Ray scanning: the shared primitive behind every piece's movement.

A ray starts next to the origin square and walks one direction until it
reaches the step cap, the board edge or the first occupied square.  Sliding
pieces scan uncapped rays, the king scans rays capped at one step and the
pawn's advance is a capped ray that may not capture.
"""

from __future__ import annotations

from typing import TypeAlias

from chessray.core.config import DEFAULT_SCORING, ScoringConfig
from chessray.core.move import CandidateMove
from chessray.core.piece import Piece
from chessray.core.position import Position
from chessray.core.types import Square

Direction: TypeAlias = tuple[int, int]  # (file delta, rank delta)

# "Forward" is towards rank 8 regardless of side; pawns use Side.forward.
FORWARD: Direction = (0, 1)
BACKWARD: Direction = (0, -1)
LEFT_TO_RIGHT: Direction = (1, 0)
RIGHT_TO_LEFT: Direction = (-1, 0)
UP_RIGHT: Direction = (1, 1)
UP_LEFT: Direction = (-1, 1)
DOWN_RIGHT: Direction = (1, -1)
DOWN_LEFT: Direction = (-1, -1)

ROOK_DIRS: tuple[Direction, ...] = (FORWARD, BACKWARD, LEFT_TO_RIGHT, RIGHT_TO_LEFT)
BISHOP_DIRS: tuple[Direction, ...] = (UP_RIGHT, UP_LEFT, DOWN_RIGHT, DOWN_LEFT)
QUEEN_DIRS: tuple[Direction, ...] = ROOK_DIRS + BISHOP_DIRS

KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (1, 2),
    (-1, 2),
    (2, 1),
    (-2, 1),
    (2, -1),
    (-2, -1),
    (1, -2),
    (-1, -2),
)

# Longest possible ray on an 8x8 board.
MAX_RAY_LENGTH = 7


def classify_square(
    target: Square,
    mover: Piece,
    position: Position,
    can_capture: bool = True,
    scoring: ScoringConfig = DEFAULT_SCORING,
) -> CandidateMove | None:
    """Single-step verdict for *mover* landing on *target*.

    Returns ``None`` when the square is blocked (friendly piece, or any piece
    when capturing is not allowed), a capture carrying its score when an
    enemy sits there, and a quiet move otherwise.
    """
    occupant = position.piece_at(target)
    if occupant is None:
        return CandidateMove.to(target)
    if occupant.side == mover.side or not can_capture:
        return None
    return CandidateMove.to(target, scoring.capture_score(mover.value, occupant.value))


def scan_ray(
    origin: Square,
    direction: Direction,
    mover: Piece,
    position: Position,
    max_steps: int | None = None,
    can_capture: bool = True,
    scoring: ScoringConfig = DEFAULT_SCORING,
) -> list[CandidateMove]:
    """Reachable squares along one ray, nearest to *origin* first.

    The first occupied square ends the ray: it is included only when it holds
    an enemy and *can_capture* is set.  ``max_steps=None`` runs to the edge.
    """
    d_file, d_rank = direction
    limit = MAX_RAY_LENGTH if max_steps is None else min(max_steps, MAX_RAY_LENGTH)

    moves: list[CandidateMove] = []
    for step in range(1, limit + 1):
        target = origin.offset(d_file * step, d_rank * step)
        if target is None:
            break
        move = classify_square(target, mover, position, can_capture, scoring)
        if move is None:
            break
        moves.append(move)
        if not position.is_empty(target):
            break
    return moves
