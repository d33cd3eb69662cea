"""One-ply greedy choice among candidate moves."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chessray.core.errors import EmptyMoveListError
from chessray.core.move import CandidateMove

_LOGGER = logging.getLogger(__name__)


def select_best(moves: Iterable[CandidateMove]) -> CandidateMove:
    """Move with the highest captured score.

    Ties go to the earliest candidate; a later move must score strictly
    higher to replace it.  Plain ``(file, rank, score)`` tuples work too.
    Raises :class:`EmptyMoveListError` when there is nothing to choose from.
    """
    best: CandidateMove | None = None
    for move in moves:
        if best is None or move[2] > best[2]:
            best = move
    if best is None:
        raise EmptyMoveListError("No candidate moves to choose from")
    _LOGGER.debug("Selected %s", best)
    return best
