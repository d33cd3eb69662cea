"""Candidate move value object."""

from __future__ import annotations

from typing import NamedTuple

from chessray.core.types import Square


class CandidateMove(NamedTuple):
    """Hypothetical destination of a piece: ``(file, rank, captured_score)``.

    ``captured_score`` is 0 for a quiet move.  Being a plain tuple, a move
    compares equal to ``("E", 5, 0)``.
    """

    file: str
    rank: int
    captured_score: int = 0

    @classmethod
    def to(cls, sq: Square, captured_score: int = 0) -> CandidateMove:
        return cls(sq.file, sq.rank, captured_score)

    @property
    def square(self) -> Square:
        return Square(self.file, self.rank)

    def __str__(self) -> str:
        return f"{self.file}{self.rank}:{self.captured_score}"
