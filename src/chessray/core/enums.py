"""Core enumerations for the move-generation domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Side(IntEnum):
    """Side a piece plays for."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank delta of a pawn step (+1 towards rank 8 for White)."""
        return 1 if self is Side.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class CaptureScoring(StrEnum):
    """How the material of a capture is summed into a move score."""

    ABSOLUTE = "absolute"
    SIGNED = "signed"
