"""Material values and capture-scoring settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessray.core.enums import CaptureScoring, PieceType, Side


@dataclass(slots=True, frozen=True)
class PieceValues:
    """Material magnitude of each piece kind."""

    pawn: int = 1
    knight: int = 3
    bishop: int = 3
    rook: int = 5
    queen: int = 9
    king: int = 0

    def __getitem__(self, kind: PieceType) -> int:
        return getattr(self, kind.name.lower())

    def signed_for(self, kind: PieceType, side: Side) -> int:
        """Side-relative value: positive for White, negative for Black."""
        magnitude = abs(self[kind])
        return magnitude if side == Side.WHITE else -magnitude


@dataclass(slots=True, frozen=True)
class ScoringConfig:
    """Settings that shape the score attached to a capture."""

    capture_scoring: CaptureScoring = CaptureScoring.ABSOLUTE

    def capture_score(self, mover_value: int, captured_value: int) -> int:
        if self.capture_scoring == CaptureScoring.SIGNED:
            return mover_value + captured_value
        return abs(mover_value) + abs(captured_value)


DEFAULT_PIECE_VALUES = PieceValues()
DEFAULT_SCORING = ScoringConfig()
