"""Exceptions raised by the core layer.

All of them derive from :class:`ValueError` so callers that only care about
bad input can keep catching the builtin.
"""

from __future__ import annotations


class ChessrayError(ValueError):
    """Base class for invalid-input errors."""


class InvalidSquareError(ChessrayError):
    """A file or rank outside A-H / 1-8, or an unparsable square name."""


class OverlappingPiecesError(ChessrayError):
    """Two pieces were placed on the same square of one position."""


class EmptyMoveListError(ChessrayError):
    """A best move was requested from an empty candidate list."""
