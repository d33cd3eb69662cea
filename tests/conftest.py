"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessray.core.piece import Piece
from chessray.core.position import Position
from chessray.core.roster import generate_standard_roster


@pytest.fixture
def roster() -> list[Piece]:
    """Fresh standard 32-piece starting roster."""
    return generate_standard_roster()


@pytest.fixture
def start_position(roster: list[Piece]) -> Position:
    return Position(roster)


@pytest.fixture
def empty_position() -> Position:
    return Position()
