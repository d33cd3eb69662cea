"""Square value object and coordinate helpers.

Squares are addressed the way players read them: a file letter A-H and a
rank number 1-8.  Direction arithmetic always goes through the zero-based
file index and signed integers, and bounds are checked before a new square
is built, so stepping off an edge yields ``None`` rather than wrapping.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chessray.core.errors import InvalidSquareError

FILES: tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G", "H")
RANKS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8)

_FILE_INDEX: dict[str, int] = {f: i for i, f in enumerate(FILES)}


def file_index(file: str) -> int:
    """File letter to index 0-7, e.g. 'C' → 2."""
    try:
        return _FILE_INDEX[file.upper()]
    except (KeyError, AttributeError):
        raise InvalidSquareError(f"Invalid file: {file!r}") from None


def file_letter(index: int) -> str:
    """Index 0-7 to file letter, e.g. 2 → 'C'."""
    if not 0 <= index < len(FILES):
        raise InvalidSquareError(f"File index out of range: {index!r}")
    return FILES[index]


def on_board(file_idx: int, rank: int) -> bool:
    """Whether a zero-based file index and a 1-based rank lie on the board."""
    return 0 <= file_idx < 8 and 1 <= rank <= 8


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable (file, rank) coordinate, e.g. ``Square("E", 4)``."""

    file: str
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.file, str) or self.file.upper() not in _FILE_INDEX:
            raise InvalidSquareError(f"Invalid file: {self.file!r}")
        if (
            not isinstance(self.rank, int)
            or isinstance(self.rank, bool)
            or self.rank not in RANKS
        ):
            raise InvalidSquareError(f"Invalid rank: {self.rank!r}")
        if self.file != self.file.upper():
            object.__setattr__(self, "file", self.file.upper())

    @property
    def file_index(self) -> int:
        return _FILE_INDEX[self.file]

    def offset(self, d_file: int, d_rank: int) -> Square | None:
        """Square *d_file* files and *d_rank* ranks away, or ``None`` off-board."""
        to_file = self.file_index + d_file
        to_rank = self.rank + d_rank
        if not on_board(to_file, to_rank):
            return None
        return Square(FILES[to_file], to_rank)

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"

    def __iter__(self) -> Iterator[str | int]:
        # Lets a square unpack like the (file, rank) pair it models.
        yield self.file
        yield self.rank


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square('E', 4)."""
    if not isinstance(name, str) or len(name) != 2 or not name[1].isdigit():
        raise InvalidSquareError(f"Invalid square name: {name!r}")
    return Square(name[0], int(name[1]))


def to_square(value: Square | tuple[str, int] | str) -> Square:
    """Coerce a square, a ``(file, rank)`` pair or a name into a :class:`Square`."""
    if isinstance(value, Square):
        return value
    if isinstance(value, str):
        return parse_square(value)
    try:
        file, rank = value
    except (TypeError, ValueError):
        raise InvalidSquareError(f"Invalid square: {value!r}") from None
    return Square(file, rank)


def board_squares() -> list[Square]:
    """All 64 squares, file by file: A1, A2, ..., A8, B1, ..., H8."""
    return [Square(f, r) for f in FILES for r in RANKS]


# ── Named square constants ──────────────────────────────────────────────────

A1, A2, A3, A4, A5, A6, A7, A8 = (Square("A", r) for r in RANKS)
B1, B2, B3, B4, B5, B6, B7, B8 = (Square("B", r) for r in RANKS)
C1, C2, C3, C4, C5, C6, C7, C8 = (Square("C", r) for r in RANKS)
D1, D2, D3, D4, D5, D6, D7, D8 = (Square("D", r) for r in RANKS)
E1, E2, E3, E4, E5, E6, E7, E8 = (Square("E", r) for r in RANKS)
F1, F2, F3, F4, F5, F6, F7, F8 = (Square("F", r) for r in RANKS)
G1, G2, G3, G4, G5, G6, G7, G8 = (Square("G", r) for r in RANKS)
H1, H2, H3, H4, H5, H6, H7, H8 = (Square("H", r) for r in RANKS)
