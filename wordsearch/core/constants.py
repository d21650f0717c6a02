"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple


DEFAULT_GRID_SIZE = 15
MAX_WORD_LENGTH = 30
MAX_ATTEMPTS = 100
MAX_GRID_ATTEMPTS = 5
MAX_WORDS = 20
WORDS_PER_LINE = 5

ALPHABET = string.ascii_uppercase
EMPTY_CELL: Optional[str] = None


class Direction(str, Enum):
    """Word directions supported by the grid."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"
    DIAGONAL_DOWN = "DIAGONAL_DOWN"
    DIAGONAL_UP = "DIAGONAL_UP"

    def start_bounds(self, grid_size: int, length: int) -> Tuple[int, int]:
        """Exclusive upper bounds for the start row and column of a word."""

        row_span, col_span = _BOUND_SPANS[self]
        fitted = grid_size - length + 1
        return (fitted if row_span else grid_size, fitted if col_span else grid_size)

    def cell(self, row: int, col: int, index: int, length: int) -> Tuple[int, int]:
        """Coordinates of letter ``index`` for a word starting at ``(row, col)``."""

        return _CELL_FORMULAS[self](row, col, index, length)


# (row constrained by length, col constrained by length)
_BOUND_SPANS: Dict[Direction, Tuple[bool, bool]] = {
    Direction.HORIZONTAL: (False, True),
    Direction.VERTICAL: (True, False),
    Direction.DIAGONAL_DOWN: (True, True),
    Direction.DIAGONAL_UP: (True, True),
}

CellFormula = Callable[[int, int, int, int], Tuple[int, int]]

_CELL_FORMULAS: Dict[Direction, CellFormula] = {
    Direction.HORIZONTAL: lambda row, col, i, n: (row, col + i),
    Direction.VERTICAL: lambda row, col, i, n: (row + i, col),
    Direction.DIAGONAL_DOWN: lambda row, col, i, n: (row + i, col + i),
    # Start is the bottom-left end; letters climb up and to the right.
    Direction.DIAGONAL_UP: lambda row, col, i, n: (row + n - 1 - i, col + i),
}

DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
