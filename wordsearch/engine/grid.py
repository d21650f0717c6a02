"""Grid representation and placement helpers."""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from ..core.constants import ALPHABET, EMPTY_CELL, Bounds
from ..core.models import Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """Square letter buffer owned by a single whole-grid attempt."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: List[List[Optional[str]]] = [
            [EMPTY_CELL for _ in range(size)] for _ in range(size)
        ]

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] is EMPTY_CELL

    def empty_count(self) -> int:
        return sum(1 for row in self.cells for value in row if value is EMPTY_CELL)

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def can_place(self, placement: Placement) -> bool:
        """Return True when every letter lands in bounds on an empty or equal cell."""

        for letter, (row, col) in zip(placement.word, placement.cells):
            if not self.bounds.contains(row, col):
                return False
            current = self.cells[row][col]
            if current is not EMPTY_CELL and current != letter:
                return False
        return True

    def place(self, placement: Placement) -> None:
        for letter, (row, col) in zip(placement.word, placement.cells):
            self.cells[row][col] = letter
        LOGGER.debug(
            "Placed %s %s at (%s,%s)",
            placement.word,
            placement.direction.value,
            placement.start_row,
            placement.start_col,
        )

    def fill_empty(self, rng: random.Random) -> int:
        """Fill empty cells with random letters and return how many were filled."""

        filled = 0
        for row in self.cells:
            for c, value in enumerate(row):
                if value is EMPTY_CELL:
                    row[c] = rng.choice(ALPHABET)
                    filled += 1
        return filled

    def freeze(self) -> Tuple[Tuple[str, ...], ...]:
        if self.empty_count():
            raise ValueError("Cannot freeze a grid that still has empty cells")
        return tuple(tuple(row) for row in self.cells)  # type: ignore[arg-type]
