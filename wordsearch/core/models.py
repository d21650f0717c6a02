"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class Placement:
    """A (direction, start) choice for one uppercased word."""

    word: str
    start_row: int
    start_col: int
    direction: Direction

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        return [
            self.direction.cell(self.start_row, self.start_col, i, self.length)
            for i in range(self.length)
        ]


@dataclass(frozen=True)
class PlacementOutcome:
    """Result of the per-word placement loop."""

    word: str
    placement: Optional[Placement]
    attempts: int

    @property
    def placed(self) -> bool:
        return self.placement is not None


@dataclass(frozen=True)
class Puzzle:
    """A finished word search: square letter grid plus the original word list."""

    grid: Tuple[Tuple[str, ...], ...]
    words: Tuple[str, ...]
    placements: Tuple[Placement, ...] = field(default=(), compare=False)
    attempts: int = field(default=1, compare=False)

    @property
    def grid_size(self) -> int:
        return len(self.grid)

    def rows(self) -> List[List[str]]:
        return [list(row) for row in self.grid]

    def word_list(self) -> List[str]:
        return list(self.words)
