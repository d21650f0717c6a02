"""Deterministic rule validation for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.constants import DIRECTIONS, EMPTY_CELL
from ..core.exceptions import ValidationError
from ..core.models import Placement, Puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a finished puzzle."""

    def validate(self, puzzle: Puzzle) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_square(puzzle)
            self._check_letters_valid(puzzle)
            self._check_words_placed(puzzle)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_square(self, puzzle: Puzzle) -> None:
        size = puzzle.grid_size
        if size == 0:
            raise ValidationError("Grid has no rows")
        for r, row in enumerate(puzzle.grid):
            if len(row) != size:
                raise ValidationError(
                    f"Row {r} has {len(row)} columns, expected {size}"
                )

    def _check_letters_valid(self, puzzle: Puzzle) -> None:
        for r, row in enumerate(puzzle.grid):
            for c, letter in enumerate(row):
                if letter is EMPTY_CELL:
                    raise ValidationError(f"Empty cell left at ({r},{c})")
                if not isinstance(letter, str) or len(letter) != 1:
                    raise ValidationError(f"Invalid cell value {letter!r} at ({r},{c})")
                # Uncased scripts (CJK, Hebrew, Arabic) map to themselves.
                if letter.upper() != letter:
                    raise ValidationError(f"Lowercase letter '{letter}' at ({r},{c})")

    def _check_words_placed(self, puzzle: Puzzle) -> None:
        if len(puzzle.placements) != len(puzzle.words):
            raise ValidationError(
                f"{len(puzzle.placements)} placements recorded for {len(puzzle.words)} words"
            )
        for word, placement in zip(puzzle.words, puzzle.placements):
            expected = word.upper()
            if placement.word != expected:
                raise ValidationError(
                    f"Placement for '{word}' records '{placement.word}'"
                )
            size = puzzle.grid_size
            if any(not (0 <= r < size and 0 <= c < size) for r, c in placement.cells):
                raise ValidationError(f"Word '{expected}' runs off the grid")
            read = "".join(puzzle.grid[r][c] for r, c in placement.cells)
            if read != expected:
                raise ValidationError(
                    f"Word '{expected}' reads '{read}' at "
                    f"({placement.start_row},{placement.start_col}) {placement.direction.value}"
                )


def locate_word(grid: Sequence[Sequence[str]], word: str) -> List[Placement]:
    """Every placement at which ``word`` (uppercased) reads forward in ``grid``."""

    target = word.upper()
    size = len(grid)
    found: List[Placement] = []
    for direction in DIRECTIONS:
        row_bound, col_bound = direction.start_bounds(size, len(target))
        for row in range(max(row_bound, 0)):
            for col in range(max(col_bound, 0)):
                placement = Placement(target, row, col, direction)
                if all(grid[r][c] == letter for letter, (r, c) in zip(target, placement.cells)):
                    found.append(placement)
    return found
