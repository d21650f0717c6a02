"""Main word search generator orchestration.

Two nested bounded loops:
  1. Whole-grid attempts: a fresh empty grid per attempt, every word placed
     in input order. A single unplaced word abandons the attempt.
  2. Per-word attempts: random (direction, start) choices tested against the
     current grid until one fits or the budget runs out.
Once an attempt places every word, empty cells get random letters.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from ..core.constants import (DEFAULT_GRID_SIZE, DIRECTIONS, MAX_ATTEMPTS,
                              MAX_GRID_ATTEMPTS, MAX_WORD_LENGTH)
from ..core.exceptions import GenerationFailedError, ValidationError, WordTooLongError
from ..core.models import Placement, PlacementOutcome, Puzzle
from ..utils.logger import get_logger
from .grid import LetterGrid
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    seed: Optional[int] = None
    default_grid_size: int = DEFAULT_GRID_SIZE
    max_word_length: int = MAX_WORD_LENGTH
    max_placement_attempts: int = MAX_ATTEMPTS
    max_grid_attempts: int = MAX_GRID_ATTEMPTS
    validate: bool = True


@dataclass
class GridAttempt:
    """Outcome of one whole-grid pass."""

    grid: LetterGrid
    outcomes: List[PlacementOutcome]

    @property
    def failed_outcome(self) -> Optional[PlacementOutcome]:
        for outcome in self.outcomes:
            if not outcome.placed:
                return outcome
        return None


class WordSearchGenerator:
    """Builds word search puzzles from word lists.

    Each generator owns its random source. Share a generator between threads
    only behind a lock; otherwise build one per call (see
    :func:`generate_puzzle`).
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        if self.config.max_grid_attempts < 1 or self.config.max_placement_attempts < 1:
            raise ValueError("Attempt budgets must be at least 1")
        self.rng = random.Random(self.config.seed)
        self.validator = PuzzleValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str]) -> Puzzle:
        words = list(words)
        self.check_word_lengths(words)
        size = self.grid_size(words)
        forms = [word.upper() for word in words]

        failed_word = ""
        for attempt in range(1, self.config.max_grid_attempts + 1):
            LOGGER.info(
                "Grid attempt %s/%s (%d words, size %d)",
                attempt,
                self.config.max_grid_attempts,
                len(forms),
                size,
            )
            result = self._attempt_grid(forms, size)
            failure = result.failed_outcome
            if failure is None:
                filled = result.grid.fill_empty(self.rng)
                LOGGER.debug("Filled %d empty cells with random letters", filled)
                puzzle = Puzzle(
                    grid=result.grid.freeze(),
                    words=tuple(words),
                    placements=tuple(
                        outcome.placement for outcome in result.outcomes if outcome.placement
                    ),
                    attempts=attempt,
                )
                if self.config.validate:
                    validation = self.validator.validate(puzzle)
                    if not validation.ok:
                        raise ValidationError(f"Puzzle validation failed: {validation.messages}")
                LOGGER.info("Word search generated on attempt %s", attempt)
                return puzzle
            failed_word = failure.word
            LOGGER.warning(
                "Grid attempt %s failed: could not place '%s' after %d tries",
                attempt,
                failure.word,
                failure.attempts,
            )

        raise GenerationFailedError(failed_word, attempts=self.config.max_grid_attempts)

    # ------------------------------------------------------------------
    # Sizing and validation
    # ------------------------------------------------------------------
    def check_word_lengths(self, words: Sequence[str]) -> None:
        limit = self.config.max_word_length
        for word in words:
            if len(word) > limit:
                raise WordTooLongError(word, max_length=limit)

    def grid_size(self, words: Sequence[str]) -> int:
        """Side length from the words as supplied, before uppercasing."""

        return max([self.config.default_grid_size, *(len(word) for word in words)])

    # ------------------------------------------------------------------
    # Placement loops
    # ------------------------------------------------------------------
    def _attempt_grid(self, forms: Sequence[str], size: int) -> GridAttempt:
        grid = LetterGrid(size)
        outcomes: List[PlacementOutcome] = []
        for word in forms:
            outcome = self.place_word(grid, word)
            outcomes.append(outcome)
            if not outcome.placed:
                break
        return GridAttempt(grid=grid, outcomes=outcomes)

    def place_word(self, grid: LetterGrid, word: str) -> PlacementOutcome:
        """Try random placements for ``word`` and write the first one that fits."""

        budget = self.config.max_placement_attempts
        for attempt in range(1, budget + 1):
            direction = self.rng.choice(DIRECTIONS)
            row_bound, col_bound = direction.start_bounds(grid.size, len(word))
            if row_bound <= 0 or col_bound <= 0:
                continue
            placement = Placement(
                word=word,
                start_row=self.rng.randrange(row_bound),
                start_col=self.rng.randrange(col_bound),
                direction=direction,
            )
            if grid.can_place(placement):
                grid.place(placement)
                return PlacementOutcome(word=word, placement=placement, attempts=attempt)
        return PlacementOutcome(word=word, placement=None, attempts=budget)


def generate_puzzle(
    words: Sequence[str],
    seed: Optional[int] = None,
    config: Optional[GeneratorConfig] = None,
) -> Puzzle:
    """Generate a puzzle with a generator (and random source) private to this call."""

    if config is None:
        config = GeneratorConfig(seed=seed)
    elif seed is not None:
        config = replace(config, seed=seed)
    return WordSearchGenerator(config).generate(words)
