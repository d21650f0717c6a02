"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:
    from ..core.models import Puzzle


def format_grid(puzzle: Puzzle) -> str:
    width = puzzle.grid_size
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(puzzle.grid):
        row_render = " ".join(f"{letter:>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_puzzle(puzzle: Puzzle, *, label: str | None = None, stream=None) -> None:
    """Print the puzzle grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(puzzle), file=stream)


def count_intersections(puzzle: Puzzle) -> int:
    """Cells shared by more than one placed word."""

    usage: Dict[Tuple[int, int], int] = Counter()
    for placement in puzzle.placements:
        for cell in set(placement.cells):
            usage[cell] += 1
    return sum(1 for hits in usage.values() if hits > 1)


def print_puzzle_stats(puzzle: Puzzle, *, stream=None) -> None:
    """Print grid + placement stats for a finished puzzle."""

    stream = stream or sys.stdout
    print(format_grid(puzzle), file=stream)

    size = puzzle.grid_size
    total_cells = size * size
    covered = {cell for placement in puzzle.placements for cell in placement.cells}

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {size} x {size} ({total_cells} cells)", file=stream)
    print(f"  Word letters:  {len(covered)} ({len(covered) / total_cells * 100:.0f}%)", file=stream)
    print(f"  Random fill:   {total_cells - len(covered)}", file=stream)
    print(f"  Attempts:      {puzzle.attempts}", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Total words:   {len(puzzle.words)}", file=stream)
    if puzzle.placements:
        directions = Counter(p.direction.value for p in puzzle.placements)
        dist_parts = [f"{name}:{count}" for name, count in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)
        print(f"  Intersections: {count_intersections(puzzle)}", file=stream)
        for placement in puzzle.placements:
            print(
                f"  {placement.word:<30} ({placement.start_row:>2},{placement.start_col:>2}) "
                f"{placement.direction.value}",
                file=stream,
            )
