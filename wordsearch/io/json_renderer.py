"""JSON rendering of finished puzzles."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..core.exceptions import RenderError
from ..core.models import Puzzle


def to_jsonable(puzzle: Puzzle) -> Dict[str, Any]:
    """Grid as rows of one-letter strings, words in their original order and case."""

    if puzzle is None:
        raise RenderError("Puzzle must not be None")
    return {
        "grid": puzzle.rows(),
        "words": puzzle.word_list(),
    }


def render_json(puzzle: Puzzle, indent: Optional[int] = None) -> str:
    try:
        return json.dumps(to_jsonable(puzzle), ensure_ascii=False, indent=indent)
    except (TypeError, ValueError) as exc:
        raise RenderError(f"JSON generation failed: {exc}") from exc
