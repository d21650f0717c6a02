"""Word search puzzle generator package.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.WordSearchGenerator``: sizes the grid, places
  every word with bounded retries and fills the rest with random letters.
- ``wordsearch.service.WordSearchService``: request policy plus JSON/PDF
  rendering around the generator.
- ``wordsearch.io`` adapters: JSON and PDF renderers and a Lambda-style
  event handler.
"""

from .core.models import Puzzle
from .engine.generator import GeneratorConfig, WordSearchGenerator, generate_puzzle
from .service import WordSearchRequest, WordSearchResult, WordSearchService

__all__ = [
    "Puzzle",
    "GeneratorConfig",
    "WordSearchGenerator",
    "generate_puzzle",
    "WordSearchRequest",
    "WordSearchResult",
    "WordSearchService",
]

__version__ = "0.1.0"
