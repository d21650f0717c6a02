"""Custom exception hierarchy for word search generation."""

from __future__ import annotations

from .constants import MAX_GRID_ATTEMPTS, MAX_WORD_LENGTH


class WordSearchError(Exception):
    """Base exception for generator failures."""


class WordTooLongError(WordSearchError):
    """Raised before any grid work when a word exceeds the length limit."""

    def __init__(self, word: str, max_length: int = MAX_WORD_LENGTH) -> None:
        self.word = word
        self.max_length = max_length
        super().__init__(
            f"Word '{word}' exceeds max length of {max_length} characters."
        )


class GenerationFailedError(WordSearchError):
    """Raised when some word stays unplaced after every whole-grid attempt."""

    def __init__(self, word: str, attempts: int = MAX_GRID_ATTEMPTS) -> None:
        self.word = word
        self.attempts = attempts
        super().__init__(
            f"Failed to generate grid after {attempts} attempts: "
            f"could not place word '{word}'"
        )


class ValidationError(WordSearchError):
    """Raised when the puzzle integrity checks fail."""


class RequestError(WordSearchError):
    """Raised when a request violates the word list policy."""


class RenderError(WordSearchError):
    """Raised when a JSON or PDF renderer cannot produce its output."""
