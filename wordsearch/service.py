"""Request policy and renderer dispatch around the puzzle generator."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional

from .core.constants import MAX_WORDS
from .core.exceptions import (GenerationFailedError, RenderError, RequestError,
                              ValidationError, WordTooLongError)
from .core.models import Puzzle
from .engine.generator import GeneratorConfig, WordSearchGenerator
from .io.json_renderer import to_jsonable
from .io.pdf_renderer import PdfConfig, render_pdf
from .utils.logger import get_logger


LOGGER = get_logger(__name__)

BAD_REQUEST = 400
SERVER_ERROR = 500


@dataclass
class WordSearchRequest:
    words: Optional[List[str]] = None
    pdf: bool = False
    footer: Optional[str] = None


@dataclass
class WordSearchResult:
    grid: Optional[List[List[str]]] = None
    words: Optional[List[str]] = None
    pdf: bool = False
    pdf_bytes: Optional[bytes] = None
    json: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    status_code: int = 200
    puzzle: Optional[Puzzle] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


@dataclass
class ServiceConfig:
    max_words: int = MAX_WORDS
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    pdf: PdfConfig = field(default_factory=PdfConfig)


class WordSearchService:
    """Validates requests, generates a puzzle and renders JSON or PDF."""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        json_renderer: Callable[[Puzzle], Dict[str, Any]] = to_jsonable,
        pdf_renderer: Callable[[Puzzle, PdfConfig], bytes] = render_pdf,
    ) -> None:
        self.config = config or ServiceConfig()
        self.json_renderer = json_renderer
        self.pdf_renderer = pdf_renderer

    def check_request(self, request: Optional[WordSearchRequest]) -> List[str]:
        if request is None or not request.words:
            raise RequestError("Word list must not be empty.")
        if len(request.words) > self.config.max_words:
            raise RequestError(
                f"Too many words. Maximum allowed is {self.config.max_words}."
            )
        return list(request.words)

    def generate_puzzle(self, request: Optional[WordSearchRequest]) -> WordSearchResult:
        result = WordSearchResult()
        request = request or WordSearchRequest()
        try:
            words = self.check_request(request)
        except RequestError as exc:
            LOGGER.warning("Rejected request: %s", exc)
            return self._fail(result, str(exc), BAD_REQUEST)

        # A fresh generator per request keeps random state private to the call.
        generator = WordSearchGenerator(self.config.generator)
        try:
            puzzle = generator.generate(words)
        except WordTooLongError as exc:
            LOGGER.warning("Rejected request: %s", exc)
            return self._fail(result, f"Failed to generate puzzle: {exc}", BAD_REQUEST)
        except (GenerationFailedError, ValidationError) as exc:
            LOGGER.error("Puzzle generation failed: %s", exc)
            return self._fail(result, f"Failed to generate puzzle: {exc}", SERVER_ERROR)

        result.puzzle = puzzle
        result.grid = puzzle.rows()
        result.words = list(request.words or [])
        result.pdf = request.pdf
        if request.pdf:
            pdf_config = self.config.pdf
            if request.footer:
                pdf_config = replace(pdf_config, footer=request.footer)
            try:
                result.pdf_bytes = self.pdf_renderer(puzzle, pdf_config)
            except RenderError as exc:
                LOGGER.error("PDF generation failed: %s", exc)
                return self._fail(result, f"PDF generation failed: {exc}", SERVER_ERROR)
        else:
            try:
                result.json = self.json_renderer(puzzle)
            except RenderError as exc:
                LOGGER.error("JSON generation failed: %s", exc)
                return self._fail(result, f"JSON generation failed: {exc}", SERVER_ERROR)
        return result

    @staticmethod
    def _fail(result: WordSearchResult, message: str, status_code: int) -> WordSearchResult:
        result.error = message
        result.status_code = status_code
        return result
