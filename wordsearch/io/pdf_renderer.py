"""Single-page PDF rendering of finished puzzles with reportlab."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from ..core.constants import WORDS_PER_LINE
from ..core.exceptions import RenderError
from ..core.models import Puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class PdfConfig:
    title: str = "Word Search Puzzle"
    footer: Optional[str] = None
    words_per_line: int = WORDS_PER_LINE
    pagesize: Tuple[float, float] = A4
    margin: float = 15 * mm
    title_font: Tuple[str, float] = ("Helvetica-Bold", 22)
    grid_font: str = "Courier-Bold"
    max_grid_font_size: float = 18
    heading_font: Tuple[str, float] = ("Helvetica-Bold", 14)
    word_font: Tuple[str, float] = ("Helvetica", 12)
    footer_font: Tuple[str, float] = ("Helvetica", 9)
    compress: bool = True


@dataclass
class GridCellLayout:
    row: int
    col: int
    x: float
    y: float
    letter: str


@dataclass
class PageLayout:
    """Positions of every element drawn on the page (PDF points, origin bottom-left)."""

    title_y: float
    cell_size: float
    grid_font_size: float
    cells: List[GridCellLayout] = field(default_factory=list)
    heading_y: float = 0.0
    word_lines: List[Tuple[float, str]] = field(default_factory=list)
    footer_y: Optional[float] = None


def group_words(words: Sequence[str], per_line: int = WORDS_PER_LINE) -> List[str]:
    """Join words into comma-separated lines of ``per_line`` entries."""

    if per_line <= 0:
        raise ValueError("per_line must be positive")
    return [
        ", ".join(words[start:start + per_line])
        for start in range(0, len(words), per_line)
    ]


def layout_page(puzzle: Puzzle, config: Optional[PdfConfig] = None) -> PageLayout:
    config = config or PdfConfig()
    page_w, page_h = config.pagesize
    margin = config.margin
    text_width = page_w - 2 * margin

    word_font, word_size = config.word_font
    wrapped: List[str] = []
    for line in group_words(puzzle.word_list(), config.words_per_line):
        wrapped.extend(simpleSplit(line, word_font, word_size, text_width) or [line])

    line_gap = word_size * 1.35
    heading_size = config.heading_font[1]
    title_size = config.title_font[1]
    footer_space = config.footer_font[1] * 2 if config.footer else 0.0
    list_height = heading_size * 2 + line_gap * len(wrapped)

    title_y = page_h - margin - title_size
    grid_top = title_y - title_size
    grid_room = grid_top - margin - footer_space - list_height
    size = puzzle.grid_size
    cell_size = max(1.0, min(text_width / size, grid_room / size))
    font_size = min(config.max_grid_font_size, cell_size * 0.6)
    origin_x = (page_w - cell_size * size) / 2

    layout = PageLayout(title_y=title_y, cell_size=cell_size, grid_font_size=font_size)
    for r, row in enumerate(puzzle.grid):
        for c, letter in enumerate(row):
            layout.cells.append(
                GridCellLayout(
                    row=r,
                    col=c,
                    x=origin_x + (c + 0.5) * cell_size,
                    # Baseline sits roughly a third of the glyph below the centre.
                    y=grid_top - (r + 0.5) * cell_size - font_size * 0.35,
                    letter=letter,
                )
            )

    layout.heading_y = grid_top - size * cell_size - heading_size * 1.5
    y = layout.heading_y - line_gap
    for line in wrapped:
        layout.word_lines.append((y, line))
        y -= line_gap
    if config.footer:
        layout.footer_y = margin / 2
    return layout


def layout_grid(puzzle: Puzzle, config: Optional[PdfConfig] = None) -> List[GridCellLayout]:
    """Position and letter of every grid cell, row-major."""

    return layout_page(puzzle, config).cells


def render_pdf(puzzle: Puzzle, config: Optional[PdfConfig] = None) -> bytes:
    """Render the grid, the word list and an optional footer on one page."""

    config = config or PdfConfig()
    buffer = io.BytesIO()
    try:
        layout = layout_page(puzzle, config)
        page_w, _ = config.pagesize
        pdf = canvas.Canvas(buffer, pagesize=config.pagesize, pageCompression=int(config.compress))
        pdf.setTitle(config.title)

        pdf.setFont(*config.title_font)
        pdf.drawCentredString(page_w / 2, layout.title_y, config.title)

        pdf.setFont(config.grid_font, layout.grid_font_size)
        for cell in layout.cells:
            pdf.drawCentredString(cell.x, cell.y, cell.letter)

        pdf.setFont(*config.heading_font)
        pdf.drawString(config.margin, layout.heading_y, "Word List:")
        pdf.setFont(*config.word_font)
        for y, line in layout.word_lines:
            pdf.drawString(config.margin, y, line)

        if config.footer and layout.footer_y is not None:
            pdf.setFont(*config.footer_font)
            pdf.drawCentredString(page_w / 2, layout.footer_y, config.footer)

        pdf.showPage()
        pdf.save()
    except RenderError:
        raise
    except Exception as exc:
        LOGGER.error("PDF rendering failed: %s", exc)
        raise RenderError(f"Failed to generate PDF: {exc}") from exc
    data = buffer.getvalue()
    LOGGER.debug("Rendered PDF (%d bytes) for %dx%d grid", len(data), puzzle.grid_size, puzzle.grid_size)
    return data
