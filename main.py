"""CLI entrypoint for the word search puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from wordsearch.engine.generator import GeneratorConfig
from wordsearch.io.event_handler import parse_words
from wordsearch.service import ServiceConfig, WordSearchRequest, WordSearchService
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import print_puzzle_stats


def parse_words_file(path: Path) -> List[str]:
    """Words listed in ``path``, one or several comma-separated per line.

    Anything after ``#`` on a line is a comment.
    """
    words: List[str] = []
    with path.open(encoding="utf-8") as handle:
        for line in handle:
            words.extend(parse_words(line.split("#", 1)[0]))
    return words


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word search puzzles as JSON or PDF",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to hide in the grid",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--pdf", action="store_true", help="Render a PDF instead of JSON")
    parser.add_argument("--footer", type=str, help="Footer text printed at the bottom of the PDF")
    parser.add_argument("--output", type=Path, help="Optional path to write JSON or PDF output")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the grid and placement stats to stderr",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    if not words:
        parser.error("provide --words and/or --words-file")
    if args.pdf and not args.output:
        parser.error("--pdf requires --output")

    service = WordSearchService(ServiceConfig(generator=GeneratorConfig(seed=args.seed)))
    result = service.generate_puzzle(
        WordSearchRequest(words=words, pdf=args.pdf, footer=args.footer)
    )
    if result.is_error:
        print(f"error: {result.error}", file=sys.stderr)
        return 1

    if args.pretty and result.puzzle is not None:
        print_puzzle_stats(result.puzzle, stream=sys.stderr)

    if args.pdf:
        args.output.write_bytes(result.pdf_bytes or b"")
        return 0

    output_text = json.dumps(result.json, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
