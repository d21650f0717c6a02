"""Logging setup shared by the generator, renderers and request adapters."""

from __future__ import annotations

import logging
from typing import IO, Optional


LOGGER_NAME = "wordsearch"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Install a single stream handler on the root logger.

    Grid attempts and request outcomes are logged at INFO and WARNING;
    individual placements and random fill counts only at DEBUG. ``stream``
    defaults to stderr so JSON written to stdout by the CLI stays clean.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name`` (module loggers sit under ``wordsearch.``)."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or LOGGER_NAME)
