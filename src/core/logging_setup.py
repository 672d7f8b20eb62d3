"""Loguru setup shared by the CLI and the API entry points."""

from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """Route loguru output to stderr at `level`.

    stdout stays clean for `--json` output and piping.
    """

    logger.remove()
    logger.add(sys.stderr, level=level.upper())
