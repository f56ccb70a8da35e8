"""Logging helpers for the package."""

from __future__ import annotations

import logging
import sys


def setup(level: int = logging.INFO) -> None:
    """Configure logging for the package.

    Records go to stderr: a language server's stdout carries the protocol.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
