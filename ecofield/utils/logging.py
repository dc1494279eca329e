"""Logging helpers."""

from __future__ import annotations

import logging


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=level,
    )
    # urllib3 logs every connection at DEBUG.
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))
