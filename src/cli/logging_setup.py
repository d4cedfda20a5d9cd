"""Logging for the CLI (Rich handler on stderr; stdout is reserved for the response)."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Install a single RichHandler on the root logger."""

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    # httpx/httpcore wire traces stay hidden even with --verbose.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(max(logging.root.level, logging.INFO))
