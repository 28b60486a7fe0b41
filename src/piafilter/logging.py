"\"\"\"Logging utilities for the filtering tools.\"\"\""

from __future__ import annotations

import logging
from typing import Literal

import structlog

Renderer = Literal["json", "console"]


def configure_logging(level: str = "INFO", renderer: Renderer = "json") -> None:
    """Configure structlog; JSON lines by default, human readable on request."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=log_level, format="%(message)s")

    final_processor = (
        structlog.dev.ConsoleRenderer(colors=False)
        if renderer == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.dict_tracebacks,
            final_processor,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )
