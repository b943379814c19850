"""structlog setup for the CLI."""

from __future__ import annotations

import logging

import structlog


def configure_logging(level: str) -> None:
    """Route structlog output through a level filter.

    Args:
        level: Standard level name, e.g. ``"DEBUG"`` or ``"WARNING"``.
    """
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
    )
