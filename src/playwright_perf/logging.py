"""Logging setup shared by the playwright_perf modules."""

from __future__ import annotations

import logging
import sys

_ROOT_NAME = "playwright_perf"
_configured = False


def setup_root_logger(level: int = logging.WARNING, handler: logging.Handler | None = None) -> None:
    """Attach a single stderr handler to the package logger.

    Calling it again only adjusts the level, so handlers are never duplicated.
    """
    global _configured

    root_logger = logging.getLogger(_ROOT_NAME)
    root_logger.setLevel(level)
    if _configured:
        return

    root_logger.handlers.clear()
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(handler)
    # pytest's caplog hooks the root logger
    root_logger.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    setup_root_logger(level)
    for handler in logging.getLogger(_ROOT_NAME).handlers:
        handler.setLevel(level)
