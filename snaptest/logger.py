"""Logging setup: one ``snaptest`` logger rendered through rich."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from snaptest.config.settings import get_settings


ROOT_LOGGER = "snaptest"


def configure_logger(log_level: int | str | None = None) -> logging.Logger:
    """Configure the package logger once and return it."""
    logger = logging.getLogger(ROOT_LOGGER)
    if log_level is None:
        log_level = get_settings().log_level
    if isinstance(log_level, str):
        log_level = log_level.upper()
    logger.setLevel(log_level)
    logger.propagate = False

    if logger.hasHandlers():
        return logger

    console_handler = RichHandler(rich_tracebacks=True, show_path=False)
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child of the package logger, configuring the root on first use."""
    configure_logger()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
