"""Logging utilities tailored for crossword construction."""

from __future__ import annotations

import logging
from typing import Optional


PACKAGE_LOGGER = "crossword_builder"
# Per-attempt placement chatter lives under this namespace.
ENGINE_LOGGER = f"{PACKAGE_LOGGER}.engine"

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: int = logging.INFO, engine_level: Optional[int] = None) -> None:
    """Install one stream handler on the root logger.

    The engine performs many discarded placement attempts, so per-attempt
    messages are emitted at DEBUG and phase summaries at INFO. ``engine_level``
    tunes the ``crossword_builder.engine`` loggers separately, e.g. to keep
    DEBUG output for the word list loader while silencing the placement loop.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger(ENGINE_LOGGER).setLevel(
        engine_level if engine_level is not None else logging.NOTSET
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``crossword_builder`` namespace."""

    if not logging.getLogger().handlers:
        configure_logging()
    if not name:
        return logging.getLogger(PACKAGE_LOGGER)
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
