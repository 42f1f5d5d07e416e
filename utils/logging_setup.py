"""Loguru sink configuration."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from utils.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_FILE,
    LOG_LEVELS,
    LOG_RETENTION,
    LOG_ROTATION,
)

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "{name}:{function}:{line} | {message}"
)


def configure_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Path | None = None,
    enable_file: bool = True,
) -> list[int]:
    """
    Replace loguru's default sink with a console sink and a rotating file sink.

    Args:
        level: Minimum level for the console sink; unknown names fall back to INFO
        log_file: File sink path (defaults to logs/deck_odds.log)
        enable_file: Whether to add the file sink

    Returns:
        Handler ids of the added sinks
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        level = DEFAULT_LOG_LEVEL

    logger.remove()
    handler_ids = [logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)]

    if enable_file:
        path = log_file or LOG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                path,
                level="DEBUG",
                rotation=LOG_ROTATION,
                retention=LOG_RETENTION,
                encoding="utf-8",
            )
        )
    return handler_ids


__all__ = ["configure_logging"]
