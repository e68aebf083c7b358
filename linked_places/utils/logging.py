"""Loguru setup: coloured stderr output, plus an optional log file."""

import os
import sys
from pathlib import Path

from loguru import logger

from linked_places.config import settings


def setup_logging(level: str | None = None, log_file: Path | None = None) -> None:
    """
    Route transformer logs to stderr and, if configured, to a file.

    Args:
        level: Log level, defaults to LP_LOG_LEVEL
        log_file: File to append to, defaults to LP_LOG_FILE
    """
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        colorize=True,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}",
        )


if os.environ.get("DISABLE_LOGGING") != "1":
    setup_logging()
