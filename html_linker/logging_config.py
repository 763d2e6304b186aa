"""
Logging configuration.

Library modules log through ``loguru.logger`` and never touch handlers;
entry points call ``setup_logging`` once.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(
    log_level: str = "INFO",
    log_file: str | None = None,
    serialize: bool = False,
) -> None:
    """
    Setup pipeline logging.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        serialize: Emit JSON records instead of formatted lines
    """
    level = log_level.upper()

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        serialize=serialize,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=level,
            rotation="10 MB",
            retention="7 days",
            encoding="utf-8",
            serialize=serialize,
        )

    logger.debug(f"Logging configured: level={level}, file={log_file}, serialize={serialize}")
