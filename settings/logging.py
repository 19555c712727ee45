"""Logging configuration for the taxonomy service and its admin tools."""

import logging
import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {thread.name} | {name}:{function}:{line} | {message}"

# Per-request logs of these libraries drown search and cache logs
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True):
    """Console sink at level; with to_file, a daily DEBUG log and a WARNING+ log under LOG_DIR."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "taxonomy_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
            enqueue=True,
        )
        logger.add(
            LOG_DIR / "taxonomy_errors.log",
            format=FILE_FORMAT,
            level="WARNING",
            rotation="10 MB",
            retention=5,
            enqueue=True,
        )
        logger.info("Logging to {} (console level {})", LOG_DIR, level.upper())

    return logger
