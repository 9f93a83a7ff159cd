from __future__ import annotations

import sys

from loguru import logger

_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = "INFO") -> None:
    """Replace loguru's default handler with a formatted stderr sink."""
    logger.remove()
    try:
        logger.add(sys.stderr, level=level.upper(), format=_FORMAT)
    except ValueError:
        # Unknown level name in config
        logger.add(sys.stderr, level="INFO", format=_FORMAT)
        logger.warning("Unknown log level {!r}, using INFO", level)
    logger.debug("Logging initialized at {}", level)
