"""
Logging configuration for the WAR API Service.
"""
import os
import sys
from loguru import logger

from war_api.core.config import settings


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging():
    """Configure logging for the application."""
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=settings.LOG_LEVEL
    )

    # File sink only when a log directory is configured
    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        logger.add(
            os.path.join(settings.LOG_DIR, "war_api.log"),
            rotation="10 MB",
            retention="7 days",
            level=settings.LOG_LEVEL,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )

    return logger
