"""
Logging configuration using Loguru.

Provides colorized console logging and, outside debug mode, a rotating
file sink.
"""
import sys
from pathlib import Path
from loguru import logger

from sdui_service.config import settings


def setup_logging() -> None:
    """
    Configure loguru logger with appropriate handlers and formatting.

    Development mode:
    - Colorized console output
    - Detailed format with file:line info

    Production mode:
    - Plain console output (for container logs)
    - File output with rotation
    """

    # Remove default handler
    logger.remove()

    # Development format: colorized, detailed
    dev_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    # Production format: structured, parseable
    prod_format = (
        "{time:YYYY-MM-DD HH:mm:ss} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message}"
    )

    # Console handler (always enabled)
    logger.add(
        sys.stdout,
        format=dev_format if settings.debug else prod_format,
        level=settings.log_level,
        colorize=settings.debug,
        backtrace=settings.debug,
        diagnose=settings.debug,
    )

    # File handler (production only)
    if not settings.debug:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(exist_ok=True)

        logger.add(
            log_dir / "sdui-service.log",
            format=prod_format,
            level="INFO",
            rotation="100 MB",
            retention="10 days",
            compression="zip",
            enqueue=True,
        )

    logger.info(f"Logging configured - Level: {settings.log_level}")
    logger.debug(f"Debug mode: {settings.debug}")
