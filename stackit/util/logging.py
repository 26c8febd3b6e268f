"""Logging configuration for the application."""

import logging
import sys

from stackit.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the process.

    Logfire handles structured application logs; this covers uvicorn,
    SQLAlchemy and anything else that logs through the standard library.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Third-party noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger("stackit").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
