"""Logging configuration."""

import logging
import sys

from search_dsl.config import get_settings


def setup_logging() -> None:
    """Configure logging for an application embedding search_dsl.

    The library itself only emits through module loggers; call this once
    from the application's entry point to get them on stdout.
    """
    settings = get_settings()

    logging.basicConfig(
        level="DEBUG" if settings.debug else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        logging.Logger: Configured logger instance.
    """
    return logging.getLogger(name)
