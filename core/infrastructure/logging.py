"""
Logging infrastructure.

Provides logging utilities for the enrichment layer.
"""
import logging

from core.settings import get_app_settings


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    The level comes from MONITOR_LOG_LEVEL the first time a logger
    with this name is configured.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(get_app_settings().log_level)
    return logger
