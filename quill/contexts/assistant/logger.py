"""
Assistant context logger.

Provides logging interface for assistant context with automatic [assist] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[assist]"


def _log_info(message: str) -> None:
    """Log info message with [assist] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [assist] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [assist] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")
