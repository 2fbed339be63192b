"""
Authoring context logger.

Provides logging interface for authoring context with automatic [author] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[author]"


def _log_info(message: str) -> None:
    """Log info message with [author] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [author] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
