"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from quill.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, filename: str) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this export session
        filename: Export file name recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Export": filename},
    )


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_export_result(output_path: Path, num_chars: int, elapsed_time: float) -> None:
    """Log the outcome of writing an export file."""
    _log_success(f"Exported LaTeX ({num_chars} chars, {elapsed_time:.3f}s)")
    _log_info(f"  Output: {output_path}")
