"""
Session logger setup shared by the contexts.

Each session (an export, a compile run) gets its own directory with one log
file, plus colorized console output. Console output goes to stderr so that
commands printing documents to stdout stay pipeable.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Console level; the log file always records DEBUG and above
CONSOLE_LEVEL = (os.getenv("QUILL_LOG_LEVEL") or "INFO").upper()

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    console_level: Optional[str] = None,
) -> Path:
    """
    Route loguru output to a session log file and the console.

    Replaces any handlers installed earlier, so the most recent session owns
    the log file.

    Args:
        context_name: Context identifier, used as the log file name ("render", "template")
        log_dir: Directory for this session (created if missing)
        extra_provenance: Extra key-value pairs for the provenance header
        console_level: Console threshold (default: QUILL_LOG_LEVEL or INFO)

    Returns:
        Path to log file

    Example:
        from quill.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="template",
            log_dir=Path("outs/logs/export_20251114_123456"),
            extra_provenance={"Output": "resume.tex"}
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=console_level or CONSOLE_LEVEL,
        colorize=True,
    )

    log_provenance(context_name, extra_provenance)
    return log_file


def log_provenance(context_name: str, extra_context: Optional[dict] = None) -> None:
    """
    Write the provenance header of a session to the log file only.

    Records the QUILL version, the command line, the working directory and
    the Python version, plus any extra_context pairs.
    """
    from quill import __version__

    lines = [
        f"QUILL {__version__} ({context_name})",
        f"Command: {' '.join(sys.argv)}",
        f"Working directory: {Path.cwd()}",
        f"Python: {sys.version.split()[0]}",
    ]
    if extra_context:
        lines.extend(f"{key}: {value}" for key, value in extra_context.items())

    logger.debug("=" * 80)
    for line in lines:
        logger.debug(line)
    logger.debug("=" * 80)
