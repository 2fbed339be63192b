"""
PDF helpers for compiled exports.
"""

from pathlib import Path
from typing import Optional

from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except (OSError, PdfReadError):
        return None
