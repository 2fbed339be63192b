"""
Shared utilities for QUILL.

Common functionality used across contexts:
- LaTeX escaping
- Text processing
- Configuration and logging
- LLM providers
"""

from quill.utils.config import load_settings
from quill.utils.latex_tools import escape_latex, to_plaintext
from quill.utils.timestamp import now

__all__ = ["escape_latex", "load_settings", "now", "to_plaintext"]
