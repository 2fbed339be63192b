"""
Text processing utilities shared by rendering and export.
"""

import re
from typing import List


def split_lines(text: str) -> List[str]:
    """
    Split multi-line free text into display lines.

    Accepts \\n, \\r\\n and \\r line breaks. Lines are returned verbatim
    (no trimming), so blank lines in the middle survive.

    Example:
        >>> split_lines("Did X\\r\\nDid Y")
        ['Did X', 'Did Y']
        >>> split_lines("")
        []
    """
    if not text:
        return []
    return re.split(r"\r\n|\r|\n", text)


def non_blank_lines(text: str) -> List[str]:
    """
    Split text into lines, dropping lines that are empty or whitespace-only.

    Example:
        >>> non_blank_lines("Did X\\n\\n  \\nDid Y ")
        ['Did X', 'Did Y']
    """
    return [line.strip() for line in split_lines(text) if line.strip()]


def is_blank(text: str) -> bool:
    """True for None, empty or whitespace-only strings."""
    return not text or not text.strip()


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Args:
        content: The text content to normalize
        max_consecutive: Maximum number of consecutive blank lines to allow.
                        Use 0 to remove all blank lines, 1 for standard
                        normalization (default: 1)

    Returns:
        Content with normalized blank lines

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=0)
        'text\\nmore'
    """
    if max_consecutive == 0:
        pattern = r"\n\s*\n(\s*\n)*"
    else:
        # Only runs of 2+ blank lines
        pattern = r"\n\s*\n(\s*\n)+"

    replacement = "\n" * (max_consecutive + 1)

    return re.sub(pattern, replacement, content)


def prepend_without_overlap(prefix: str, value: str) -> str:
    """
    Prepend prefix to value unless value already starts with it.

    Example:
        >>> prepend_without_overlap("mailto:", "a@b.c")
        'mailto:a@b.c'
        >>> prepend_without_overlap("https://", "https://x.dev")
        'https://x.dev'
    """
    if value.startswith(prefix):
        return value
    return prefix + value


SAFE_URL_SCHEMES = ("http", "https", "mailto", "tel")

# "name:" followed by anything but a port number
_SCHEME = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*):(?!\d)")


def ensure_url(value: str) -> str:
    """
    Turn a bare host/path into an https URL.

    Values with an http, https, mailto or tel scheme are kept. Any other
    scheme (javascript:, data:, file:, ...) is not linkable and yields "".

    Example:
        >>> ensure_url("linkedin.com/in/alex")
        'https://linkedin.com/in/alex'
        >>> ensure_url("http://alex.dev")
        'http://alex.dev'
        >>> ensure_url("javascript://alert(1)")
        ''
    """
    value = value.strip()
    if not value:
        return ""
    match = _SCHEME.match(value)
    if match:
        return value if match.group(1).lower() in SAFE_URL_SCHEMES else ""
    return prepend_without_overlap("https://", value)
