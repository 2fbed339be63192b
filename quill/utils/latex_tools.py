"""
LaTeX text helpers.

escape_latex() makes raw user text safe to embed as literal text in a LaTeX
document. It is built as an ordered list of substitution passes; the order is
part of the contract:

1. drop unrepresentable characters, replace characters the fonts cannot set
2. park every backslash behind a sentinel
3. prefix reserved punctuation (& % $ # _ { }) with a backslash
4. spell out ~ and ^ (their escaped forms contain braces, so after pass 3)
5. turn the sentinel into \\textbackslash{} (also contains braces, so last)

Escaping is not idempotent: escaping escaped text escapes it again. Callers
escape raw user text exactly once.

escape_url() is the separate, smaller escape for \\href targets.
"""

import re
import unicodedata
from typing import Callable, List, Tuple
from urllib.parse import quote

# Never survives pass 1, since control characters are dropped before it is inserted
_BACKSLASH_SENTINEL = "\x00"

# Control characters LaTeX source can carry as whitespace
_KEPT_CONTROL_CHARS = {"\n", "\r", "\t"}

# Shown instead of characters pdflatex with T1/TS1 fonts has no glyph for
UNTYPESETTABLE_PLACEHOLDER = "?"

# Beyond ASCII and Latin-1: Latin Extended-A letters T1 covers, plus the
# punctuation and symbols inputenc maps to T1/TS1 glyphs
_TYPESETTABLE_EXTRA = frozenset(
    [chr(code) for code in range(0x0100, 0x0180) if code not in (0x0138, 0x0149, 0x017F)]
    + [
        "–",  # en dash
        "—",  # em dash
        "‘", "’", "‚", "“", "”", "„",  # quotes
        "†", "‡",  # daggers
        "•",  # bullet
        "…",  # ellipsis
        "‰",  # per mille
        "‹", "›",  # single guillemets
        "€",  # euro
        "™",  # trademark
    ]
)

RESERVED_PUNCTUATION = "&%$#_{}"

SPELLED_OUT = {
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

BACKSLASH_LITERAL = r"\textbackslash{}"


def _drop_unrepresentable(text: str) -> str:
    return "".join(
        ch
        for ch in text
        if ch in _KEPT_CONTROL_CHARS or unicodedata.category(ch) not in ("Cc", "Cs")
    )


def is_typesettable(char: str) -> bool:
    """True if the document's pdflatex font setup can print char."""
    return ord(char) <= 0xFF or char in _TYPESETTABLE_EXTRA


def _replace_untypesettable(text: str) -> str:
    return "".join(
        ch if is_typesettable(ch) else UNTYPESETTABLE_PLACEHOLDER for ch in text
    )


def _park_backslashes(text: str) -> str:
    return text.replace("\\", _BACKSLASH_SENTINEL)


def _escape_reserved_punctuation(text: str) -> str:
    for char in RESERVED_PUNCTUATION:
        text = text.replace(char, "\\" + char)
    return text


def _spell_out_operators(text: str) -> str:
    for char, literal in SPELLED_OUT.items():
        text = text.replace(char, literal)
    return text


def _restore_backslashes(text: str) -> str:
    return text.replace(_BACKSLASH_SENTINEL, BACKSLASH_LITERAL)


# Order matters, see module docstring
ESCAPE_PASSES: List[Tuple[str, Callable[[str], str]]] = [
    ("drop_unrepresentable", _drop_unrepresentable),
    ("replace_untypesettable", _replace_untypesettable),
    ("park_backslashes", _park_backslashes),
    ("escape_reserved_punctuation", _escape_reserved_punctuation),
    ("spell_out_operators", _spell_out_operators),
    ("restore_backslashes", _restore_backslashes),
]


def escape_latex(raw: str) -> str:
    """
    Escape raw text for literal use inside a LaTeX document.

    Total function: never raises for string input. Characters LaTeX cannot
    carry (control characters other than newline, carriage return and tab,
    lone surrogates) are dropped. Characters the fonts have no glyph for
    (emoji, CJK, arrows and other symbols) become UNTYPESETTABLE_PLACEHOLDER.

    Conversions:
    - \\ -> \\textbackslash{}
    - & % $ # _ { } -> \\& \\% \\$ \\# \\_ \\{ \\}
    - ~ -> \\textasciitilde{}
    - ^ -> \\textasciicircum{}

    Args:
        raw: Plain user text

    Returns:
        LaTeX-safe string

    Example:
        >>> escape_latex("AI & Machine Learning")
        'AI \\\\& Machine Learning'
        >>> escape_latex("C:\\\\temp")
        'C:\\\\textbackslash{}temp'
    """
    if not raw:
        return ""

    result = raw
    for _name, substitution in ESCAPE_PASSES:
        result = substitution(result)
    return result


class NoEscape(str):
    """
    String that is already LaTeX: structural literals and pre-rendered fragments.

    finalize_latex() passes these through untouched.
    """

    pass


def finalize_latex(value) -> str:
    """
    Jinja2 finalize hook: escape every interpolated value exactly once.

    NoEscape values are emitted as-is, None becomes an empty string, anything
    else is converted with str() and escaped.
    """
    if value is None:
        return ""
    if isinstance(value, NoEscape):
        return value
    return escape_latex(str(value))


_ESCAPED_SEQUENCE = re.compile(
    r"\\textbackslash\{\}|\\textasciitilde\{\}|\\textasciicircum\{\}|\\([&%$#_{}])"
)

_UNESCAPED = {
    BACKSLASH_LITERAL: "\\",
    SPELLED_OUT["~"]: "~",
    SPELLED_OUT["^"]: "^",
}


def to_plaintext(latex_str: str) -> str:
    """
    Convert text produced by escape_latex() back to the characters it shows.

    Only the sequences escape_latex() emits are recognized; everything else
    passes through. Useful for checking what a reader of the compiled
    document will see.

    Example:
        >>> to_plaintext(escape_latex("100% & co. #1"))
        '100% & co. #1'
    """
    if not latex_str:
        return ""

    def _replace(match: re.Match) -> str:
        if match.group(1) is not None:
            return match.group(1)
        return _UNESCAPED[match.group(0)]

    return _ESCAPED_SEQUENCE.sub(_replace, latex_str)


def has_bare_reserved_characters(latex_str: str) -> bool:
    """
    True if latex_str contains a reserved character outside an escape sequence.

    Checks & % $ # _ ~ ^ and braces that do not belong to one of the sequences
    escape_latex() produces.
    """
    stripped = _ESCAPED_SEQUENCE.sub("", latex_str)
    return any(char in stripped for char in RESERVED_PUNCTUATION + "~^\\")


# Characters \href can take literally; everything else is percent-encoded
_URL_SAFE = "/:?#[]@!$&'()*+,;=%"


def escape_url(url: str) -> NoEscape:
    """
    Escape a link target for the first argument of \\href.

    Spaces, backslashes, braces and non-ASCII characters are percent-encoded;
    then only % and # get a backslash. Other characters, ~ and _ included,
    stay literal because hyperref reads them as part of the URL.

    Example:
        >>> escape_url("https://jo.dev/~home#top")
        'https://jo.dev/~home\\\\#top'
    """
    if not url:
        return NoEscape("")
    encoded = quote(_drop_unrepresentable(url), safe=_URL_SAFE)
    return NoEscape(encoded.replace("%", "\\%").replace("#", "\\#"))
