"""
LaTeX Pattern Constants

Structural LaTeX literals used by the export templates and by tests that check
the generated document. Organized into frozen dataclasses by category.
These are implementation-fixed text and are never escaped.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class DocumentPatterns:
    """Document-level boundaries."""

    DOCUMENT_CLASS: str = r"\documentclass[letterpaper,11pt]{article}"
    BEGIN_DOCUMENT: str = r"\begin{document}"
    END_DOCUMENT: str = r"\end{document}"


@dataclass(frozen=True)
class EnvironmentPatterns:
    """List and table environments used by section fragments."""

    BEGIN_ITEMIZE: str = r"\begin{itemize}"
    END_ITEMIZE: str = r"\end{itemize}"
    BEGIN_TABULAR: str = r"\begin{tabular*}"
    END_TABULAR: str = r"\end{tabular*}"
    ITEM: str = r"\item"
    # Placeholder keeping an empty list compilable
    EMPTY_ITEM: str = r"\item[]"


@dataclass(frozen=True)
class SectionNames:
    """Section headings of the exported document, in output order."""

    SUMMARY: str = "Summary"
    EXPERIENCE: str = "Experience"
    EDUCATION: str = "Education"
    PROJECTS: str = "Projects"
    SKILLS: str = "Skills"

    @classmethod
    def all(cls) -> List[str]:
        """Return section names in document order."""
        return [cls.SUMMARY, cls.EXPERIENCE, cls.EDUCATION, cls.PROJECTS, cls.SKILLS]


@dataclass(frozen=True)
class DatePatterns:
    """Date range formatting for the export."""

    PRESENT_MARKER: str = "Present"
    RANGE_SEPARATOR: str = "--"


@dataclass(frozen=True)
class ContactFieldPatterns:
    """
    Contact fields shown in the heading, in display order.

    LINK_PREFIXES maps a field to the scheme prepended to build its link;
    fields not listed are shown as plain text.
    """

    ORDER: tuple = ("email", "phone", "location", "website", "linkedin")
    LINK_PREFIXES: tuple = (("email", "mailto:"), ("phone", "tel:"))
    URL_FIELDS: tuple = ("website", "linkedin")
