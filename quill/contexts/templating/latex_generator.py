"""
LaTeX Generator

Converts a ResumeData value into a complete, compilable LaTeX document.

Every user-supplied string reaches the output through a Jinja2 variable and is
escaped exactly once by the registry's finalize hook. Pre-rendered fragments
and structural literals are wrapped in NoEscape so they are not escaped again.
"""

import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import TemplateError
from omegaconf import DictConfig

from quill.contexts.authoring.resume_data_structure import (
    Education,
    Experience,
    Profile,
    Project,
    ResumeData,
    Skill,
)
from quill.contexts.templating.exceptions import TemplateRenderError
from quill.contexts.templating.latex_patterns import (
    ContactFieldPatterns,
    DatePatterns,
    SectionNames,
)
from quill.contexts.templating.logger import (
    _log_debug,
    _log_info,
    log_export_result,
    setup_templating_logger,
)
from quill.contexts.templating.registries import TemplateRegistry
from quill.utils.config import load_settings
from quill.utils.latex_tools import NoEscape, escape_url
from quill.utils.text_processing import (
    ensure_url,
    is_blank,
    non_blank_lines,
    prepend_without_overlap,
    set_max_consecutive_blank_lines,
)
from quill.utils.timestamp import now

EXPORT_FILENAME = "resume.tex"
EXPORT_MIME_TYPE = "text/plain"


class ResumeToLaTeXConverter:
    """Converts a ResumeData value to LaTeX using the section type templates."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or TemplateRegistry()

    def _render(self, type_name: str, template, **context: Any) -> str:
        """Render a loaded template, wrapping Jinja2 failures in TemplateRenderError."""
        try:
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render '{type_name}'",
                type_name=type_name,
                template_path=Path(template.filename) if template.filename else None,
                original_error=e,
            ) from e

    def _render_type(self, type_name: str, **context: Any) -> str:
        template = self.template_registry.get_template(type_name)
        return self._render(type_name, template, **context)

    @staticmethod
    def _end_display(end_date: str, current: bool) -> str:
        # The stored end_date is ignored while the entry is current
        return DatePatterns.PRESENT_MARKER if current else end_date

    def _contact_items(self, profile: Profile) -> List[Dict[str, str]]:
        """
        Build heading contact items in display order, skipping empty fields.

        Email and phone link through mailto:/tel:, website and linkedin through
        https:// unless the value already carries a scheme. Location, and URLs
        with a scheme ensure_url() rejects, are plain text. Links are escaped
        with escape_url(), shown text by the registry.
        """
        prefixes = dict(ContactFieldPatterns.LINK_PREFIXES)
        items = []
        for field_name in ContactFieldPatterns.ORDER:
            value = getattr(profile, field_name)
            if is_blank(value):
                continue
            value = value.strip()

            link = None
            if field_name in prefixes:
                target = value.replace(" ", "") if field_name == "phone" else value
                link = prepend_without_overlap(prefixes[field_name], target)
            elif field_name in ContactFieldPatterns.URL_FIELDS:
                link = ensure_url(value)

            items.append(
                {"field": field_name, "text": value, "link": escape_url(link) if link else None}
            )
        return items

    def convert_heading(self, profile: Profile) -> str:
        """
        Convert the profile to the centered name and contact block.

        The line break after the name is only emitted when there is a name.

        Args:
            profile: Resume profile

        Returns:
            LaTeX string for the heading
        """
        return self._render_type(
            "heading",
            full_name=profile.full_name.strip(),
            contacts=self._contact_items(profile),
        )

    def convert_summary(self, summary: str) -> str:
        """Convert the profile summary paragraph."""
        return self._render_type("summary", summary=summary.strip())

    def convert_work_history(self, experience: List[Experience]) -> str:
        """
        Convert experience entries to an itemize of role/company blocks.

        Each non-blank description line becomes its own nested \\item{}; the
        empty group keeps a line starting with [ from being read as the
        item label.

        Args:
            experience: Experience entries in display order

        Returns:
            LaTeX string for the experience list (balanced even when empty)
        """
        entries = [
            {
                "role": exp.role,
                "company": exp.company,
                "start_date": exp.start_date,
                "end_display": self._end_display(exp.end_date, exp.current),
                "lines": non_blank_lines(exp.description),
            }
            for exp in experience
        ]
        return self._render_type(
            "work_history",
            entries=entries,
            separator=NoEscape(DatePatterns.RANGE_SEPARATOR),
        )

    def convert_education(self, education: List[Education]) -> str:
        """
        Convert education entries to an itemize of school/credential blocks.

        The credential line joins degree and field with " in ", skipping
        whichever is empty.
        """
        entries = [
            {
                "school": edu.school,
                "credential": " in ".join(
                    part for part in (edu.degree, edu.field) if not is_blank(part)
                ),
                "start_date": edu.start_date,
                "end_display": self._end_display(edu.end_date, edu.current),
            }
            for edu in education
        ]
        return self._render_type(
            "education",
            entries=entries,
            separator=NoEscape(DatePatterns.RANGE_SEPARATOR),
        )

    def convert_projects(self, projects: List[Project]) -> str:
        """
        Convert projects to an itemize of name, optional link and description.

        A link whose URL is rejected by ensure_url() is kept as plain text.
        """
        rendered = [
            {
                "name": project.name,
                "link": project.link.strip(),
                "url": escape_url(ensure_url(project.link)),
                "description": project.description.strip(),
            }
            for project in projects
        ]
        return self._render_type("projects", projects=rendered)

    def convert_skills(self, skills: List[Skill]) -> str:
        """
        Convert skills to a single comma-separated line.

        Proficiency levels are kept in the data but not shown.
        """
        names = ", ".join(skill.name for skill in skills if not is_blank(skill.name))
        return self._render_type("skills", skills=names)

    def _generate_section(self, name: str, content: str) -> str:
        """Wrap a rendered fragment in a \\section block."""
        wrapper = self.template_registry.get_wrapper("section_wrapper")
        return self._render(
            "section_wrapper",
            wrapper,
            banner=NoEscape(name.upper()),
            name=NoEscape(name),
            content=NoEscape(content.rstrip("\n")),
        )

    def generate_preamble(self, profile: Profile) -> str:
        """
        Generate the document preamble.

        Args:
            profile: Profile whose name fills the PDF metadata

        Returns:
            LaTeX preamble string
        """
        template = self.template_registry.get_structure("preamble")
        return self._render(
            "preamble",
            template,
            title=f"{profile.full_name} Resume".strip(),
            author=profile.full_name,
        )

    def generate_sections(self, data: ResumeData) -> List[str]:
        """
        Render every body section in document order.

        Summary is left out when blank; the list sections are always present.
        """
        sections = []
        if not is_blank(data.profile.summary):
            sections.append((SectionNames.SUMMARY, self.convert_summary(data.profile.summary)))
        sections.append((SectionNames.EXPERIENCE, self.convert_work_history(data.experience)))
        sections.append((SectionNames.EDUCATION, self.convert_education(data.education)))
        sections.append((SectionNames.PROJECTS, self.convert_projects(data.projects)))
        sections.append((SectionNames.SKILLS, self.convert_skills(data.skills)))

        _log_debug(f"Rendered sections: {[name for name, _ in sections]}")
        return [NoEscape(self._generate_section(name, content)) for name, content in sections]

    def generate_document(self, data: ResumeData) -> str:
        """
        Generate the complete LaTeX document.

        Args:
            data: Resume to export (read only)

        Returns:
            Complete LaTeX document string
        """
        template = self.template_registry.get_structure("document")
        generated_latex = self._render(
            "document",
            template,
            preamble=NoEscape(self.generate_preamble(data.profile).rstrip("\n")),
            heading=NoEscape(self.convert_heading(data.profile).rstrip("\n")),
            sections=self.generate_sections(data),
        )

        return set_max_consecutive_blank_lines(generated_latex, max_consecutive=1)


_default_converter: Optional[ResumeToLaTeXConverter] = None


def _get_default_converter() -> ResumeToLaTeXConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = ResumeToLaTeXConverter()
    return _default_converter


def export_document(data: ResumeData) -> str:
    """
    Export a resume as a complete LaTeX document.

    Pure and deterministic: the same data always yields the same text, and the
    data is never modified.

    Args:
        data: Resume to export

    Returns:
        LaTeX source text
    """
    return _get_default_converter().generate_document(data)


def write_export(data: ResumeData, output_dir: Path, filename: str = None) -> Path:
    """
    Export a resume and write it to output_dir.

    Args:
        data: Resume to export
        output_dir: Directory for the .tex file (created if missing)
        filename: Output file name (default: resume.tex)

    Returns:
        Path to the written file
    """
    start = time.time()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / (filename or EXPORT_FILENAME)

    latex = export_document(data)
    output_path.write_text(latex, encoding="utf-8")

    _log_info(f"Wrote export for '{data.profile.full_name or 'untitled'}'")
    log_export_result(output_path, len(latex), time.time() - start)
    return output_path


def export_resume(
    data: ResumeData, output_dir: Path, settings: Optional[DictConfig] = None
) -> Path:
    """
    Write the export in its own logging session.

    Creates a timestamped log directory under logs_path, then writes
    export.filename to output_dir.

    Args:
        data: Resume to export
        output_dir: Directory for the .tex file
        settings: Settings to use (default: load_settings())

    Returns:
        Path to the written file
    """
    settings = settings or load_settings()
    log_dir = Path(settings.logs_path) / f"export_{now()}"
    setup_templating_logger(log_dir, settings.export.filename)
    return write_export(data, output_dir, settings.export.filename)
