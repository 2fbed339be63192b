"""
Base class for resume layouts.

Every layout renders the same ResumeData into a Node tree. The structural rules
all layouts share live here so each layout only decides arrangement and styling:

- Summary is omitted when blank, Skills when there are no skills and Projects
  when there are no projects; Experience and Education are always present
- Each section is <section data-section=KIND> whose first child is its heading
- A current entry shows the layout's present marker instead of its end date
- Descriptions become one data-role="line" node per line, verbatim
- Contact items are emitted one by one, only when non-empty
- Entries keep their stored order and ids never appear in the output
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from quill.contexts.authoring.resume_data_structure import (
    Education,
    Experience,
    Profile,
    Project,
    ResumeData,
    Skill,
)
from quill.contexts.rendering.document_tree import Node, element
from quill.utils.text_processing import ensure_url, is_blank, prepend_without_overlap, split_lines

SUMMARY = "summary"
EXPERIENCE = "experience"
EDUCATION = "education"
SKILLS = "skills"
PROJECTS = "projects"

CONTACT_FIELDS = ("email", "phone", "location", "website", "linkedin")


class Layout(ABC):
    """
    Abstract base class for resume layouts.

    Subclasses set name, theme, present_marker and date_separator, and
    implement compose() to arrange sections with the shared builders below.
    """

    name: str = ""
    theme: str = ""
    present_marker: str = "Present"
    date_separator: str = "-"
    # Contact fields shown in the header, in display order
    contact_fields: Sequence[str] = ("email", "phone", "location")

    def render(self, data: ResumeData) -> Node:
        """
        Render resume data to a document tree.

        Args:
            data: Resume to render (never modified)

        Returns:
            Root Node of the document
        """
        return element(
            "article",
            self.compose(data),
            class_name=f"resume theme-{self.theme}",
            data_template=self.name,
        )

    @abstractmethod
    def compose(self, data: ResumeData) -> List[Optional[Node]]:
        """Return the top-level children of the document (None entries are dropped)."""
        pass

    # ---- Shared formatting ----

    def date_range(self, start_date: str, end_date: str, current: bool) -> str:
        """
        Format an entry's date range.

        The stored end date is hidden while the entry is current.

        Example:
            >>> ClassicLayout().date_range("2021", "2030", True)
            '2021 - Present'
        """
        end = self.present_marker if current else end_date
        return f"{start_date} {self.date_separator} {end}"

    def section(self, kind: str, heading: str, *children, class_name: Optional[str] = None,
                heading_tag: str = "h2", heading_class: Optional[str] = None) -> Node:
        """Build a section node whose first child is its heading."""
        return element(
            "section",
            element(heading_tag, heading, class_name=heading_class, data_role="heading"),
            *children,
            class_name=class_name,
            data_section=kind,
        )

    def description(self, text: str, class_name: Optional[str] = None) -> Optional[Node]:
        """
        Split a free-text description into one line node per line.

        Returns None for empty text. Lines are kept verbatim, blank ones included.
        """
        lines = split_lines(text)
        if not lines:
            return None
        return element(
            "div",
            [element("p", line, data_role="line") for line in lines],
            class_name=class_name,
            data_role="description",
        )

    def contact_item(self, profile: Profile, field_name: str, label: Optional[str] = None,
                     tag: str = "span", class_name: Optional[str] = None) -> Optional[Node]:
        """
        Build one contact item, or None when the field is empty.

        Email, website and linkedin are rendered as links. label replaces the
        shown text (e.g., "LinkedIn") but never the link target.
        """
        value = getattr(profile, field_name)
        if is_blank(value):
            return None

        text = label if label is not None else value
        href = None
        if field_name == "email":
            href = prepend_without_overlap("mailto:", value.strip())
        elif field_name in ("website", "linkedin"):
            href = ensure_url(value) or None

        content = element("a", text, href=href) if href else text
        return element(tag, content, class_name=class_name, data_contact=field_name)

    def contacts(self, profile: Profile, tag: str = "span", class_name: Optional[str] = None,
                 labels: Optional[dict] = None) -> List[Optional[Node]]:
        """Contact items for this layout's contact_fields, empty ones omitted."""
        labels = labels or {}
        return [
            self.contact_item(profile, field_name, labels.get(field_name), tag, class_name)
            for field_name in self.contact_fields
        ]

    # ---- Shared sections ----

    def summary_section(self, profile: Profile, heading: str, **section_kwargs) -> Optional[Node]:
        """Summary paragraph, or None when the summary is blank."""
        if is_blank(profile.summary):
            return None
        return self.section(
            SUMMARY,
            heading,
            element("p", profile.summary, data_role="summary"),
            **section_kwargs,
        )

    def experience_section(self, experience: Sequence[Experience], heading: str,
                           entry: Callable[[Experience], Node], **section_kwargs) -> Node:
        """Experience section; always present, even with no entries."""
        return self.section(EXPERIENCE, heading, [entry(exp) for exp in experience],
                            **section_kwargs)

    def education_section(self, education: Sequence[Education], heading: str,
                          entry: Callable[[Education], Node], **section_kwargs) -> Node:
        """Education section; always present, even with no entries."""
        return self.section(EDUCATION, heading, [entry(edu) for edu in education],
                            **section_kwargs)

    def skills_section(self, skills: Sequence[Skill], heading: str,
                       body: Callable[[Sequence[Skill]], Node], **section_kwargs) -> Optional[Node]:
        """Skills section, or None when there are no skills."""
        if not skills:
            return None
        return self.section(SKILLS, heading, body(skills), **section_kwargs)

    def projects_section(self, projects: Sequence[Project], heading: str,
                         entry: Optional[Callable[[Project], Node]] = None,
                         **section_kwargs) -> Optional[Node]:
        """Projects section, or None when there are no projects."""
        if not projects:
            return None
        entry = entry or self.project_entry
        return self.section(PROJECTS, heading, [entry(project) for project in projects],
                            **section_kwargs)

    # ---- Shared entry builders ----

    def skill_tags(self, skills: Sequence[Skill], class_name: str = "skill-tag") -> Node:
        """One tag per skill. Levels are not shown."""
        return element(
            "div",
            [element("span", skill.name, class_name=class_name, data_role="skill")
             for skill in skills],
            class_name="skill-tags",
        )

    def skill_list(self, skills: Sequence[Skill], class_name: Optional[str] = None) -> Node:
        return element(
            "ul",
            [element("li", skill.name, data_role="skill") for skill in skills],
            class_name=class_name,
        )

    def joined_skills(self, skills: Sequence[Skill], separator: str,
                      class_name: Optional[str] = None) -> Node:
        """Skill names joined into a single line of text."""
        return element(
            "p",
            separator.join(skill.name for skill in skills),
            class_name=class_name,
            data_role="skills",
        )

    def credential(self, education: Education) -> str:
        """Degree and field joined with ' in ', skipping whichever is empty."""
        return " in ".join(
            part for part in (education.degree, education.field) if not is_blank(part)
        )

    def project_entry(self, project: Project) -> Node:
        """Default project entry: name, optional link, description."""
        link = None
        if not is_blank(project.link):
            link = element(
                "a",
                project.link,
                href=ensure_url(project.link) or None,
                data_role="project-link",
            )
        return element(
            "div",
            element("h3", project.name, data_role="title"),
            link,
            self.description(project.description),
            class_name="project",
            data_role="entry",
        )
