"""Modern layout: sans-serif with blue accents, two-thirds / one-third grid."""

from quill.contexts.authoring.resume_data_structure import Education, Experience, ResumeData
from quill.contexts.rendering.base import Layout
from quill.contexts.rendering.document_tree import element


class ModernLayout(Layout):
    name = "modern"
    theme = "modern"
    present_marker = "Present"
    date_separator = "-"
    contact_fields = ("email", "phone", "location", "linkedin")

    def _experience_entry(self, exp: Experience):
        meta = f"{exp.company} | {self.date_range(exp.start_date, exp.end_date, exp.current)}"
        return element(
            "div",
            element("span", class_name="timeline-dot"),
            element("h4", exp.role, data_role="title"),
            element("div", meta, class_name="accent", data_role="dates"),
            self.description(exp.description),
            class_name="entry timeline",
            data_role="entry",
        )

    def _education_entry(self, edu: Education):
        return element(
            "div",
            element("div", edu.school, class_name="school", data_role="title"),
            element("div", self.credential(edu), data_role="credential"),
            element("div", self.date_range(edu.start_date, edu.end_date, edu.current),
                    class_name="muted", data_role="dates"),
            class_name="entry",
            data_role="entry",
        )

    def compose(self, data: ResumeData):
        # Tagline falls back when the first role is missing or blank
        tagline = data.experience[0].role if data.experience else ""
        heading = {"heading_tag": "h3", "heading_class": "section-title accent"}
        return [
            element(
                "header",
                element(
                    "div",
                    element("h1", data.profile.full_name, data_role="name"),
                    element("p", tagline.strip() or "Professional", data_role="tagline"),
                ),
                element("div", self.contacts(data.profile, tag="div"), class_name="contacts right"),
                class_name="header split",
            ),
            element(
                "div",
                element(
                    "div",
                    self.summary_section(data.profile, "Profile", **heading),
                    self.experience_section(data.experience, "Experience",
                                            self._experience_entry, **heading),
                    class_name="column main span-2",
                ),
                element(
                    "div",
                    self.skills_section(data.skills, "Skills", self.skill_tags, **heading),
                    self.education_section(data.education, "Education", self._education_entry,
                                           **heading),
                    self.projects_section(data.projects, "Projects", **heading),
                    class_name="column aside span-1",
                ),
                class_name="grid cols-3",
            ),
        ]
