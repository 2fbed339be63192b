"""Tech layout: monospace, code-comment section titles."""

from quill.contexts.authoring.resume_data_structure import Education, Experience, ResumeData
from quill.contexts.rendering.base import Layout
from quill.contexts.rendering.document_tree import element
from quill.utils.text_processing import is_blank

CONTACT_CONSTANTS = {"email": "EMAIL", "phone": "PHONE", "location": "LOC"}


class TechLayout(Layout):
    name = "tech"
    theme = "tech"
    present_marker = "NOW"
    date_separator = ".."
    contact_fields = ("email", "phone", "location")

    def date_range(self, start_date: str, end_date: str, current: bool) -> str:
        return f"[{super().date_range(start_date, end_date, current)}]"

    def _experience_entry(self, exp: Experience):
        return element(
            "div",
            element(
                "div",
                element("h3", f"{exp.role} @ {exp.company}", data_role="title"),
                element("span", self.date_range(exp.start_date, exp.end_date, exp.current),
                        data_role="dates"),
                class_name="entry-header",
            ),
            self.description(exp.description),
            class_name="entry",
            data_role="entry",
        )

    def _education_entry(self, edu: Education):
        return element(
            "div",
            element("div", edu.school, data_role="title"),
            element("div", self.credential(edu), data_role="credential"),
            element("div", self.date_range(edu.start_date, edu.end_date, edu.current),
                    data_role="dates"),
            class_name="entry",
            data_role="entry",
        )

    def _skill_array(self, skills):
        return element(
            "p",
            "[" + ", ".join(f'"{skill.name}"' for skill in skills) + "]",
            data_role="skills",
        )

    def _contacts(self, data: ResumeData):
        items = []
        for field_name in self.contact_fields:
            value = getattr(data.profile, field_name)
            if not is_blank(value):
                items.append(
                    element("span", f'const {CONTACT_CONSTANTS[field_name]} = "{value}";',
                            data_contact=field_name)
                )
        return items

    def compose(self, data: ResumeData):
        heading = {"heading_class": "comment-title"}
        return [
            element(
                "header",
                element("h1", f"<{data.profile.full_name} />", data_role="name"),
                element("div", self._contacts(data), class_name="contacts"),
                class_name="header ruled",
            ),
            self.summary_section(data.profile, "// SUMMARY", **heading),
            self.experience_section(data.experience, "// EXPERIENCE", self._experience_entry,
                                    **heading),
            self.projects_section(data.projects, "// PROJECTS", **heading),
            element(
                "div",
                self.skills_section(data.skills, "// SKILLS", self._skill_array, **heading),
                self.education_section(data.education, "// EDUCATION", self._education_entry,
                                       **heading),
                class_name="grid cols-2",
            ),
        ]
