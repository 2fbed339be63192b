"""Classic layout: serif, centred header, single column with ruled section titles."""

from quill.contexts.authoring.resume_data_structure import Education, Experience, ResumeData
from quill.contexts.rendering.base import Layout
from quill.contexts.rendering.document_tree import element


class ClassicLayout(Layout):
    name = "classic"
    theme = "classic"
    present_marker = "Present"
    date_separator = "-"
    contact_fields = ("location", "phone", "email", "linkedin")

    def _experience_entry(self, exp: Experience):
        return element(
            "div",
            element(
                "div",
                element("h3", exp.role, data_role="title"),
                element("span", self.date_range(exp.start_date, exp.end_date, exp.current),
                        class_name="dates", data_role="dates"),
                class_name="entry-header",
            ),
            element("div", exp.company, class_name="organization", data_role="organization"),
            self.description(exp.description),
            class_name="entry",
            data_role="entry",
        )

    def _education_entry(self, edu: Education):
        return element(
            "div",
            element(
                "div",
                element("span", edu.school, class_name="school", data_role="title"),
                element("span", self.credential(edu), data_role="credential"),
            ),
            element("div", self.date_range(edu.start_date, edu.end_date, edu.current),
                    class_name="dates", data_role="dates"),
            class_name="entry entry-inline",
            data_role="entry",
        )

    def compose(self, data: ResumeData):
        heading = {"heading_class": "section-title ruled"}
        return [
            element(
                "header",
                element("h1", data.profile.full_name, data_role="name"),
                element(
                    "div",
                    self.contacts(data.profile, class_name="contact",
                                  labels={"linkedin": "LinkedIn"}),
                    class_name="contacts centered",
                ),
                class_name="header centered",
            ),
            self.summary_section(data.profile, "Professional Summary", **heading),
            self.experience_section(data.experience, "Experience", self._experience_entry,
                                    **heading),
            self.education_section(data.education, "Education", self._education_entry,
                                   **heading),
            self.projects_section(data.projects, "Projects", **heading),
            self.skills_section(data.skills, "Skills",
                                lambda skills: self.joined_skills(skills, " • "), **heading),
        ]
