"""Minimal layout: monochrome, 4/12 + 8/12 grid, small caps section labels."""

from quill.contexts.authoring.resume_data_structure import Education, Experience, ResumeData
from quill.contexts.rendering.base import Layout
from quill.contexts.rendering.document_tree import element


class MinimalLayout(Layout):
    name = "minimal"
    theme = "minimal"
    present_marker = "Now"
    date_separator = "—"
    contact_fields = ("email", "phone", "location")

    def _experience_entry(self, exp: Experience):
        return element(
            "div",
            element(
                "div",
                element("h3", exp.role, data_role="title"),
                element("span", self.date_range(exp.start_date, exp.end_date, exp.current),
                        class_name="dates mono", data_role="dates"),
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
            element("div", edu.school, data_role="title"),
            element("div", self.credential(edu), data_role="credential"),
            element("div", self.date_range(edu.start_date, edu.end_date, edu.current),
                    class_name="dates", data_role="dates"),
            class_name="entry",
            data_role="entry",
        )

    def compose(self, data: ResumeData):
        heading = {"heading_class": "label"}
        return [
            element(
                "header",
                element("h1", data.profile.full_name, data_role="name"),
                element("div", self.contacts(data.profile), class_name="contacts"),
                class_name="header",
            ),
            element(
                "div",
                element(
                    "div",
                    self.education_section(data.education, "Education", self._education_entry,
                                           **heading),
                    self.skills_section(data.skills, "Skills", self.skill_list, **heading),
                    class_name="column span-4",
                ),
                element(
                    "div",
                    self.summary_section(data.profile, "About", **heading),
                    self.experience_section(data.experience, "Work Experience",
                                            self._experience_entry, **heading),
                    self.projects_section(data.projects, "Projects", **heading),
                    class_name="column span-8",
                ),
                class_name="grid cols-12",
            ),
        ]
