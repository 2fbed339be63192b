"""Bold layout: black header band, large titles, experience-first grid."""

from quill.contexts.authoring.resume_data_structure import Education, Experience, ResumeData
from quill.contexts.rendering.base import Layout
from quill.contexts.rendering.document_tree import element


class BoldLayout(Layout):
    name = "bold"
    theme = "bold"
    present_marker = "Present"
    date_separator = "-"
    contact_fields = ("email", "phone")

    def _experience_entry(self, exp: Experience):
        meta = f"{exp.company} | {self.date_range(exp.start_date, exp.end_date, exp.current)}"
        return element(
            "div",
            element("h3", exp.role, data_role="title"),
            element("div", meta, class_name="meta uppercase", data_role="dates"),
            self.description(exp.description),
            class_name="entry bar-left",
            data_role="entry",
        )

    def _education_entry(self, edu: Education):
        return element(
            "div",
            element("div", edu.school, class_name="large", data_role="title"),
            element("div", self.credential(edu), class_name="muted", data_role="credential"),
            element("div", self.date_range(edu.start_date, edu.end_date, edu.current),
                    class_name="muted", data_role="dates"),
            class_name="entry",
            data_role="entry",
        )

    def _skill_rows(self, skills):
        return element(
            "div",
            [element("div", skill.name, class_name="underlined", data_role="skill")
             for skill in skills],
            class_name="stack",
        )

    def compose(self, data: ResumeData):
        return [
            element(
                "header",
                element("h1", data.profile.full_name, data_role="name"),
                element("div", self.contacts(data.profile), class_name="contacts"),
                class_name="header inverted",
            ),
            element(
                "div",
                element(
                    "div",
                    self.experience_section(data.experience, "Experience.",
                                            self._experience_entry, heading_class="huge-title"),
                    self.projects_section(data.projects, "Projects.",
                                          heading_class="huge-title"),
                    class_name="column span-2",
                ),
                element(
                    "div",
                    self.summary_section(data.profile, "About.", heading_class="big-title"),
                    self.skills_section(data.skills, "Skills.", self._skill_rows,
                                        heading_class="big-title"),
                    self.education_section(data.education, "Education.", self._education_entry,
                                           heading_class="big-title"),
                    class_name="column span-1",
                ),
                class_name="grid cols-3 padded",
            ),
        ]
