"""Elegant layout: double border, centred text, rule-flanked section titles."""

from quill.contexts.authoring.resume_data_structure import Education, Experience, ResumeData
from quill.contexts.rendering.base import Layout
from quill.contexts.rendering.document_tree import element


class ElegantLayout(Layout):
    name = "elegant"
    theme = "elegant"
    present_marker = "Present"
    date_separator = "–"
    contact_fields = ("location", "email", "phone")

    def _experience_entry(self, exp: Experience):
        meta = f"{exp.company}, {self.date_range(exp.start_date, exp.end_date, exp.current)}"
        return element(
            "div",
            element("h3", exp.role, data_role="title"),
            element("div", meta, class_name="italic muted", data_role="dates"),
            self.description(exp.description, class_name="left narrow"),
            class_name="entry centered",
            data_role="entry",
        )

    def _education_entry(self, edu: Education):
        return element(
            "div",
            element("div", edu.school, data_role="title"),
            element("div", self.credential(edu), class_name="italic", data_role="credential"),
            element("div", self.date_range(edu.start_date, edu.end_date, edu.current),
                    class_name="muted", data_role="dates"),
            class_name="entry centered",
            data_role="entry",
        )

    def _separated_contacts(self, data: ResumeData):
        items = [item for item in self.contacts(data.profile) if item is not None]
        separated = []
        for index, item in enumerate(items):
            if index:
                separated.append(element("span", "•", class_name="separator", aria_hidden="true"))
            separated.append(item)
        return separated

    def compose(self, data: ResumeData):
        heading = {"heading_class": "flanked-title"}
        return [
            element(
                "header",
                element("h1", data.profile.full_name, data_role="name"),
                element("div", class_name="rule short"),
                element("div", self._separated_contacts(data), class_name="contacts italic"),
                class_name="header centered",
            ),
            self.summary_section(data.profile, "Profile", class_name="centered padded",
                                 heading_class="sr-only"),
            self.experience_section(data.experience, "Experience", self._experience_entry,
                                    **heading),
            self.projects_section(data.projects, "Projects", class_name="centered", **heading),
            element(
                "div",
                self.education_section(data.education, "Education", self._education_entry,
                                       **heading),
                self.skills_section(
                    data.skills,
                    "Skills",
                    lambda skills: self.joined_skills(skills, ", ", class_name="centered italic"),
                    **heading,
                ),
                class_name="grid cols-2",
            ),
        ]
