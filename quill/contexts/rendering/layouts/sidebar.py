"""Sidebar layout: dark left column for identity, skills and education."""

from quill.contexts.authoring.resume_data_structure import Education, Experience, ResumeData
from quill.contexts.rendering.base import Layout
from quill.contexts.rendering.document_tree import element


class SidebarLayout(Layout):
    name = "sidebar"
    theme = "sidebar"
    present_marker = "Present"
    date_separator = "-"
    contact_fields = ("email", "phone", "location")

    def _experience_entry(self, exp: Experience):
        return element(
            "div",
            element("h3", exp.role, data_role="title"),
            element(
                "div",
                element("span", exp.company, data_role="organization"),
                element("span", self.date_range(exp.start_date, exp.end_date, exp.current),
                        data_role="dates"),
                class_name="entry-meta accent",
            ),
            self.description(exp.description),
            class_name="entry",
            data_role="entry",
        )

    def _education_entry(self, edu: Education):
        return element(
            "div",
            element("div", edu.school, class_name="school", data_role="title"),
            element("div", self.credential(edu), data_role="credential"),
            element("div", self.date_range(edu.start_date, edu.end_date, edu.current),
                    class_name="dates", data_role="dates"),
            class_name="entry",
            data_role="entry",
        )

    def compose(self, data: ResumeData):
        name = data.profile.full_name
        side_heading = {"heading_tag": "h3", "heading_class": "sidebar-title"}
        main_heading = {"heading_class": "section-title"}
        return [
            element(
                "aside",
                element(
                    "div",
                    element("div", name.strip()[:1], class_name="avatar", data_role="initial"),
                    element("h1", name, data_role="name"),
                    element("div", self.contacts(data.profile, tag="div"), class_name="contacts"),
                    class_name="identity",
                ),
                self.skills_section(data.skills, "Skills", self.skill_tags, **side_heading),
                self.education_section(data.education, "Education", self._education_entry,
                                       **side_heading),
                class_name="sidebar dark span-1",
            ),
            element(
                "main",
                self.summary_section(data.profile, "Profile", **main_heading),
                self.experience_section(data.experience, "Professional Experience",
                                        self._experience_entry, **main_heading),
                self.projects_section(data.projects, "Key Projects", **main_heading),
                class_name="main span-2",
            ),
        ]
