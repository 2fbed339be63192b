"""Creative layout: yellow banner, display type, two-thirds / one-third columns."""

from quill.contexts.authoring.resume_data_structure import Education, Experience, ResumeData
from quill.contexts.rendering.base import Layout
from quill.contexts.rendering.document_tree import element


class CreativeLayout(Layout):
    name = "creative"
    theme = "creative"
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
            class_name="entry",
            data_role="entry",
        )

    def _education_entry(self, edu: Education):
        return element(
            "div",
            element("div", edu.school, data_role="title"),
            element("div", self.credential(edu), class_name="italic", data_role="credential"),
            element("div", self.date_range(edu.start_date, edu.end_date, edu.current),
                    class_name="muted", data_role="dates"),
            class_name="entry",
            data_role="entry",
        )

    def compose(self, data: ResumeData):
        heading = {"heading_class": "display-title"}
        return [
            element("div", class_name="banner", aria_hidden="true"),
            element(
                "header",
                element("h1", data.profile.full_name, data_role="name"),
                element("div", self.contacts(data.profile, class_name="chip inverted"),
                        class_name="contacts"),
                class_name="header",
            ),
            element(
                "div",
                element(
                    "div",
                    # Summary reads as a pull quote; its heading is for screen readers
                    self.summary_section(data.profile, "About", class_name="pull-quote",
                                         heading_class="sr-only"),
                    self.experience_section(data.experience, "Experience",
                                            self._experience_entry,
                                            heading_class="display-title with-bar"),
                    self.projects_section(data.projects, "Projects", **heading),
                    class_name="column span-2",
                ),
                element(
                    "div",
                    self.skills_section(data.skills, "Expertise",
                                        lambda skills: self.skill_tags(skills, "chip outlined"),
                                        class_name="panel", **heading),
                    self.education_section(data.education, "Education", self._education_entry,
                                           **heading),
                    class_name="column span-1",
                ),
                class_name="columns",
            ),
        ]
