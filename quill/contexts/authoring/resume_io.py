"""
Seed content and YAML persistence for resumes.

The rendering and export core never reads or writes files; these helpers are
for the host (CLI, tests) to start a session from a fresh, example or saved value.
"""

from pathlib import Path

from omegaconf import OmegaConf

from quill.contexts.authoring.exceptions import InvalidResumeStructureError
from quill.contexts.authoring.logger import _log_info
from quill.contexts.authoring.resume_data_structure import (
    Education,
    Experience,
    Profile,
    Project,
    ResumeData,
    Skill,
    SkillLevel,
)


def empty_resume() -> ResumeData:
    """Blank resume: empty profile strings and empty sections."""
    return ResumeData()


def example_resume() -> ResumeData:
    """Seed resume shown when a session starts with example content."""
    return ResumeData(
        profile=Profile(
            full_name="Alex Morgan",
            email="alex.morgan@example.com",
            phone="+1 (555) 012-3456",
            location="San Francisco, CA",
            website="alexmorgan.dev",
            linkedin="linkedin.com/in/alexmorgan",
            summary=(
                "Creative and detail-oriented Frontend Engineer with 5+ years of experience "
                "building scalable web applications. Expert in React, TypeScript, and UI/UX "
                "design. Proven track record of improving site performance by 40%."
            ),
        ),
        experience=(
            Experience(
                id="1",
                company="TechFlow Solutions",
                role="Senior Frontend Engineer",
                start_date="2021",
                end_date="Present",
                current=True,
                description=(
                    "Led the migration of a legacy jQuery codebase to React 18, improving load "
                    "times by 40%.\n"
                    "Mentored 3 junior developers and established code quality standards.\n"
                    "Implemented a component library used across 5 different products."
                ),
            ),
            Experience(
                id="2",
                company="Creative Digital Agency",
                role="Web Developer",
                start_date="2018",
                end_date="2021",
                current=False,
                description=(
                    "Developed responsive websites for 20+ clients including Fortune 500 "
                    "companies.\n"
                    "Collaborated with designers to implement pixel-perfect UIs using SCSS and "
                    "Vanilla JS."
                ),
            ),
        ),
        education=(
            Education(
                id="1",
                school="University of California, Berkeley",
                degree="Bachelor of Science",
                field="Computer Science",
                start_date="2014",
                end_date="2018",
                current=False,
            ),
        ),
        skills=(
            Skill(id="1", name="React", level=SkillLevel.EXPERT),
            Skill(id="2", name="TypeScript", level=SkillLevel.EXPERT),
            Skill(id="3", name="Tailwind CSS", level=SkillLevel.ADVANCED),
            Skill(id="4", name="Node.js", level=SkillLevel.INTERMEDIATE),
            Skill(id="5", name="UI/UX Design", level=SkillLevel.ADVANCED),
        ),
        projects=(
            Project(
                id="1",
                name="E-Commerce Dashboard",
                description="Real-time analytics dashboard built with Next.js and D3.js.",
                link="",
            ),
        ),
    )


def load_resume(path: Path) -> ResumeData:
    """
    Load a resume from a YAML (or JSON) file.

    Args:
        path: File with a "profile" mapping and section lists

    Returns:
        ResumeData instance

    Raises:
        FileNotFoundError: If path does not exist
        InvalidResumeStructureError: If the file is not a resume mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")

    # Free text may contain "${", so interpolations are left unresolved
    loaded = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    if not isinstance(loaded, dict):
        raise InvalidResumeStructureError(f"{path} does not contain a resume mapping")

    data = ResumeData.from_dict(loaded)
    _log_info(
        f"Loaded {path.name}: {len(data.experience)} experience, {len(data.education)} education, "
        f"{len(data.skills)} skills, {len(data.projects)} projects"
    )
    return data


def save_resume(data: ResumeData, path: Path) -> Path:
    """
    Save a resume as YAML. Every field, including skill levels, is written.

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    OmegaConf.save(OmegaConf.create(data.to_dict()), path)
    _log_info(f"Saved resume to {path}")
    return path
