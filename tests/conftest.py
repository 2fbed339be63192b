"""Shared fixtures for QUILL tests."""

import pytest

from quill.contexts.authoring import (
    Education,
    Experience,
    Profile,
    Project,
    ResumeData,
    Skill,
    SkillLevel,
    example_resume,
)


@pytest.fixture
def sample_resume() -> ResumeData:
    """The seed resume shown to new users."""
    return example_resume()


@pytest.fixture
def empty_data() -> ResumeData:
    """All strings empty, all sections empty."""
    return ResumeData()


@pytest.fixture
def special_chars_resume() -> ResumeData:
    """Resume whose every text field contains LaTeX reserved characters."""
    return ResumeData(
        profile=Profile(
            full_name="Jo & Co_Ltd",
            email="jo_doe@example.com",
            phone="+1 555 #42",
            location="R&D ~ Lab",
            website="jo.dev/~home",
            linkedin="linkedin.com/in/jo_doe",
            summary="100% {effective} at $cale ^ growth \\ more",
        ),
        experience=(
            Experience(
                id="zz-exp-1",
                company="A&B #1",
                role="Lead_Dev",
                start_date="2020",
                end_date="2030",
                current=True,
                description="Cut costs 50%\nShipped C# & F#\nUsed {braces}",
            ),
        ),
        education=(
            Education(
                id="zz-edu-1",
                school="Tech & Arts",
                degree="B.Sc.",
                field="Math_Stats",
                start_date="2014",
                end_date="2018",
            ),
        ),
        skills=(
            Skill(id="zz-skill-1", name="C++ & $hell", level=SkillLevel.EXPERT),
            Skill(id="zz-skill-2", name="R_lang", level=SkillLevel.BEGINNER),
        ),
        projects=(
            Project(
                id="zz-proj-1", name="Proj #1", description="50% faster ~ish", link="ex.com/a_b"
            ),
        ),
    )
