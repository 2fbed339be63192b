"""Unit tests for the resume data model."""

from dataclasses import FrozenInstanceError

import pytest

from quill.contexts.authoring import (
    DuplicateEntryIdError,
    InvalidResumeStructureError,
    Profile,
    ResumeData,
    Skill,
    SkillLevel,
    empty_resume,
)
from quill.contexts.authoring.resume_data_structure import parse_skill_level


@pytest.mark.unit
class TestResumeData:
    """Test construction and immutability."""

    def test_empty_defaults(self):
        data = empty_resume()
        assert data.profile == Profile()
        assert data.experience == ()
        assert data.projects == ()

    def test_frozen(self, sample_resume):
        with pytest.raises(FrozenInstanceError):
            sample_resume.profile.full_name = "Someone else"

    def test_sections_are_tuples(self, sample_resume):
        for name in ("experience", "education", "skills", "projects"):
            assert isinstance(sample_resume.section(name), tuple)

    def test_unknown_section(self, sample_resume):
        with pytest.raises(KeyError):
            sample_resume.section("hobbies")

    def test_default_skill_level(self):
        assert Skill(id="1", name="Go").level is SkillLevel.INTERMEDIATE


@pytest.mark.unit
class TestFromDict:
    """Test reading resumes from plain mappings."""

    def test_round_trip(self, special_chars_resume):
        assert ResumeData.from_dict(special_chars_resume.to_dict()) == special_chars_resume

    def test_round_trip_keeps_skill_levels(self, sample_resume):
        data = ResumeData.from_dict(sample_resume.to_dict())
        assert [s.level for s in data.skills] == [s.level for s in sample_resume.skills]

    def test_to_dict_uses_level_labels(self, sample_resume):
        assert sample_resume.to_dict()["skills"][0]["level"] == "Expert"

    def test_camel_case_keys(self):
        data = ResumeData.from_dict(
            {
                "profile": {"fullName": "Ana"},
                "experience": [{"id": "1", "startDate": "2020", "endDate": "2021"}],
            }
        )
        assert data.profile.full_name == "Ana"
        assert data.experience[0].start_date == "2020"
        assert data.experience[0].end_date == "2021"

    def test_missing_fields_take_defaults(self):
        data = ResumeData.from_dict({"projects": [{"id": "p", "name": "X"}]})
        assert data.projects[0].link == ""
        assert data.profile == Profile()

    def test_unknown_keys_and_nulls_ignored(self):
        data = ResumeData.from_dict({"profile": {"email": None, "nickname": "Z"}, "extra": 1})
        assert data.profile.email == ""

    def test_numbers_coerced_to_text(self):
        data = ResumeData.from_dict(
            {"profile": {"phone": 5550100}, "education": [{"id": 7, "startDate": 2014}]}
        )
        assert data.profile.phone == "5550100"
        assert data.education[0].id == "7"
        assert data.education[0].start_date == "2014"

    def test_duplicate_ids_rejected(self):
        with pytest.raises(DuplicateEntryIdError) as exc_info:
            ResumeData.from_dict({"skills": [{"id": "1"}, {"id": "1"}]})
        assert exc_info.value.section == "skills"

    def test_same_id_in_different_sections_allowed(self):
        data = ResumeData.from_dict({"skills": [{"id": "1"}], "projects": [{"id": "1"}]})
        assert data.skills[0].id == data.projects[0].id == "1"

    @pytest.mark.parametrize(
        "raw",
        [
            ["not", "a", "mapping"],
            {"profile": "Alex"},
            {"experience": {"id": "1"}},
            {"skills": ["Python"]},
            {"projects": [{"name": "no id"}]},
        ],
    )
    def test_invalid_structure(self, raw):
        with pytest.raises(InvalidResumeStructureError):
            ResumeData.from_dict(raw)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("Expert", SkillLevel.EXPERT),
        ("BEGINNER", SkillLevel.BEGINNER),
        (" Advanced ", SkillLevel.ADVANCED),
        (SkillLevel.INTERMEDIATE, SkillLevel.INTERMEDIATE),
    ],
)
def test_parse_skill_level(value, expected):
    assert parse_skill_level(value) is expected


@pytest.mark.unit
def test_parse_skill_level_unknown():
    with pytest.raises(InvalidResumeStructureError):
        parse_skill_level("Guru")
