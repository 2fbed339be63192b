"""
Resume Data Structure

Defines the canonical in-memory representation of everything a user enters:
one profile plus four ordered sections (experience, education, skills, projects).

All classes are frozen dataclasses and every section is a tuple, so rendering
and export receive a value they cannot mutate. Edits go through
quill.contexts.authoring.editing, which returns new instances.

Dates are free text ("2021", "Q3 2020", "Present") and are never parsed.
Entry ids are opaque handles for update/remove and are never rendered.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from quill.contexts.authoring.exceptions import (
    DuplicateEntryIdError,
    InvalidResumeStructureError,
)


class SkillLevel(Enum):
    """Self-assessed proficiency. Kept with the data, not shown by any layout."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


@dataclass(frozen=True)
class Profile:
    """
    Single profile slot of a resume.

    Attributes:
        full_name: Name shown as the document title
        email: Contact email
        phone: Contact phone number
        location: City / region
        website: Personal website (bare host or full URL)
        linkedin: Professional network handle or profile URL
        summary: Free-text professional summary
    """

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    summary: str = ""


@dataclass(frozen=True)
class Experience:
    """
    Work experience entry.

    When current is True the stored end_date is kept but layouts and export
    show a present marker instead.
    """

    id: str
    company: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


@dataclass(frozen=True)
class Education:
    """Education entry. Same current-flag rule as Experience."""

    id: str
    school: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False


@dataclass(frozen=True)
class Skill:
    """Skill entry; insertion order is display order."""

    id: str
    name: str = ""
    level: SkillLevel = SkillLevel.INTERMEDIATE


@dataclass(frozen=True)
class Project:
    """Project entry with an optional link."""

    id: str
    name: str = ""
    description: str = ""
    link: str = ""


ENTRY_TYPES = {
    "experience": Experience,
    "education": Education,
    "skills": Skill,
    "projects": Project,
}

SECTIONS = tuple(ENTRY_TYPES)

# camelCase keys used by the browser-side JSON shape
_KEY_ALIASES = {
    "fullName": "full_name",
    "startDate": "start_date",
    "endDate": "end_date",
}


@dataclass(frozen=True)
class ResumeData:
    """
    Aggregate root: exactly one profile and four ordered sections.

    Attributes:
        profile: The single Profile
        experience: Work history, in presentation order
        education: Education history, in presentation order
        skills: Skills, in display order
        projects: Projects, may be empty
    """

    profile: Profile = field(default_factory=Profile)
    experience: Tuple[Experience, ...] = ()
    education: Tuple[Education, ...] = ()
    skills: Tuple[Skill, ...] = ()
    projects: Tuple[Project, ...] = ()

    def section(self, name: str) -> Tuple[Any, ...]:
        """Return the entries of a section by name."""
        if name not in ENTRY_TYPES:
            raise KeyError(f"Unknown section '{name}'. Valid sections: {list(SECTIONS)}")
        return getattr(self, name)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to plain dicts/lists (snake_case keys, skill level as its label).

        The result loads back with from_dict() without losing any field.
        """
        data = asdict(self)
        for skill in data["skills"]:
            skill["level"] = skill["level"].value
        for name in SECTIONS:
            data[name] = list(data[name])
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeData":
        """
        Build a ResumeData from a mapping.

        Accepts snake_case keys and the camelCase keys of the browser JSON shape
        (fullName, startDate, endDate). Missing fields take their defaults,
        unknown keys are ignored.

        Args:
            data: Mapping with optional "profile" and section keys

        Returns:
            ResumeData instance

        Raises:
            InvalidResumeStructureError: If the profile is not a mapping, a section
                is not a list of mappings, or a skill level is not recognized
            DuplicateEntryIdError: If two entries in one section share an id
        """
        if not isinstance(data, Mapping):
            raise InvalidResumeStructureError(
                f"Resume must be a mapping, got {type(data).__name__}"
            )

        profile_data = data.get("profile") or {}
        if not isinstance(profile_data, Mapping):
            raise InvalidResumeStructureError("'profile' must be a mapping")
        profile = Profile(**_known_fields(Profile, profile_data))

        sections = {}
        for name, entry_type in ENTRY_TYPES.items():
            raw_entries = data.get(name) or []
            if not isinstance(raw_entries, (list, tuple)):
                raise InvalidResumeStructureError(f"'{name}' must be a list")

            entries = []
            seen_ids = set()
            for raw in raw_entries:
                if not isinstance(raw, Mapping):
                    raise InvalidResumeStructureError(f"Entries of '{name}' must be mappings")
                values = _known_fields(entry_type, raw)
                if "id" not in values:
                    raise InvalidResumeStructureError(f"Entry in '{name}' is missing 'id'")
                values["id"] = str(values["id"])
                if values["id"] in seen_ids:
                    raise DuplicateEntryIdError(name, values["id"])
                seen_ids.add(values["id"])
                if entry_type is Skill and "level" in values:
                    values["level"] = parse_skill_level(values["level"])
                entries.append(entry_type(**values))
            sections[name] = tuple(entries)

        return cls(profile=profile, **sections)


def parse_skill_level(value: Any) -> SkillLevel:
    """
    Read a SkillLevel from its label ("Expert") or member name ("EXPERT").

    Raises:
        InvalidResumeStructureError: If value names no level
    """
    if isinstance(value, SkillLevel):
        return value
    text = str(value).strip()
    for level in SkillLevel:
        if text == level.value or text.upper() == level.name:
            return level
    raise InvalidResumeStructureError(
        f"Unknown skill level '{value}'. Valid levels: {[level.value for level in SkillLevel]}"
    )


def _known_fields(cls, raw: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Keep keys that name a field of cls, translating camelCase aliases.

    Nulls take defaults. Text fields are coerced with str(), since YAML reads
    bare years and phone numbers as ints.
    """
    known = cls.__dataclass_fields__
    values = {}
    for key, value in raw.items():
        key = _KEY_ALIASES.get(key, key)
        if key not in known or value is None:
            continue
        if known[key].type is str and not isinstance(value, str):
            value = str(value)
        values[key] = value
    return values
