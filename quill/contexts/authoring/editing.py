"""
Copy-on-write editing operations.

Every function takes a ResumeData and returns a new one; the argument is never
modified, so a rendering in progress on the old value is unaffected by an edit.

Sections are addressed by name: "experience", "education", "skills", "projects".
"""

import uuid
from dataclasses import dataclass, fields, replace
from typing import Any, Optional

from quill.contexts.authoring.exceptions import (
    DuplicateEntryIdError,
    EntryNotFoundError,
    UnknownFieldError,
)
from quill.contexts.authoring.logger import _log_debug
from quill.contexts.authoring.resume_data_structure import (
    ENTRY_TYPES,
    SECTIONS,
    Profile,
    ResumeData,
    parse_skill_level,
)

PROFILE_SECTION = "profile"


@dataclass(frozen=True)
class FieldAddress:
    """
    Address of exactly one text field in a resume.

    Attributes:
        section: "profile" or a section name
        field: Field name on the profile or entry (e.g. "summary", "description")
        entry_id: Id of the entry; required for sections, ignored for the profile
    """

    section: str
    field: str
    entry_id: Optional[str] = None


def new_entry_id() -> str:
    """Return a fresh opaque entry id."""
    return uuid.uuid4().hex


def _check_section(section: str) -> None:
    if section not in ENTRY_TYPES:
        raise UnknownFieldError(section, valid_fields=SECTIONS)


def _check_changes(cls, section: str, changes: dict) -> None:
    valid = [f.name for f in fields(cls) if f.name != "id"]
    for name in changes:
        if name not in valid:
            raise UnknownFieldError(section, name, valid)


def append_entry(data: ResumeData, section: str, entry: Any) -> ResumeData:
    """
    Append an entry to the end of a section.

    Args:
        data: Current resume
        section: Section name
        entry: Entry of the section's type (Experience, Education, Skill, Project)

    Returns:
        New ResumeData with the entry appended

    Raises:
        UnknownFieldError: Unknown section
        TypeError: Entry type does not match the section
        DuplicateEntryIdError: Entry id already used in the section
    """
    _check_section(section)
    expected = ENTRY_TYPES[section]
    if not isinstance(entry, expected):
        raise TypeError(
            f"Section '{section}' holds {expected.__name__}, got {type(entry).__name__}"
        )

    entries = data.section(section)
    if any(existing.id == entry.id for existing in entries):
        raise DuplicateEntryIdError(section, entry.id)

    _log_debug(f"Appending {section} entry {entry.id}")
    return replace(data, **{section: entries + (entry,)})


def update_entry(data: ResumeData, section: str, entry_id: str, **changes: Any) -> ResumeData:
    """
    Replace fields of one entry, keeping its position in the section.

    Raises:
        UnknownFieldError: Unknown section or field (the id itself cannot be changed)
        EntryNotFoundError: No entry with entry_id
    """
    _check_section(section)
    _check_changes(ENTRY_TYPES[section], section, changes)
    if "level" in changes:
        changes["level"] = parse_skill_level(changes["level"])

    entries = data.section(section)
    updated = []
    found = False
    for entry in entries:
        if entry.id == entry_id:
            entry = replace(entry, **changes)
            found = True
        updated.append(entry)

    if not found:
        raise EntryNotFoundError(section, entry_id)

    _log_debug(f"Updated {section} entry {entry_id}: {sorted(changes)}")
    return replace(data, **{section: tuple(updated)})


def remove_entry(data: ResumeData, section: str, entry_id: str) -> ResumeData:
    """
    Remove one entry by id.

    Raises:
        UnknownFieldError: Unknown section
        EntryNotFoundError: No entry with entry_id
    """
    _check_section(section)

    entries = data.section(section)
    remaining = tuple(entry for entry in entries if entry.id != entry_id)
    if len(remaining) == len(entries):
        raise EntryNotFoundError(section, entry_id)

    _log_debug(f"Removed {section} entry {entry_id}")
    return replace(data, **{section: remaining})


def update_profile(data: ResumeData, **changes: Any) -> ResumeData:
    """
    Replace profile fields.

    Raises:
        UnknownFieldError: Unknown profile field
    """
    valid = [f.name for f in fields(Profile)]
    for name in changes:
        if name not in valid:
            raise UnknownFieldError(PROFILE_SECTION, name, valid)
    return replace(data, profile=replace(data.profile, **changes))


def get_field(data: ResumeData, address: FieldAddress) -> str:
    """
    Read the text field an address points to.

    Raises:
        UnknownFieldError: Unknown section or field
        EntryNotFoundError: No entry with the addressed id
    """
    if address.section == PROFILE_SECTION:
        target = data.profile
    else:
        _check_section(address.section)
        matches = [e for e in data.section(address.section) if e.id == address.entry_id]
        if not matches:
            raise EntryNotFoundError(address.section, str(address.entry_id))
        target = matches[0]

    text_fields = [
        f.name
        for f in fields(target)
        if f.name != "id" and isinstance(getattr(target, f.name), str)
    ]
    if address.field not in text_fields:
        raise UnknownFieldError(address.section, address.field, text_fields)
    return getattr(target, address.field)


def set_field(data: ResumeData, address: FieldAddress, value: str) -> ResumeData:
    """
    Write one text field, all or nothing.

    Used to apply collaborator output (polished text, generated summary) to the
    single field it was produced for.

    Args:
        data: Current resume
        address: Field to write
        value: New text

    Returns:
        New ResumeData with only that field changed

    Raises:
        UnknownFieldError: Unknown section, unknown or non-text field
        EntryNotFoundError: No entry with the addressed id
        TypeError: value is not a string
    """
    if not isinstance(value, str):
        raise TypeError(f"Field value must be a string, got {type(value).__name__}")

    # Validates the address before building anything
    get_field(data, address)

    if address.section == PROFILE_SECTION:
        return update_profile(data, **{address.field: value})
    return update_entry(data, address.section, address.entry_id, **{address.field: value})
