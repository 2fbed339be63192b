"""
Authoring Context

Responsibilities:
- Owns the resume data model (profile + four ordered sections)
- Applies edits as whole-value replacement (copy-on-write)
- Provides seed content and YAML load/save for the host

Owns: ResumeData and its invariants (unique ids, current-flag semantics)
Never: Renders or exports content
"""

from quill.contexts.authoring.editing import (
    FieldAddress,
    append_entry,
    get_field,
    new_entry_id,
    remove_entry,
    set_field,
    update_entry,
    update_profile,
)
from quill.contexts.authoring.exceptions import (
    DuplicateEntryIdError,
    EntryNotFoundError,
    InvalidResumeStructureError,
    UnknownFieldError,
)
from quill.contexts.authoring.resume_data_structure import (
    Education,
    Experience,
    Profile,
    Project,
    ResumeData,
    Skill,
    SkillLevel,
)
from quill.contexts.authoring.resume_io import (
    empty_resume,
    example_resume,
    load_resume,
    save_resume,
)

__all__ = [
    # Data model
    "Profile",
    "Experience",
    "Education",
    "Skill",
    "SkillLevel",
    "Project",
    "ResumeData",
    # Editing
    "FieldAddress",
    "append_entry",
    "update_entry",
    "remove_entry",
    "update_profile",
    "get_field",
    "set_field",
    "new_entry_id",
    # Seed and persistence
    "empty_resume",
    "example_resume",
    "load_resume",
    "save_resume",
    # Errors
    "DuplicateEntryIdError",
    "EntryNotFoundError",
    "InvalidResumeStructureError",
    "UnknownFieldError",
]
