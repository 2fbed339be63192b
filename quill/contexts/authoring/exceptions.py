"""Custom exceptions for the authoring context."""

from typing import Optional


class InvalidResumeStructureError(ValueError):
    """
    Raised when a mapping cannot be read as a resume.

    This is raised for structural problems only (a section that is not a list,
    a profile that is not a mapping). Field values are never validated.
    """

    pass


class DuplicateEntryIdError(ValueError):
    """Raised when an entry id already exists in its section."""

    def __init__(self, section: str, entry_id: str):
        self.section = section
        self.entry_id = entry_id
        super().__init__(f"Duplicate id '{entry_id}' in section '{section}'")


class EntryNotFoundError(ValueError):
    """Raised when no entry with the given id exists in a section."""

    def __init__(self, section: str, entry_id: str):
        self.section = section
        self.entry_id = entry_id
        super().__init__(f"No entry with id '{entry_id}' in section '{section}'")


class UnknownFieldError(ValueError):
    """
    Raised when an edit addresses a section or field that does not exist.

    Attributes:
        section: Addressed section ("profile", "experience", ...)
        field_name: Addressed field
        valid_fields: Fields that section accepts, when known
    """

    def __init__(self, section: str, field_name: Optional[str] = None, valid_fields=None):
        self.section = section
        self.field_name = field_name
        self.valid_fields = list(valid_fields) if valid_fields else []

        if field_name is None:
            message = f"Unknown section '{section}'"
        else:
            message = f"Unknown field '{field_name}' for section '{section}'"
        if self.valid_fields:
            message += f". Valid fields: {self.valid_fields}"

        super().__init__(message)
