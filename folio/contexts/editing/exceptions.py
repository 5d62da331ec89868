"""Custom exceptions for the editing context."""

from typing import Iterable, Optional


class UnknownFieldError(ValueError):
    """
    Exception raised when an edit names a field the entry type does not have.

    Attributes:
        field_name: The field name that was requested
        entry_type: Name of the entry type being edited (e.g., 'ExperienceEntry')
        valid_fields: Field names the entry type recognizes
    """

    def __init__(self, field_name: str, entry_type: str, valid_fields: Iterable[str]):
        self.field_name = field_name
        self.entry_type = entry_type
        self.valid_fields = tuple(valid_fields)

        super().__init__(
            f"Field '{field_name}' is not a field of {entry_type}. "
            f"Valid fields: {list(self.valid_fields)}"
        )


class UnknownSectionError(ValueError):
    """Exception raised when an edit event names a section the document does not have."""

    def __init__(self, section: str, valid_sections: Iterable[str]):
        self.section = section
        self.valid_sections = tuple(valid_sections)

        super().__init__(
            f"Section '{section}' is not a resume section. "
            f"Valid sections: {list(self.valid_sections)}"
        )


class InvalidEditEventError(ValueError):
    """
    Exception raised when an edit event mapping or session file is malformed.

    Attributes:
        message: Error description
        raw_event: The mapping that failed to convert (if any)
    """

    def __init__(self, message: str, raw_event: Optional[dict] = None):
        self.message = message
        self.raw_event = raw_event

        parts = [message]
        if raw_event is not None:
            parts.append(f"Event: {raw_event}")

        super().__init__("\n".join(parts))
