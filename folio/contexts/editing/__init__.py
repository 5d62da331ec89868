"""
Editing Context

Responsibilities:
- Defines the resume document model (personal info, summary, experience, education, skills)
- Applies field-level edits by deriving new document values
- Converts host input (edit events, scripted YAML sessions) into edits

Owns: ResumeDocument structure, edit semantics, the DocumentController
Never: Decides how the document is laid out or printed

The controller lives in folio.contexts.editing.controller; it is not re-exported
here because it depends on the rendering context, which itself imports the
document structure from this package.
"""

from folio.contexts.editing.events import (
    AppendEntry,
    FieldEdit,
    event_from_dict,
    load_edit_session,
)
from folio.contexts.editing.exceptions import (
    InvalidEditEventError,
    UnknownFieldError,
    UnknownSectionError,
)
from folio.contexts.editing.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeDocument,
)

__all__ = [
    # Data structure classes
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "ResumeDocument",
    # Edit events
    "FieldEdit",
    "AppendEntry",
    "event_from_dict",
    "load_edit_session",
    # Exceptions
    "UnknownFieldError",
    "UnknownSectionError",
    "InvalidEditEventError",
]
