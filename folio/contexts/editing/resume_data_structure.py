"""
Resume Document Structure

Defines the structured, immutable representation of resume content for FOLIO.
This structure is the interface between the Editing and Rendering contexts.

Editing owns:
- Creating the blank starting document
- Deriving new document values from field-level edits

Rendering reads ResumeDocument instances to build the preview.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Tuple


def field_names(entry_type: type) -> Tuple[str, ...]:
    """Return the editable field names of an entry dataclass, in declaration order."""
    return tuple(f.name for f in fields(entry_type))


@dataclass(frozen=True)
class PersonalInfo:
    """
    Contact details shown in the resume header.

    Attributes:
        name: Full name
        email: Email address
        phone: Phone number
        location: City/region
        linkedin: Profile link (raw URL)
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Single work experience entry.

    Dates are free text (e.g., "Jan 2020", "Present") and are never parsed.
    """

    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""

    @property
    def is_listed(self) -> bool:
        """Whether the entry has enough content to appear in the preview."""
        return bool(self.title or self.company)


@dataclass(frozen=True)
class EducationEntry:
    """Single education entry. GPA is optional free text."""

    degree: str = ""
    school: str = ""
    location: str = ""
    graduation_date: str = ""
    gpa: str = ""

    @property
    def is_listed(self) -> bool:
        """Whether the entry has enough content to appear in the preview."""
        return bool(self.degree or self.school)


PERSONAL_FIELDS = field_names(PersonalInfo)
EXPERIENCE_FIELDS = field_names(ExperienceEntry)
EDUCATION_FIELDS = field_names(EducationEntry)


@dataclass(frozen=True)
class ResumeDocument:
    """
    Structured representation of a complete resume document.

    Aggregate root for one editing session. Collections are tuples so that a
    document value can be shared freely; edits go through dataclasses.replace
    and always yield a new ResumeDocument.

    Attributes:
        personal_info: Header contact details
        summary: Professional summary paragraph
        experience: Work experience entries in presentation order
        education: Education entries in presentation order
        skills: Skill strings in presentation order (may contain blanks)
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = (ExperienceEntry(),)
    education: Tuple[EducationEntry, ...] = (EducationEntry(),)
    skills: Tuple[str, ...] = ("",)

    @classmethod
    def blank(cls) -> "ResumeDocument":
        """
        Create the starting document: empty fields and one blank row per collection.

        Returns:
            ResumeDocument with one blank experience, education and skill entry
        """
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """
        Snapshot the document as plain nested dicts and lists.

        Returns:
            Dict keyed by field names, with collections converted to lists
        """
        data = asdict(self)
        for key in ("experience", "education", "skills"):
            data[key] = list(data[key])
        return data
