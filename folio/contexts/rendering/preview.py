"""
Rendered Preview

Derives the display-ready projection of a ResumeDocument. The preview is never
stored: build_preview() is a pure function of the document and is called on
every read, so equal documents always yield equal previews.

Block inclusion rules:
- Summary appears only when non-empty
- Experience appears only when some entry has a title or company; entries
  with neither are skipped individually
- Education follows the same rule keyed on degree/school
- Skills appear only when some skill is non-empty; blank skills are dropped
  from the tags but stay in the document
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from folio.contexts.editing.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeDocument,
)

# Stable handle the host print capability targets
PREVIEW_ELEMENT_ID = "resume-preview"

FIELD_SEPARATOR = " | "
PLACE_SEPARATOR = ", "
DATE_RANGE_SEPARATOR = " – "
PROFILE_LINK_LABEL = "LinkedIn"


def join_present(parts, separator: str) -> str:
    """Join the non-empty parts, so empty values never leave dangling separators."""
    return separator.join(part for part in parts if part)


@dataclass(frozen=True)
class ProfileLink:
    """Hyperlink shown after the location. Target is the raw URL as typed."""

    label: str
    href: str


@dataclass(frozen=True)
class HeaderBlock:
    """
    Header region: name, contact line, location line.

    Attributes:
        name: Full name, verbatim
        contact_line: Email and phone joined with " | "
        location: Location text
        profile_link: Link appended to the location line, if a URL was given
    """

    name: str
    contact_line: str
    location: str
    profile_link: Optional[ProfileLink] = None

    @property
    def location_line(self) -> str:
        """Location line as plain text, with the link shown by its label."""
        if self.profile_link is None:
            return self.location
        return f"{self.location}{FIELD_SEPARATOR}{self.profile_link.label}"

    def lines(self) -> List[str]:
        """Header as three text lines: name, contact line, location line."""
        return [self.name, self.contact_line, self.location_line]


@dataclass(frozen=True)
class ExperienceItem:
    title: str
    date_range: str
    place_line: str
    description: str


@dataclass(frozen=True)
class EducationItem:
    degree: str
    graduation_date: str
    place_line: str
    gpa_line: Optional[str] = None


@dataclass(frozen=True)
class RenderedPreview:
    """
    Display-ready projection of a ResumeDocument.

    Absent blocks are None; present blocks hold at least one item.

    Attributes:
        header: Always present
        summary: Summary text, or None
        experience: Qualifying experience items, or None
        education: Qualifying education items, or None
        skills: Non-empty skill tags in original order, or None
        element_id: Handle identifying the printable region
    """

    header: HeaderBlock
    summary: Optional[str] = None
    experience: Optional[Tuple[ExperienceItem, ...]] = None
    education: Optional[Tuple[EducationItem, ...]] = None
    skills: Optional[Tuple[str, ...]] = None
    element_id: str = PREVIEW_ELEMENT_ID

    @property
    def blocks(self) -> List[str]:
        """Names of the blocks present, in layout order."""
        present = ["header"]
        for name in ("summary", "experience", "education", "skills"):
            if getattr(self, name) is not None:
                present.append(name)
        return present


def build_header(personal_info: PersonalInfo) -> HeaderBlock:
    link = None
    if personal_info.linkedin:
        link = ProfileLink(label=PROFILE_LINK_LABEL, href=personal_info.linkedin)
    return HeaderBlock(
        name=personal_info.name,
        contact_line=join_present([personal_info.email, personal_info.phone], FIELD_SEPARATOR),
        location=personal_info.location,
        profile_link=link,
    )


def build_experience_item(entry: ExperienceEntry) -> ExperienceItem:
    return ExperienceItem(
        title=entry.title,
        date_range=f"{entry.start_date}{DATE_RANGE_SEPARATOR}{entry.end_date}",
        place_line=join_present([entry.company, entry.location], PLACE_SEPARATOR),
        description=entry.description,
    )


def build_education_item(entry: EducationEntry) -> EducationItem:
    return EducationItem(
        degree=entry.degree,
        graduation_date=entry.graduation_date,
        place_line=join_present([entry.school, entry.location], PLACE_SEPARATOR),
        gpa_line=f"GPA: {entry.gpa}" if entry.gpa else None,
    )


def build_preview(document: ResumeDocument) -> RenderedPreview:
    """
    Build the rendered preview for a document.

    Args:
        document: Current resume document

    Returns:
        RenderedPreview with only the blocks that have content
    """
    experience = tuple(
        build_experience_item(entry) for entry in document.experience if entry.is_listed
    )
    education = tuple(
        build_education_item(entry) for entry in document.education if entry.is_listed
    )
    skills = tuple(skill for skill in document.skills if skill)

    return RenderedPreview(
        header=build_header(document.personal_info),
        summary=document.summary or None,
        experience=experience or None,
        education=education or None,
        skills=skills or None,
    )
