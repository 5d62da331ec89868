"""
Document Model Controller

Owns the current ResumeDocument for one editing session and applies field-level
edits to it. Every edit derives a new document value from the previous one via
dataclasses.replace; no document value is ever mutated, so the preview is
always a pure function of the current state.

Out-of-bounds indices and unknown field names are programming errors and
propagate as IndexError / UnknownFieldError. No user-supplied text is rejected.
"""

from dataclasses import replace
from typing import Iterable, Optional, Tuple, TypeVar

from folio.contexts.editing.events import SECTIONS, AppendEntry, EditEvent, FieldEdit
from folio.contexts.editing.exceptions import UnknownFieldError, UnknownSectionError
from folio.contexts.editing.logger import log_append, log_field_edit
from folio.contexts.editing.resume_data_structure import (
    EDUCATION_FIELDS,
    EXPERIENCE_FIELDS,
    PERSONAL_FIELDS,
    EducationEntry,
    ExperienceEntry,
    ResumeDocument,
)
from folio.contexts.rendering.export import ExportKind, PrintTarget, request_export
from folio.contexts.rendering.preview import RenderedPreview, build_preview
from folio.contexts.rendering.print_settings import PrintSettings

T = TypeVar("T")


def _check_field(field_name: str, valid_fields: Tuple[str, ...], entry_type: str) -> None:
    if field_name not in valid_fields:
        raise UnknownFieldError(field_name, entry_type, valid_fields)


def _check_index(entries: Tuple, index: int, section: str) -> None:
    # Negative indices would silently wrap on a tuple
    if not 0 <= index < len(entries):
        raise IndexError(
            f"{section} index {index} out of range for {len(entries)} entries"
        )


def _replace_at(entries: Tuple[T, ...], index: int, new_entry: T) -> Tuple[T, ...]:
    return entries[:index] + (new_entry,) + entries[index + 1 :]


class DocumentController:
    """
    Holds the current ResumeDocument and applies edits by replacement.

    Each set_*/append_* method returns the new document value, which is also
    what `document` reports afterwards.

    Example:
        controller = DocumentController()
        controller.set_personal_field("name", "Ada Lovelace")
        controller.preview.header.name  # "Ada Lovelace"
    """

    def __init__(self, document: Optional[ResumeDocument] = None):
        self._document = document if document is not None else ResumeDocument.blank()

    @property
    def document(self) -> ResumeDocument:
        """Current document value."""
        return self._document

    @property
    def preview(self) -> RenderedPreview:
        """Rendered preview, recomputed from the current document on every read."""
        return build_preview(self._document)

    def _commit(self, **changes) -> ResumeDocument:
        self._document = replace(self._document, **changes)
        return self._document

    # =========================================================================
    # PERSONAL INFO AND SUMMARY
    # =========================================================================

    def set_personal_field(self, field_name: str, value: str) -> ResumeDocument:
        """
        Replace one PersonalInfo field.

        Args:
            field_name: One of name, email, phone, location, linkedin
            value: New value (any text)

        Raises:
            UnknownFieldError: If field_name is not a PersonalInfo field
        """
        _check_field(field_name, PERSONAL_FIELDS, "PersonalInfo")
        personal_info = replace(self._document.personal_info, **{field_name: value})
        log_field_edit("personal", field_name, value)
        return self._commit(personal_info=personal_info)

    def set_summary(self, text: str) -> ResumeDocument:
        """Replace the summary paragraph."""
        log_field_edit("summary", "text", text)
        return self._commit(summary=text)

    # =========================================================================
    # EXPERIENCE
    # =========================================================================

    def set_experience_field(self, index: int, field_name: str, value: str) -> ResumeDocument:
        """
        Replace one field of the experience entry at index.

        Raises:
            IndexError: If index is outside the current experience entries
            UnknownFieldError: If field_name is not an ExperienceEntry field
        """
        entries = self._document.experience
        _check_index(entries, index, "experience")
        _check_field(field_name, EXPERIENCE_FIELDS, "ExperienceEntry")
        updated = replace(entries[index], **{field_name: value})
        log_field_edit("experience", field_name, value, index)
        return self._commit(experience=_replace_at(entries, index, updated))

    def append_experience(self) -> ResumeDocument:
        """Append a blank experience entry."""
        experience = self._document.experience + (ExperienceEntry(),)
        log_append("experience", len(experience))
        return self._commit(experience=experience)

    # =========================================================================
    # EDUCATION
    # =========================================================================

    def set_education_field(self, index: int, field_name: str, value: str) -> ResumeDocument:
        """
        Replace one field of the education entry at index.

        Raises:
            IndexError: If index is outside the current education entries
            UnknownFieldError: If field_name is not an EducationEntry field
        """
        entries = self._document.education
        _check_index(entries, index, "education")
        _check_field(field_name, EDUCATION_FIELDS, "EducationEntry")
        updated = replace(entries[index], **{field_name: value})
        log_field_edit("education", field_name, value, index)
        return self._commit(education=_replace_at(entries, index, updated))

    def append_education(self) -> ResumeDocument:
        """Append a blank education entry."""
        education = self._document.education + (EducationEntry(),)
        log_append("education", len(education))
        return self._commit(education=education)

    # =========================================================================
    # SKILLS
    # =========================================================================

    def set_skill(self, index: int, value: str) -> ResumeDocument:
        """
        Replace the skill at index.

        Raises:
            IndexError: If index is outside the current skills
        """
        skills = self._document.skills
        _check_index(skills, index, "skills")
        log_field_edit("skills", "value", value, index)
        return self._commit(skills=_replace_at(skills, index, value))

    def append_skill(self) -> ResumeDocument:
        """Append a blank skill."""
        skills = self._document.skills + ("",)
        log_append("skills", len(skills))
        return self._commit(skills=skills)

    # =========================================================================
    # EVENT DISPATCH
    # =========================================================================

    def apply(self, event: EditEvent) -> ResumeDocument:
        """
        Apply one edit event by dispatching to the matching operation.

        Args:
            event: FieldEdit or AppendEntry

        Returns:
            The new document value
        """
        if isinstance(event, AppendEntry):
            appenders = {
                "experience": self.append_experience,
                "education": self.append_education,
                "skills": self.append_skill,
            }
            return appenders[event.section]()

        if not isinstance(event, FieldEdit):
            raise TypeError(f"Unsupported edit event: {event!r}")

        if event.section == "personal":
            return self.set_personal_field(event.field_name, event.value)
        elif event.section == "summary":
            return self.set_summary(event.value)
        elif event.section == "experience":
            return self.set_experience_field(event.index, event.field_name, event.value)
        elif event.section == "education":
            return self.set_education_field(event.index, event.field_name, event.value)
        elif event.section == "skills":
            return self.set_skill(event.index, event.value)
        raise UnknownSectionError(event.section, SECTIONS)

    def replay(self, events: Iterable[EditEvent]) -> ResumeDocument:
        """Apply events in order and return the resulting document."""
        for event in events:
            self.apply(event)
        return self._document

    # =========================================================================
    # EXPORT
    # =========================================================================

    def export(
        self,
        target: PrintTarget,
        kind: ExportKind = ExportKind.PDF,
        settings: Optional[PrintSettings] = None,
    ) -> None:
        """
        Hand the current preview to a host print target.

        Fire-and-forget: target failures are logged, never raised.
        """
        request_export(self.preview, target, kind=kind, settings=settings)
