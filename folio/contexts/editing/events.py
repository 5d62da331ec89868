"""
Edit events for the editing context.

An edit event names (section, index?, field, new value) and is the only input
the DocumentController accepts from a host. Events can be built directly, from
plain mappings, or loaded from a YAML session file.

Session file format (YAML list, or a mapping with an "events" list):

    - {section: personal, field: name, value: Ada Lovelace}
    - {section: summary, value: Analyst of engines}
    - {append: experience}
    - {section: experience, index: 1, field: title, value: Engineer}
    - {section: skills, index: 0, value: Python}
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from omegaconf import ListConfig, OmegaConf

from folio.contexts.editing.exceptions import InvalidEditEventError, UnknownSectionError

SECTIONS = ("personal", "summary", "experience", "education", "skills")

# Sections addressed by index
INDEXED_SECTIONS = ("experience", "education", "skills")

# Sections whose edits name a field
FIELDED_SECTIONS = ("personal", "experience", "education")


@dataclass(frozen=True)
class FieldEdit:
    """
    Replace one field value.

    Attributes:
        section: One of SECTIONS
        value: New free-text value
        field_name: Field within the entry (None for summary and skills)
        index: Entry index (None for personal and summary)

    Raises:
        UnknownSectionError: If section is not a resume section
        InvalidEditEventError: If an index is missing for an indexed section or given for another
    """

    section: str
    value: str
    field_name: Optional[str] = None
    index: Optional[int] = None

    def __post_init__(self):
        if self.section not in SECTIONS:
            raise UnknownSectionError(self.section, SECTIONS)
        if self.section in INDEXED_SECTIONS:
            if isinstance(self.index, bool) or not isinstance(self.index, int):
                raise InvalidEditEventError(f"Edit for '{self.section}' needs an integer index")
        elif self.index is not None:
            raise InvalidEditEventError(f"Section '{self.section}' is not indexed")


@dataclass(frozen=True)
class AppendEntry:
    """Append a blank entry to an indexed section."""

    section: str

    def __post_init__(self):
        if self.section not in INDEXED_SECTIONS:
            raise UnknownSectionError(self.section, INDEXED_SECTIONS)


EditEvent = Union[FieldEdit, AppendEntry]


def event_from_dict(raw: Mapping[str, Any]) -> EditEvent:
    """
    Build an edit event from a plain mapping.

    Args:
        raw: Mapping with either an "append" key, or "section"/"value" keys plus
             "field" and "index" where the section requires them

    Returns:
        FieldEdit or AppendEntry

    Raises:
        InvalidEditEventError: If required keys are missing or have the wrong shape
        UnknownSectionError: If the section is not a resume section
    """
    raw = dict(raw)

    if "append" in raw:
        return AppendEntry(section=raw["append"])

    section = raw.get("section")
    if section is None:
        raise InvalidEditEventError("Edit event needs a 'section' or 'append' key", raw)
    if section not in SECTIONS:
        raise UnknownSectionError(section, SECTIONS)

    if "value" not in raw or raw["value"] is None:
        raise InvalidEditEventError(f"Edit event for '{section}' has no value", raw)
    value = raw["value"]
    if not isinstance(value, str):
        # YAML has already typed unquoted scalars such as 0123456 or yes
        raise InvalidEditEventError(
            f"Value for '{section}' must be text, got {type(value).__name__} {value!r}; quote it in YAML",
            raw,
        )

    field_name = raw.get("field")
    if section in FIELDED_SECTIONS and not field_name:
        raise InvalidEditEventError(f"Edit event for '{section}' needs a 'field'", raw)
    if section not in FIELDED_SECTIONS and field_name is not None:
        raise InvalidEditEventError(f"Section '{section}' does not take a 'field'", raw)

    index = raw.get("index")
    if section in INDEXED_SECTIONS:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidEditEventError(f"Edit event for '{section}' needs an integer 'index'", raw)
    elif index is not None:
        raise InvalidEditEventError(f"Section '{section}' is not indexed", raw)

    return FieldEdit(section=section, value=value, field_name=field_name, index=index)


def load_edit_session(session_path: Path) -> List[EditEvent]:
    """
    Load a scripted edit session from YAML.

    Args:
        session_path: Path to YAML file holding a list of event mappings, or a
                      mapping with an "events" list

    Returns:
        Edit events in file order

    Raises:
        FileNotFoundError: If session_path does not exist
        InvalidEditEventError: If the file does not hold a list of event mappings
    """
    if type(session_path) is str:
        session_path = Path(session_path)

    if not session_path.exists():
        raise FileNotFoundError(f"Edit session not found: {session_path}")

    loaded = OmegaConf.load(session_path)
    if not isinstance(loaded, ListConfig):
        if "events" not in loaded:
            raise InvalidEditEventError(
                f"Invalid session structure: expected a list or an 'events' key in {session_path}"
            )
        loaded = loaded.events

    raw_events = OmegaConf.to_container(loaded, resolve=True)
    if not isinstance(raw_events, list):
        raise InvalidEditEventError(f"Session 'events' must be a list in {session_path}")

    events = []
    for position, raw in enumerate(raw_events):
        if not isinstance(raw, dict):
            raise InvalidEditEventError(f"Session entry {position} is not a mapping", {"entry": raw})
        events.append(event_from_dict(raw))
    return events
