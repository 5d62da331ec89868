"""Unit tests for the resume document value types."""

from dataclasses import FrozenInstanceError

import pytest

from folio.contexts.editing import EducationEntry, ExperienceEntry, PersonalInfo, ResumeDocument
from folio.contexts.editing.resume_data_structure import (
    EDUCATION_FIELDS,
    EXPERIENCE_FIELDS,
    PERSONAL_FIELDS,
)


@pytest.mark.unit
def test_field_names():
    assert PERSONAL_FIELDS == ("name", "email", "phone", "location", "linkedin")
    assert EXPERIENCE_FIELDS == (
        "title",
        "company",
        "location",
        "start_date",
        "end_date",
        "description",
    )
    assert EDUCATION_FIELDS == ("degree", "school", "location", "graduation_date", "gpa")


@pytest.mark.unit
def test_blank_document_has_one_entry_per_collection():
    doc = ResumeDocument.blank()
    assert len(doc.experience) == 1
    assert len(doc.education) == 1
    assert len(doc.skills) == 1
    assert doc.summary == ""
    assert doc.personal_info == PersonalInfo()


@pytest.mark.unit
def test_documents_are_frozen():
    doc = ResumeDocument.blank()
    with pytest.raises(FrozenInstanceError):
        doc.summary = "changed"
    with pytest.raises(FrozenInstanceError):
        doc.experience[0].title = "changed"


@pytest.mark.unit
def test_is_listed():
    assert not ExperienceEntry(location="Paris").is_listed
    assert ExperienceEntry(company="Acme").is_listed
    assert not EducationEntry(gpa="4.0").is_listed
    assert EducationEntry(school="MIT").is_listed


@pytest.mark.unit
def test_to_dict_snapshot():
    doc = ResumeDocument(
        personal_info=PersonalInfo(name="Ada"),
        experience=(ExperienceEntry(title="Engineer"),),
        skills=("Go", ""),
    )
    data = doc.to_dict()

    assert data["personal_info"]["name"] == "Ada"
    assert data["experience"] == [
        {
            "title": "Engineer",
            "company": "",
            "location": "",
            "start_date": "",
            "end_date": "",
            "description": "",
        }
    ]
    assert data["education"][0]["gpa"] == ""
    assert data["skills"] == ["Go", ""]
