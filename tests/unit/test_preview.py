"""Unit tests for Rendered Preview derivation."""

import pytest

from folio.contexts.editing import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeDocument,
)
from folio.contexts.rendering.preview import (
    PREVIEW_ELEMENT_ID,
    ProfileLink,
    build_preview,
)


def _doc(**kwargs) -> ResumeDocument:
    return ResumeDocument(**kwargs)


@pytest.mark.unit
def test_blank_document_has_only_header():
    preview = build_preview(ResumeDocument.blank())

    assert preview.blocks == ["header"]
    assert preview.header.lines() == ["", "", ""]
    assert preview.element_id == PREVIEW_ELEMENT_ID


@pytest.mark.unit
@pytest.mark.parametrize(
    "email, phone, expected",
    [
        ("a@x.com", "", "a@x.com"),
        ("", "555-1234", "555-1234"),
        ("a@x.com", "555-1234", "a@x.com | 555-1234"),
        ("", "", ""),
    ],
)
def test_contact_line_has_no_dangling_separator(email, phone, expected):
    preview = build_preview(_doc(personal_info=PersonalInfo(email=email, phone=phone)))
    assert preview.header.lines()[1] == expected


@pytest.mark.unit
def test_location_line_with_profile_link():
    """The profile link keeps the raw URL as its target."""
    info = PersonalInfo(location="London", linkedin="linkedin.com/in/ada")
    header = build_preview(_doc(personal_info=info)).header

    assert header.profile_link == ProfileLink(label="LinkedIn", href="linkedin.com/in/ada")
    assert header.location_line == "London | LinkedIn"


@pytest.mark.unit
def test_location_line_without_link():
    assert build_preview(_doc(personal_info=PersonalInfo(location="London"))).header.location_line == "London"


@pytest.mark.unit
def test_location_line_always_separates_link_label():
    """The link label is appended with " | " even when location is empty."""
    header = build_preview(_doc(personal_info=PersonalInfo(linkedin="https://x"))).header
    assert header.location_line == " | LinkedIn"
    assert header.lines()[2] == " | LinkedIn"


@pytest.mark.unit
def test_name_is_verbatim():
    preview = build_preview(_doc(personal_info=PersonalInfo(name="  Ada  Lovelace ")))
    assert preview.header.name == "  Ada  Lovelace "


@pytest.mark.unit
def test_experience_block_requires_title_or_company():
    """Blank experience yields no block; a title makes it appear."""
    assert build_preview(ResumeDocument.blank()).experience is None

    doc = _doc(experience=(ExperienceEntry(title="Engineer"),))
    items = build_preview(doc).experience

    assert len(items) == 1
    assert items[0].title == "Engineer"


@pytest.mark.unit
def test_experience_skips_unlisted_entries_individually():
    doc = _doc(
        experience=(
            ExperienceEntry(company="Acme"),
            ExperienceEntry(location="Paris", description="orphan"),
            ExperienceEntry(title="Lead"),
        )
    )
    items = build_preview(doc).experience

    assert [item.place_line for item in items] == ["Acme", ""]
    assert [item.title for item in items] == ["", "Lead"]


@pytest.mark.unit
def test_experience_item_fields_are_verbatim():
    entry = ExperienceEntry(
        title="Engineer",
        company="Acme",
        location="Berlin",
        start_date="Jan 2020",
        end_date="Present",
        description="Built things.",
    )
    item = build_preview(_doc(experience=(entry,))).experience[0]

    assert item.date_range == "Jan 2020 – Present"
    assert item.place_line == "Acme, Berlin"
    assert item.description == "Built things."


@pytest.mark.unit
def test_education_block_and_gpa_line():
    doc = _doc(
        education=(
            EducationEntry(degree="BSc", school="MIT", location="Cambridge", graduation_date="2019"),
            EducationEntry(location="nowhere"),
            EducationEntry(school="ETH", gpa="5.5"),
        )
    )
    items = build_preview(doc).education

    assert len(items) == 2
    assert items[0].place_line == "MIT, Cambridge"
    assert items[0].graduation_date == "2019"
    assert items[0].gpa_line is None
    assert items[1].gpa_line == "GPA: 5.5"


@pytest.mark.unit
def test_education_block_absent_without_degree_or_school():
    doc = _doc(education=(EducationEntry(gpa="4.0", location="Rome"),))
    assert build_preview(doc).education is None


@pytest.mark.unit
def test_skills_filter_blanks_and_keep_order():
    doc = _doc(skills=("", "Go", "", "Rust"))
    preview = build_preview(doc)

    assert preview.skills == ("Go", "Rust")
    # Blanks remain in the document itself
    assert doc.skills == ("", "Go", "", "Rust")


@pytest.mark.unit
def test_skills_block_absent_when_all_blank():
    assert build_preview(_doc(skills=("", ""))).skills is None


@pytest.mark.unit
def test_preview_is_idempotent():
    doc = _doc(
        personal_info=PersonalInfo(name="Ada"),
        summary="Hi",
        experience=(ExperienceEntry(title="Engineer"),),
        skills=("Go",),
    )
    assert build_preview(doc) == build_preview(doc)
    assert build_preview(doc).blocks == ["header", "summary", "experience", "skills"]
