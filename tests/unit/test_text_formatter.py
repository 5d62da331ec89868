"""Unit tests for plaintext preview formatting."""

import pytest

from folio.contexts.editing import EducationEntry, ExperienceEntry, PersonalInfo, ResumeDocument
from folio.contexts.rendering.preview import build_preview
from folio.contexts.rendering.text_formatter import format_header_text, format_preview_text


@pytest.mark.unit
def test_blank_preview_text():
    assert format_preview_text(build_preview(ResumeDocument.blank())) == "#\n"


@pytest.mark.unit
def test_header_text_shows_link_target():
    info = PersonalInfo(
        name="Ada Lovelace",
        email="ada@x.com",
        location="London",
        linkedin="https://linkedin.com/in/ada",
    )
    lines = format_header_text(build_preview(ResumeDocument(personal_info=info)))

    assert lines == [
        "# Ada Lovelace",
        "ada@x.com",
        "London | LinkedIn (https://linkedin.com/in/ada)",
    ]


@pytest.mark.unit
def test_full_preview_text_sections_in_order():
    doc = ResumeDocument(
        personal_info=PersonalInfo(name="Ada"),
        summary="First programmer.",
        experience=(ExperienceEntry(title="Analyst", company="Engine Co", start_date="1842", end_date="1843"),),
        education=(EducationEntry(degree="Tutoring", gpa="4.0"),),
        skills=("", "Mathematics", "Poetry"),
    )
    text = format_preview_text(build_preview(doc))

    assert text.index("## Professional Summary") < text.index("## Experience")
    assert text.index("## Experience") < text.index("## Education")
    assert text.index("## Education") < text.index("## Skills")
    assert "### Analyst\n*1842 – 1843*\nEngine Co" in text
    assert "GPA: 4.0" in text
    assert text.endswith("- Mathematics\n- Poetry\n")


@pytest.mark.unit
def test_absent_blocks_not_formatted():
    doc = ResumeDocument(personal_info=PersonalInfo(name="Ada"), skills=("Go",))
    text = format_preview_text(build_preview(doc))

    assert "## Experience" not in text
    assert "## Professional Summary" not in text
    assert "## Skills\n\n- Go" in text
