"""
Integration tests for the export handoff to host print targets.
"""

import pytest

from folio.contexts.editing.controller import DocumentController
from folio.contexts.rendering import export as export_module
from folio.contexts.rendering.export import (
    BrowserTarget,
    ExportKind,
    HTMLFileTarget,
    PrintJob,
    PrintTarget,
    request_export,
)
from folio.contexts.rendering.print_settings import PrintSettings


class RecordingTarget(PrintTarget):
    """Host stand-in that keeps every job it receives."""

    name = "recorder"

    def __init__(self):
        self.jobs = []

    def submit(self, job: PrintJob) -> None:
        self.jobs.append(job)


class UnavailableTarget(PrintTarget):
    name = "unavailable"

    def submit(self, job: PrintJob) -> None:
        raise OSError("print service unavailable")


@pytest.fixture
def controller():
    controller = DocumentController()
    controller.set_personal_field("name", "Ada Lovelace")
    controller.set_skill(0, "Mathematics")
    return controller


@pytest.mark.integration
def test_export_hands_over_current_preview(controller):
    target = RecordingTarget()

    controller.export(target, kind=ExportKind.PDF)

    assert len(target.jobs) == 1
    job = target.jobs[0]
    assert job.kind is ExportKind.PDF
    assert job.preview == controller.preview
    assert job.title == "Resume"
    assert 'id="resume-preview"' in job.html
    assert "Ada Lovelace" in job.html
    assert "window.print();" in job.html


@pytest.mark.integration
def test_image_export_does_not_auto_print(controller):
    target = RecordingTarget()

    request_export(controller.preview, target, kind="image")

    assert target.jobs[0].kind is ExportKind.IMAGE
    assert "window.print()" not in target.jobs[0].html


@pytest.mark.integration
def test_export_uses_given_settings(controller):
    target = RecordingTarget()
    settings = PrintSettings(page_width="8.5in", page_height="11in")

    controller.export(target, kind=ExportKind.PRINT, settings=settings)

    assert target.jobs[0].settings is settings
    assert "size: 8.5in 11in;" in target.jobs[0].html


@pytest.mark.integration
def test_target_failure_is_not_raised(controller):
    """Host failures stay in the host's domain; the document is untouched."""
    before = controller.document

    assert controller.export(UnavailableTarget()) is None
    assert controller.document is before


@pytest.mark.integration
def test_invalid_kind_is_a_programming_error(controller):
    with pytest.raises(ValueError):
        request_export(controller.preview, RecordingTarget(), kind="png")


@pytest.mark.integration
def test_html_file_target_writes_document(controller, tmp_path):
    target = HTMLFileTarget(tmp_path / "exports")

    controller.export(target, kind=ExportKind.IMAGE)

    assert target.last_path is not None
    assert target.last_path.parent == tmp_path / "exports"
    assert target.last_path.name.startswith("resume_image_")
    content = target.last_path.read_text(encoding="utf-8")
    assert "Ada Lovelace" in content


@pytest.mark.integration
@pytest.mark.parametrize(
    "title, prefix",
    [
        ("Ada/CV 2024", "ada_cv_2024_pdf_"),
        ("../../escape", "escape_pdf_"),
        ("///", "resume_pdf_"),
    ],
)
def test_html_file_target_slugifies_title(controller, tmp_path, title, prefix):
    """Path separators in the print title never leave the output directory."""
    target = HTMLFileTarget(tmp_path)

    controller.export(target, settings=PrintSettings(title=title))

    assert target.last_path is not None
    assert target.last_path.parent == tmp_path
    assert target.last_path.name.startswith(prefix)
    assert target.last_path.exists()


@pytest.mark.integration
def test_browser_target_opens_written_file(controller, tmp_path, monkeypatch):
    opened = []
    monkeypatch.setattr(export_module.webbrowser, "open", lambda uri: opened.append(uri) or True)
    target = BrowserTarget(tmp_path)

    controller.export(target)

    assert opened == [target.last_path.resolve().as_uri()]


@pytest.mark.integration
def test_browser_target_without_browser_is_inert(controller, tmp_path, monkeypatch):
    monkeypatch.setattr(export_module.webbrowser, "open", lambda uri: False)
    target = BrowserTarget(tmp_path)

    controller.export(target)

    # File is still written; the missing browser is only logged
    assert target.last_path.exists()
