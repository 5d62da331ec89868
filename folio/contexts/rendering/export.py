"""
Export / Print Handoff

FOLIO never encodes PDFs or images. Exporting means handing the current
preview, already rendered to a standalone print document, to a host
"print target" capability. The handoff is fire-and-forget: the core does not
track completion, and a failing or unavailable target is logged, not raised.

Export kinds:
- PDF: print document opens the print dialog on load, then closes ("Save as PDF")
- IMAGE: print document opens without printing, for capture as an image
- PRINT: print the preview in place (same document as PDF)
"""

import os
import re
import webbrowser
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from folio.contexts.rendering.html_renderer import PreviewHTMLRenderer
from folio.contexts.rendering.logger import _log_debug, log_export_result, log_export_start
from folio.contexts.rendering.preview import RenderedPreview
from folio.contexts.rendering.print_settings import PrintSettings

load_dotenv()
EXPORTS_PATH = Path(os.getenv("EXPORTS_PATH", "outs/exports"))


class ExportKind(str, Enum):
    PDF = "pdf"
    IMAGE = "image"
    PRINT = "print"

    @property
    def auto_print(self) -> bool:
        """Whether the print document should open the print dialog itself."""
        return self is not ExportKind.IMAGE


@dataclass(frozen=True)
class PrintJob:
    """
    Everything a print target receives.

    Attributes:
        kind: Requested export kind
        title: Document title
        preview: The rendered preview, intact
        html: Standalone print document for the preview
        settings: Page policy the document was rendered with
    """

    kind: ExportKind
    title: str
    preview: RenderedPreview
    html: str
    settings: PrintSettings


class PrintTarget(ABC):
    """
    Abstract base for host print/export capabilities.

    Subclasses implement submit(); they own their failure domain and may
    raise freely, since request_export() never lets a target error escape.
    """

    name: str = "print target"

    @abstractmethod
    def submit(self, job: PrintJob) -> None:
        """Produce the print/export side effect for a job."""
        pass


class HTMLFileTarget(PrintTarget):
    """Headless host: writes the print document to a timestamped HTML file."""

    name = "html file"

    def __init__(self, output_dir: Path = EXPORTS_PATH):
        self.output_dir = Path(output_dir)
        self.last_path: Optional[Path] = None

    def output_path(self, job: PrintJob) -> Path:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        slug = re.sub(r"[^a-z0-9]+", "_", job.title.lower()).strip("_") or "resume"
        return self.output_dir / f"{slug}_{job.kind.value}_{stamp}.html"

    def submit(self, job: PrintJob) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_path(job)
        path.write_text(job.html, encoding="utf-8")
        self.last_path = path
        _log_debug(f"  Wrote {path}")


class BrowserTarget(HTMLFileTarget):
    """Desktop host: writes the print document and opens it in the system browser."""

    name = "browser"

    def submit(self, job: PrintJob) -> None:
        super().submit(job)
        if not webbrowser.open(self.last_path.resolve().as_uri()):
            raise RuntimeError("No web browser available to open the print document")


def request_export(
    preview: RenderedPreview,
    target: PrintTarget,
    kind: ExportKind = ExportKind.PDF,
    settings: Optional[PrintSettings] = None,
    renderer: Optional[PreviewHTMLRenderer] = None,
) -> None:
    """
    Hand a preview to a print target.

    Args:
        preview: Preview to export, passed to the target unchanged
        target: Host print capability
        kind: Export kind (str values "pdf", "image", "print" are accepted)
        settings: Page policy (defaults to A4 with 20mm margins)
        renderer: HTML renderer (defaults to the bundled templates)
    """
    kind = ExportKind(kind)
    settings = settings or PrintSettings()
    renderer = renderer or PreviewHTMLRenderer()

    html = renderer.render_document(preview, settings=settings, auto_print=kind.auto_print)
    job = PrintJob(kind=kind, title=settings.title, preview=preview, html=html, settings=settings)

    log_export_start(kind.value, target.name, preview.blocks)
    try:
        target.submit(job)
    except Exception as e:
        # Host owns this failure domain; the document is unaffected
        log_export_result(kind.value, target.name, error=e)
        return
    log_export_result(kind.value, target.name)
