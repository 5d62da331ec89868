"""
HTML Renderer

Converts a RenderedPreview to HTML: either the preview fragment a host embeds
in its own page, or a standalone print document that carries the print
stylesheet and, optionally, an auto-print script.
"""

from typing import Optional

from folio.contexts.rendering.logger import _log_debug
from folio.contexts.rendering.preview import RenderedPreview
from folio.contexts.rendering.print_settings import PrintSettings
from folio.contexts.rendering.template_registry import TemplateRegistry

PREVIEW_TEMPLATE = "preview"
PRINT_DOCUMENT_TEMPLATE = "print_document"


class PreviewHTMLRenderer:
    """Renders RenderedPreview instances to HTML through Jinja2 templates."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or TemplateRegistry()

    def render_fragment(self, preview: RenderedPreview) -> str:
        """
        Render the preview as an HTML fragment.

        The root element carries id=preview.element_id so a host can target
        exactly that region when printing.

        Args:
            preview: Preview to render

        Returns:
            HTML string for the preview element
        """
        template = self.template_registry.get_template(PREVIEW_TEMPLATE)
        return template.render(preview=preview)

    def render_document(
        self,
        preview: RenderedPreview,
        settings: Optional[PrintSettings] = None,
        auto_print: bool = False,
    ) -> str:
        """
        Render a standalone HTML page for the host print facility.

        Args:
            preview: Preview to render
            settings: Page size, margins and typography (defaults to A4)
            auto_print: Add a script that opens the print dialog on load and
                        closes the window once printing finishes

        Returns:
            Complete HTML document string
        """
        settings = settings or PrintSettings()
        template = self.template_registry.get_template(PRINT_DOCUMENT_TEMPLATE)
        _log_debug(f"Rendering print document (page {settings.page_size}, auto_print={auto_print})")
        return template.render(preview=preview, settings=settings, auto_print=auto_print)


def render_preview_html(preview: RenderedPreview) -> str:
    """Render the preview fragment with the bundled templates."""
    return PreviewHTMLRenderer().render_fragment(preview)


def render_print_document(
    preview: RenderedPreview,
    settings: Optional[PrintSettings] = None,
    auto_print: bool = False,
) -> str:
    """Render a standalone print document with the bundled templates."""
    return PreviewHTMLRenderer().render_document(preview, settings=settings, auto_print=auto_print)
