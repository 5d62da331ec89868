"""
Rendering Context

Responsibilities:
- Derives the Rendered Preview from a ResumeDocument
- Renders the preview as HTML (fragment or standalone print document) or text
- Resolves print settings (page size, margins, typography) from presets
- Hands rendered content to host print/export targets

Owns: Preview derivation, HTML templates, print policy, export handoff
Never: Modifies the document, encodes PDFs or images
"""
