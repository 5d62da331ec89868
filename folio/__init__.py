"""
FOLIO - Form-Oriented Layout for Individual Overviews

A resume builder that binds field-level form edits to a structured resume
document and derives a print-ready preview from it.

Architecture:
- Editing Context: Resume document model and the controller that applies edits
- Rendering Context: Preview derivation, HTML output, and host print/export handoff
"""

__version__ = "0.1.0"
