"""
Rendering Context

Responsibilities:
- Converts markdown resumes to HTML and paginates them to PDF
- Combines several resumes into one PDF with page breaks
- Resolves named style sheets
- Manages temporary HTML files and browser sessions

Owns: PDF export, style sheets, rendering backends
Never: Modifies resume content
"""

from fauxcv.contexts.rendering.backends import (
    DocumentRenderer,
    MarkdownConverter,
    PlaywrightRenderer,
    PythonMarkdownConverter,
    RenderSession,
)
from fauxcv.contexts.rendering.exceptions import DocumentReadError, RenderingError
from fauxcv.contexts.rendering.exporter import export_pdf, export_pdf_batch
from fauxcv.contexts.rendering.styles import (
    available_styles,
    get_style,
    get_style_with_page_breaks,
)

__all__ = [
    "export_pdf",
    "export_pdf_batch",
    "get_style",
    "get_style_with_page_breaks",
    "available_styles",
    "MarkdownConverter",
    "DocumentRenderer",
    "RenderSession",
    "PythonMarkdownConverter",
    "PlaywrightRenderer",
    "DocumentReadError",
    "RenderingError",
]
