"""
Templating Context

Responsibilities:
- Renders resume records into markdown text documents
- Loads and caches the built-in template; compiles caller-supplied templates

Owns: Markdown template system, record-to-text rendering
Never: Generates resume content
"""

from fauxcv.contexts.templating.exceptions import TemplateReadError, TemplateRenderError
from fauxcv.contexts.templating.registries import DEFAULT_TEMPLATE, TemplateRegistry
from fauxcv.contexts.templating.renderer import load_template_file, render_resume

__all__ = [
    "render_resume",
    "load_template_file",
    "TemplateRegistry",
    "DEFAULT_TEMPLATE",
    "TemplateReadError",
    "TemplateRenderError",
]
