"""
Markdown Renderer

Renders resume records into markdown text documents.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from jinja2 import TemplateError

from fauxcv.contexts.templating.exceptions import TemplateReadError, TemplateRenderError
from fauxcv.contexts.templating.logger import _log_error, log_render_result
from fauxcv.contexts.templating.registries import DEFAULT_TEMPLATE, TemplateRegistry

_default_registry: Optional[TemplateRegistry] = None


def _registry() -> TemplateRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def load_template_file(template_path: Union[str, Path]) -> str:
    """
    Read a caller-supplied template file.

    Raises:
        TemplateReadError: If the file cannot be read
    """
    template_path = Path(template_path)
    try:
        return template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _log_error(f"Cannot read template file: {template_path}")
        raise TemplateReadError(template_path, e) from e


def render_resume(
    record: Union[Dict[str, Any], Any],
    template: Optional[str] = None,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Render a resume record to markdown.

    Args:
        record: ResumeRecord (anything with to_dict()) or its dict form
        template: Template source; None uses the built-in template
        registry: Template registry (default: shared registry)

    Returns:
        Markdown text

    Raises:
        TemplateRenderError: If the template fails to compile or render
    """
    registry = registry or _registry()
    context = record.to_dict() if hasattr(record, "to_dict") else dict(record)
    template_name = DEFAULT_TEMPLATE if template is None else None

    try:
        if template is None:
            compiled = registry.get_template(DEFAULT_TEMPLATE)
        else:
            compiled = registry.from_source(template)
        markdown = compiled.render(context)
    except TemplateError as e:
        _log_error(f"Template rendering failed: {e}")
        raise TemplateRenderError(
            "Failed to render resume template", template_name=template_name, original_error=e
        ) from e

    log_render_result(template_name or "custom template", markdown)
    return markdown
