"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional


class TemplateReadError(OSError):
    """
    Exception raised when a template file cannot be read.

    Attributes:
        template_path: Path that failed to load
        original_error: The underlying I/O error
    """

    def __init__(self, template_path: Path, original_error: Optional[Exception] = None):
        self.template_path = Path(template_path)
        self.original_error = original_error

        message = f"Cannot read template file: {self.template_path}"
        if original_error:
            message += f" ({original_error})"
        super().__init__(message)


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        template_name: Name of the template (None for caller-supplied source)
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.original_error = original_error

        parts = [message]

        if template_name:
            parts.append(f"\nTemplate: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
