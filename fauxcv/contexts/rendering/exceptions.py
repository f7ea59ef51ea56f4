"""Custom exceptions for rendering context."""

from pathlib import Path
from typing import Optional


class DocumentReadError(OSError):
    """
    Exception raised when a markdown source document cannot be read.

    Attributes:
        document_path: Path that failed to load
        original_error: The underlying I/O error
    """

    def __init__(self, document_path: Path, original_error: Optional[Exception] = None):
        self.document_path = Path(document_path)
        self.original_error = original_error

        message = f"Cannot read markdown document: {self.document_path}"
        if original_error:
            message += f" ({original_error})"
        super().__init__(message)


class RenderingError(Exception):
    """
    Exception raised when markdown conversion or PDF rendering fails.

    Attributes:
        message: Error description
        output_path: PDF that was being produced
        original_error: The underlying converter or browser error
    """

    def __init__(
        self,
        message: str,
        output_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.output_path = output_path
        self.original_error = original_error

        parts = [message]
        if output_path:
            parts.append(f"Output: {output_path}")
        if original_error:
            parts.append(f"Cause: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
