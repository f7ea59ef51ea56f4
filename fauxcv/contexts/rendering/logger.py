"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_export_start(output_file: Path, document_count: int, style: str) -> None:
    """Log start of a PDF export."""
    _log_info(f"Exporting {document_count} document(s) to {output_file}")
    _log_debug(f"  Style: {style}")


def log_export_result(output_file: Path, elapsed_time: float) -> None:
    _log_success(f"PDF written: {output_file} ({elapsed_time:.2f}s)")


def log_export_failure(output_file: Path, error: Exception, elapsed_time: float) -> None:
    """Log a failed export with its cause."""
    _log_error(f"Failed to export {output_file} ({elapsed_time:.2f}s)")
    _log_error(f"  Error: {error}")
