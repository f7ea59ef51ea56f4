"""Shared fixtures."""

from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

import pytest
from loguru import logger

from fauxcv.contexts.synthesis import get_profile

FIXED_NOW = datetime(2024, 3, 15, 12, 0, 0)


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2024-03-15 12:00."""
    return lambda: FIXED_NOW


@pytest.fixture
def tech_profile():
    return get_profile("tech")


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test (the CLI adds file and stdout sinks)."""
    yield
    logger.remove()


class RecordingRenderer:
    """
    In-memory DocumentRenderer.

    Captures the HTML the pipeline hands over, writes a placeholder PDF, and
    counts session open/close so tests can check cleanup.
    """

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.html = None
        self.html_path = None
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def session(self):
        self.opened += 1
        try:
            yield self
        finally:
            self.closed += 1

    async def render_pdf(self, html_path: Path, output_path: Path) -> None:
        self.html_path = Path(html_path)
        self.html = self.html_path.read_text(encoding="utf-8")
        if self.fail:
            raise RuntimeError("browser crashed")
        Path(output_path).write_bytes(b"%PDF-1.4\n% fake\n")


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()


@pytest.fixture
def failing_renderer():
    return RecordingRenderer(fail=True)
