"""
Integration tests for PDF export through headless Chromium.

Skipped unless Playwright's Chromium build is installed
(python -m playwright install chromium).
"""

import asyncio
import os
from pathlib import Path

import pytest

from fauxcv.contexts.rendering import export_pdf, export_pdf_batch


def _chromium_installed() -> bool:
    browsers_path = os.getenv("PLAYWRIGHT_BROWSERS_PATH")
    roots = [Path(browsers_path)] if browsers_path else []
    roots.append(Path.home() / ".cache" / "ms-playwright")
    return any(root.is_dir() and any(root.glob("chromium*")) for root in roots)


skip_if_no_chromium = pytest.mark.skipif(
    not _chromium_installed(),
    reason="Chromium not installed - run: python -m playwright install chromium",
)

RESUME_MD = """# Jane Doe

jane.doe@example.com | 555-123-4567 | Springfield, IL

## Summary
Experienced Software Engineer with 5 years of proven expertise.

## Experience
### Software Engineer | TechCorp | March 2021 - Present
- Built things
"""


@pytest.mark.integration
@pytest.mark.browser
@skip_if_no_chromium
def test_export_single_pdf(tmp_path):
    markdown_path = tmp_path / "jane-doe.md"
    markdown_path.write_text(RESUME_MD, encoding="utf-8")
    output = tmp_path / "jane-doe.pdf"

    asyncio.run(export_pdf(markdown_path, output, style="modern", name="Jane Doe"))

    assert output.read_bytes()[:5] == b"%PDF-"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["jane-doe.md", "jane-doe.pdf"]


@pytest.mark.integration
@pytest.mark.browser
@skip_if_no_chromium
def test_export_batch_pdf(tmp_path):
    paths = []
    for i in range(2):
        path = tmp_path / f"resume-{i}.md"
        path.write_text(RESUME_MD.replace("Jane Doe", f"Person {i}"), encoding="utf-8")
        paths.append(path)
    output = tmp_path / "batch.pdf"

    asyncio.run(export_pdf_batch(paths, output, names=["Person 0", "Person 1"]))

    assert output.read_bytes()[:5] == b"%PDF-"
    assert not list(tmp_path.glob(".temp-*"))
