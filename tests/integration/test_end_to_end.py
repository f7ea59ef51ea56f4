"""
End-to-end tests: generated records through markdown rendering and the export
pipeline, with the real markdown converter and an in-memory renderer.
"""

import asyncio
import html
import re

import pytest

from fauxcv.contexts.rendering import export_pdf, export_pdf_batch
from fauxcv.contexts.synthesis import GenerationOptions, generate_resume


@pytest.mark.integration
def test_generated_resume_to_pdf(tmp_path, fixed_clock, recording_renderer):
    output = generate_resume(
        GenerationOptions(industry="marketing", experience_years=9, format="visual", seed=21),
        clock=fixed_clock,
    )
    assert output.record is None

    markdown_path = tmp_path / "resume.md"
    markdown_path.write_text(output.markdown, encoding="utf-8")
    name = output.markdown.splitlines()[0][2:]

    asyncio.run(
        export_pdf(
            markdown_path,
            tmp_path / "resume.pdf",
            style="professional",
            name=name,
            renderer=recording_renderer,
        )
    )

    document = recording_renderer.html
    assert f"<h1>{html.escape(name, quote=False)}</h1>" in document
    for section in ("Summary", "Experience", "Education", "Skills"):
        assert f"<h2>{section}</h2>" in document
    assert "<li>" in document
    assert (tmp_path / "resume.pdf").exists()
    assert not list(tmp_path.glob(".temp-*"))


@pytest.mark.integration
def test_generated_batch_to_pdf(tmp_path, fixed_clock, recording_renderer):
    paths, names = [], []
    for i, industry in enumerate(["tech", "finance", "education"]):
        result = generate_resume(
            GenerationOptions(industry=industry, seed=100 + i), clock=fixed_clock
        )
        path = tmp_path / f"resume-{i}.md"
        path.write_text(result.markdown, encoding="utf-8")
        paths.append(path)
        names.append(result.record.name)

    asyncio.run(
        export_pdf_batch(paths, tmp_path / "batch.pdf", names=names, renderer=recording_renderer)
    )

    document = recording_renderer.html
    data_names = [html.unescape(n) for n in re.findall(r'data-name="([^"]*)"', document)]
    assert data_names == names
    assert document.count('<div class="page-break"></div>') == 2
    assert document.count("<h1>") == 3
