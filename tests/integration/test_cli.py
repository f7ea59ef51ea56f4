"""
Integration tests for the generate_resume CLI.

PDF export is replaced with in-process fakes; the real browser path is covered
by test_browser_export.py.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import generate_resume as cli
from fauxcv import __version__
from fauxcv.contexts.rendering import RenderingError

runner = CliRunner()


@pytest.fixture
def out_dir(tmp_path):
    return tmp_path / "out"


@pytest.fixture
def pdf_calls(monkeypatch):
    """Replace both export functions with fakes that record their arguments."""
    calls = {"single": [], "batch": []}

    async def fake_export_pdf(markdown_file, output_file, style, color, name):
        calls["single"].append(
            {"markdown": Path(markdown_file), "output": Path(output_file), "name": name,
             "style": style, "color": color}
        )
        Path(output_file).write_bytes(b"%PDF-1.4\n")

    async def fake_export_pdf_batch(markdown_files, output_file, style, color, names):
        calls["batch"].append(
            {"markdown": [Path(p) for p in markdown_files], "output": Path(output_file),
             "names": list(names)}
        )
        Path(output_file).write_bytes(b"%PDF-1.4\n")

    monkeypatch.setattr(cli, "export_pdf", fake_export_pdf)
    monkeypatch.setattr(cli, "export_pdf_batch", fake_export_pdf_batch)
    return calls


def invoke(*args):
    return runner.invoke(cli.app, [str(a) for a in args])


@pytest.mark.integration
def test_version():
    result = invoke("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.integration
def test_list_industries():
    result = invoke("--list-industries")
    assert result.exit_code == 0
    assert result.output.split() == ["tech", "finance", "healthcare", "marketing", "education"]


@pytest.mark.integration
def test_invalid_industry_writes_nothing(out_dir):
    result = invoke("--industry", "astronaut", "--output-dir", out_dir)

    assert result.exit_code == 1
    assert "Invalid industry: astronaut" in result.output
    assert "tech, finance, healthcare, marketing, education" in result.output
    assert not out_dir.exists()


@pytest.mark.integration
@pytest.mark.parametrize(
    "args, message",
    [
        (["--gender", "other"], "Invalid gender"),
        (["--format", "docx"], "Invalid format"),
    ],
)
def test_invalid_options(out_dir, args, message):
    result = invoke(*args, "--output-dir", out_dir)
    assert result.exit_code == 1
    assert message in result.output
    assert not out_dir.exists()


@pytest.mark.integration
def test_missing_template_file(tmp_path, out_dir):
    result = invoke("--template", tmp_path / "nope.md", "--output-dir", out_dir)
    assert result.exit_code == 1
    assert "Cannot read template file" in result.output
    assert not out_dir.exists()


@pytest.mark.integration
def test_default_writes_json_and_markdown(out_dir):
    result = invoke("--output", "jane", "--seed", 7, "--output-dir", out_dir)

    assert result.exit_code == 0, result.output
    record = json.loads((out_dir / "jane.json").read_text(encoding="utf-8"))
    markdown = (out_dir / "jane.md").read_text(encoding="utf-8")

    assert set(record) == {
        "name", "contactInfo", "summary", "experience", "education",
        "skillCategories", "certifications",
    }
    assert record["experience"][0]["endDate"] == "Present"
    assert markdown.startswith(f"# {record['name']}\n")
    assert f"Resume for {record['name']} generated successfully" in result.output


@pytest.mark.integration
def test_name_slug_is_default_file_name(out_dir):
    result = invoke("--format", "json", "--seed", 3, "--output-dir", out_dir)

    assert result.exit_code == 0, result.output
    [json_path] = out_dir.glob("*.json")
    record = json.loads(json_path.read_text(encoding="utf-8"))
    assert json_path.stem == cli.slugify(record["name"])
    assert not list(out_dir.glob("*.md"))


@pytest.mark.integration
def test_count_numbers_files_and_offsets_seed(tmp_path):
    result = invoke(
        "--count", 3, "--format", "json", "--output", "person", "--seed", 10,
        "--output-dir", tmp_path / "a",
    )
    assert result.exit_code == 0, result.output
    names = [
        json.loads((tmp_path / "a" / f"person-{i}.json").read_text())["name"] for i in (1, 2, 3)
    ]

    # Record i of a seeded run matches a single run seeded with seed + i
    single = invoke(
        "--format", "json", "--output", "single", "--seed", 12, "--output-dir", tmp_path / "b"
    )
    assert single.exit_code == 0, single.output
    assert json.loads((tmp_path / "b" / "single.json").read_text())["name"] == names[2]


@pytest.mark.integration
def test_flags_reach_the_record(out_dir):
    result = invoke(
        "--no-linkedin", "--no-website", "--industry", "healthcare", "--experience", 1,
        "--format", "json", "--output", "x", "--output-dir", out_dir,
    )
    assert result.exit_code == 0, result.output

    record = json.loads((out_dir / "x.json").read_text())
    assert record["contactInfo"]["linkedin"] is None
    assert record["contactInfo"]["website"] is None
    assert "1 years" in record["summary"]


@pytest.mark.integration
def test_custom_template(tmp_path, out_dir):
    template = tmp_path / "short.md.jinja"
    template.write_text("# {{ name }}\n{{ contactInfo.email }}\n", encoding="utf-8")

    result = invoke(
        "--template", template, "--format", "markdown", "--output", "short",
        "--output-dir", out_dir,
    )
    assert result.exit_code == 0, result.output

    lines = (out_dir / "short.md").read_text().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("# ")
    assert "@" in lines[1]


@pytest.mark.integration
def test_logs_are_written(out_dir):
    result = invoke("--format", "json", "--output", "x", "--output-dir", out_dir)
    assert result.exit_code == 0, result.output

    if cli.LOGS_PATH:
        pytest.skip("FAUXCV_LOGS_PATH is set in the environment")
    log_files = list((out_dir / "logs").glob("generate_*/generate.log"))
    assert len(log_files) == 1
    assert "[synth]" in log_files[0].read_text()


@pytest.mark.integration
def test_pdf_format_exports_each_resume(out_dir, pdf_calls):
    result = invoke(
        "--format", "pdf", "--count", 2, "--output", "r", "--pdf-style", "modern",
        "--pdf-color", "#112233", "--output-dir", out_dir,
    )
    assert result.exit_code == 0, result.output

    assert [call["output"].name for call in pdf_calls["single"]] == ["r-1.pdf", "r-2.pdf"]
    assert [call["markdown"].name for call in pdf_calls["single"]] == ["r-1.md", "r-2.md"]
    assert all(call["style"] == "modern" for call in pdf_calls["single"])
    assert all(call["color"] == "#112233" for call in pdf_calls["single"])
    assert all(call["name"] and call["name"] != "resume" for call in pdf_calls["single"])
    assert pdf_calls["batch"] == []
    assert not list(out_dir.glob("*.json"))


@pytest.mark.integration
def test_batch_pdf(out_dir, pdf_calls):
    result = invoke("--format", "pdf", "--count", 3, "--batch-pdf", "--output-dir", out_dir)
    assert result.exit_code == 0, result.output

    assert pdf_calls["single"] == []
    [batch] = pdf_calls["batch"]
    assert batch["output"] == out_dir / "batch-resumes.pdf"
    assert len(batch["markdown"]) == 3
    assert len(batch["names"]) == 3
    assert (out_dir / "batch-resumes.pdf").exists()


@pytest.mark.integration
def test_batch_flag_with_single_resume_exports_individually(out_dir, pdf_calls):
    result = invoke("--format", "pdf", "--batch-pdf", "--output", "solo", "--output-dir", out_dir)
    assert result.exit_code == 0, result.output

    assert [call["output"].name for call in pdf_calls["single"]] == ["solo.pdf"]
    assert pdf_calls["batch"] == []


@pytest.mark.integration
def test_pdf_failure_exits_nonzero(out_dir, monkeypatch):
    async def broken_export(markdown_file, output_file, style, color, name):
        raise RenderingError("PDF export failed", output_path=output_file)

    monkeypatch.setattr(cli, "export_pdf", broken_export)

    result = invoke("--format", "pdf", "--output-dir", out_dir)
    assert result.exit_code == 1
    assert "Error generating PDF" in result.output
