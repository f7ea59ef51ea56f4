#!/usr/bin/env python3
"""
Fake Resume Generation CLI

Generates realistic fake resumes as JSON records, markdown documents, and PDFs.

Examples:\n

    generate_resume.py                                    # One tech resume, JSON + markdown

    generate_resume.py -i finance -e 10 -f pdf            # Senior finance resume as PDF

    generate_resume.py -c 5 -f pdf --batch-pdf -s 42      # Five resumes in one PDF, reproducible

    generate_resume.py -t my_template.md.jinja -f markdown   # Custom markdown template

    generate_resume.py --list-industries                  # Show valid industries
"""

import asyncio
import json
import os
import re
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from fauxcv import __version__
from fauxcv.contexts.rendering import (
    DocumentReadError,
    RenderingError,
    available_styles,
    export_pdf,
    export_pdf_batch,
)
from fauxcv.contexts.synthesis import (
    GenerationOptions,
    available_industries,
    generate_resume,
    normalize_format,
)
from fauxcv.contexts.synthesis.defaults import RECORD_FORMATS, TEXT_FORMATS
from fauxcv.contexts.templating import TemplateReadError, load_template_file
from fauxcv.utils.logger import setup_logger
from fauxcv.utils.timestamp import now

load_dotenv()
OUTPUT_PATH = Path(os.getenv("FAUXCV_OUTPUT_PATH", "output"))
LOGS_PATH = os.getenv("FAUXCV_LOGS_PATH")

app = typer.Typer(
    help="Generate realistic fake resumes in markdown, JSON, and PDF formats",
    add_completion=False,
)


def slugify(name: str) -> str:
    """'Jane  Doe' -> 'jane-doe'"""
    return re.sub(r"\s+", "-", name.strip().lower())


def output_base_name(person_name: str, output: Optional[str], index: int, count: int) -> str:
    """File stem for one resume; numbered when several are generated."""
    base = output or slugify(person_name)
    return f"{base}-{index + 1}" if count > 1 else base


def fail(message: str) -> None:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def version_callback(value: bool):
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def main(
    industry: Annotated[
        str, typer.Option("--industry", "-i", help="Industry specialization")
    ] = "tech",
    experience: Annotated[
        int, typer.Option("--experience", "-e", help="Years of experience", min=0)
    ] = 5,
    output_format: Annotated[
        str,
        typer.Option(
            "--format", "-f", help="Output format (json, markdown, pdf, both)"
        ),
    ] = "both",
    gender: Annotated[
        Optional[str], typer.Option("--gender", "-g", help="Gender (male, female)")
    ] = None,
    output: Annotated[
        Optional[str], typer.Option("--output", "-o", help="Output file name (without extension)")
    ] = None,
    output_dir: Annotated[
        Path, typer.Option("--output-dir", help="Directory for generated files")
    ] = OUTPUT_PATH,
    linkedin: Annotated[
        bool, typer.Option("--linkedin/--no-linkedin", help="Include LinkedIn profile")
    ] = True,
    website: Annotated[
        bool, typer.Option("--website/--no-website", help="Include personal website")
    ] = True,
    template: Annotated[
        Optional[Path], typer.Option("--template", "-t", help="Custom Jinja2 markdown template file")
    ] = None,
    count: Annotated[
        int, typer.Option("--count", "-c", help="Number of resumes to generate", min=1)
    ] = 1,
    seed: Annotated[
        Optional[int], typer.Option("--seed", "-s", help="Random seed for consistent generation")
    ] = None,
    pdf_style: Annotated[
        str,
        typer.Option(
            "--pdf-style", "-p", help=f"PDF style ({', '.join(available_styles())})"
        ),
    ] = "default",
    pdf_color: Annotated[
        str, typer.Option("--pdf-color", help="Primary color for PDF (hex code)")
    ] = "#0066cc",
    batch_pdf: Annotated[
        bool, typer.Option("--batch-pdf", "-b", help="Create a single PDF containing all resumes")
    ] = False,
    list_industries: Annotated[
        bool, typer.Option("--list-industries", help="List valid industries and exit")
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
):
    """
    Generate one or more fake resumes into the output directory.
    """
    industries = available_industries()
    if list_industries:
        for name in industries:
            typer.echo(name)
        raise typer.Exit()

    # Reject bad input before any file is written
    if industry not in industries:
        fail(f"Invalid industry: {industry}\nAvailable industries: {', '.join(industries)}")
    if gender is not None and gender not in ("male", "female"):
        fail(f"Invalid gender: {gender}. Use 'male' or 'female'")
    try:
        resolved_format = normalize_format(output_format)
    except ValueError as e:
        fail(str(e))

    template_source = None
    if template is not None:
        try:
            template_source = load_template_file(template)
        except TemplateReadError as e:
            fail(str(e))

    output_dir.mkdir(parents=True, exist_ok=True)
    logs_dir = Path(LOGS_PATH) if LOGS_PATH else output_dir / "logs"
    setup_logger(
        context_name="generate",
        log_dir=logs_dir / f"generate_{now()}",
        extra_provenance={"Industry": industry, "Format": resolved_format, "Seed": seed},
    )

    wants_pdf = resolved_format == "visual"
    single_pdfs = wants_pdf and not (batch_pdf and count > 1)

    typer.secho(f"Generating {count} resume(s)...", fg=typer.colors.BLUE)

    names: List[str] = []
    markdown_paths: List[Path] = []

    for i in range(count):
        result = generate_resume(
            GenerationOptions(
                industry=industry,
                experience_years=experience,
                format=resolved_format,
                gender=gender,
                include_linkedin=linkedin,
                include_website=website,
                template=template_source,
                style=pdf_style,
                color=pdf_color,
                seed=None if seed is None else seed + i,
            )
        )

        person_name = result.record.name if result.record else _name_from_markdown(result.markdown)
        base_name = output_base_name(person_name, output, i, count)
        files: List[Path] = []

        if resolved_format in RECORD_FORMATS:
            json_path = output_dir / f"{base_name}.json"
            json_path.write_text(_record_json(result.record), encoding="utf-8")
            files.append(json_path)

        if resolved_format in TEXT_FORMATS:
            markdown_path = output_dir / f"{base_name}.md"
            markdown_path.write_text(result.markdown, encoding="utf-8")
            files.append(markdown_path)
            markdown_paths.append(markdown_path)

        if single_pdfs:
            pdf_path = output_dir / f"{base_name}.pdf"
            try:
                asyncio.run(
                    export_pdf(
                        markdown_path, pdf_path, style=pdf_style, color=pdf_color, name=person_name
                    )
                )
            except (DocumentReadError, RenderingError) as e:
                fail(f"Error generating PDF: {e}")
            files.append(pdf_path)

        names.append(person_name)
        typer.secho(f"✓ Resume for {person_name} generated successfully", fg=typer.colors.GREEN)
        for path in files:
            typer.echo(f"  - {path}")

    if wants_pdf and not single_pdfs:
        pdf_path = output_dir / f"{output or 'batch-resumes'}.pdf"
        typer.secho(
            f"Generating batch PDF with {len(markdown_paths)} resumes...", fg=typer.colors.BLUE
        )
        try:
            asyncio.run(
                export_pdf_batch(
                    markdown_paths, pdf_path, style=pdf_style, color=pdf_color, names=names
                )
            )
        except (DocumentReadError, RenderingError) as e:
            fail(f"Error generating batch PDF: {e}")
        typer.secho("✓ Batch PDF generated successfully", fg=typer.colors.GREEN)
        typer.echo(f"  - {pdf_path}")

    typer.secho(f"\n{count} resume(s) generated in '{output_dir}'", fg=typer.colors.GREEN)


def _record_json(record) -> str:
    return json.dumps(record.to_dict(), indent=2, ensure_ascii=False) + "\n"


def _name_from_markdown(markdown: str) -> str:
    """First '# ' heading of a rendered resume, or 'resume' when there is none."""
    for line in markdown.splitlines():
        if line.startswith("# "):
            return line[2:].strip()
    return "resume"


if __name__ == "__main__":
    app()
