"""
PDF Export Pipeline

Converts markdown resumes into paginated PDF documents, one resume per file or
many resumes in one file separated by page breaks.

Each export call owns its temporary HTML file and its browser session; both
are released on every exit path.
"""

import os
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from fauxcv.contexts.rendering.backends import (
    DocumentRenderer,
    MarkdownConverter,
    PlaywrightRenderer,
    PythonMarkdownConverter,
)
from fauxcv.contexts.rendering.exceptions import DocumentReadError, RenderingError
from fauxcv.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    log_export_failure,
    log_export_result,
    log_export_start,
)
from fauxcv.contexts.rendering.styles import (
    DEFAULT_STYLE,
    get_style,
    get_style_with_page_breaks,
    resolve_style,
)

TEMPLATE_PATH = Path(__file__).parent / "template"

DEFAULT_COLOR = "#0066cc"
DEFAULT_NAME = "Resume"
BATCH_TITLE = "Batch Resumes"

PathLike = Union[str, Path]

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_PATH)),
    undefined=StrictUndefined,
    autoescape=select_autoescape(enabled_extensions=("html.jinja",)),
    trim_blocks=True,
    lstrip_blocks=True,
)


def read_markdown(markdown_file: PathLike) -> str:
    """
    Read a markdown source document.

    Raises:
        DocumentReadError: If the file cannot be read
    """
    markdown_file = Path(markdown_file)
    try:
        return markdown_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _log_error(f"Cannot read markdown document: {markdown_file}")
        raise DocumentReadError(markdown_file, e) from e


def build_document(title: str, css: str, body: str) -> str:
    """Wrap an HTML body in a complete document with an embedded style sheet."""
    return _env.get_template("document.html.jinja").render(title=title, css=css, body=body)


def batch_names(count: int, names: Optional[Sequence[str]] = None) -> List[str]:
    """Display names for count documents; missing names become "Resume N"."""
    names = list(names or [])
    return [names[i] if i < len(names) else f"Resume {i + 1}" for i in range(count)]


def build_batch_body(html_documents: Sequence[str], names: Sequence[str]) -> str:
    """
    Concatenate HTML fragments into labeled containers.

    Consecutive containers are separated by one page-break element; there is
    none after the last container.
    """
    documents = [{"name": name, "html": html} for name, html in zip(names, html_documents)]
    return _env.get_template("batch_body.html.jinja").render(documents=documents)


@contextmanager
def temporary_html(output_file: Path, html: str) -> Iterator[Path]:
    """
    Write html to a hidden file next to output_file and remove it on exit.

    The file name is unique per call, so concurrent exports into the same
    directory do not collide.
    """
    fd, temp_name = tempfile.mkstemp(
        prefix=f".temp-{output_file.stem}-", suffix=".html", dir=output_file.parent
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(html)
        _log_debug(f"Temporary document: {temp_path}")
        yield temp_path
    finally:
        temp_path.unlink(missing_ok=True)


async def _render(
    html: str,
    output_file: Path,
    renderer: DocumentRenderer,
) -> None:
    with temporary_html(output_file, html) as html_path:
        async with renderer.session() as session:
            await session.render_pdf(html_path, output_file)


async def _export(
    markdown_documents: Sequence[str],
    output_file: Path,
    build_html: Callable[[List[str]], str],
    converter: MarkdownConverter,
    renderer: DocumentRenderer,
) -> None:
    """Convert, render, and log; every failure is re-raised as RenderingError."""
    start_time = time.time()
    try:
        html_documents = [converter.convert(text) for text in markdown_documents]
        await _render(build_html(html_documents), output_file, renderer)
    except Exception as e:
        elapsed = time.time() - start_time
        log_export_failure(output_file, e, elapsed)
        raise RenderingError("PDF export failed", output_path=output_file, original_error=e) from e

    log_export_result(output_file, time.time() - start_time)


async def export_pdf(
    markdown_file: PathLike,
    output_file: PathLike,
    style: str = DEFAULT_STYLE,
    color: str = DEFAULT_COLOR,
    name: str = DEFAULT_NAME,
    converter: Optional[MarkdownConverter] = None,
    renderer: Optional[DocumentRenderer] = None,
) -> None:
    """
    Export one markdown resume to PDF.

    Args:
        markdown_file: Path to the markdown source
        output_file: Path of the PDF to write (its directory must exist)
        style: Style name; unknown names use the default style
        color: Accent color (hex)
        name: Person's name, used in the document title
        converter: Markdown converter (default: Python-Markdown)
        renderer: PDF renderer (default: headless Chromium via Playwright)

    Raises:
        DocumentReadError: If markdown_file cannot be read
        RenderingError: If conversion or rendering fails

    Example:
        >>> asyncio.run(export_pdf("output/jane-doe.md", "output/jane-doe.pdf", style="modern"))
    """
    output_file = Path(output_file)
    style = resolve_style(style or DEFAULT_STYLE)
    color = color or DEFAULT_COLOR
    log_export_start(output_file, 1, style)

    markdown_text = read_markdown(markdown_file)
    css = get_style(style, color)
    title = f"{name or DEFAULT_NAME} - Resume"

    await _export(
        [markdown_text],
        output_file,
        lambda html_documents: build_document(title, css, html_documents[0]),
        converter or PythonMarkdownConverter(),
        renderer or PlaywrightRenderer(),
    )


async def export_pdf_batch(
    markdown_files: Sequence[PathLike],
    output_file: PathLike,
    style: str = DEFAULT_STYLE,
    color: str = DEFAULT_COLOR,
    names: Optional[Sequence[str]] = None,
    converter: Optional[MarkdownConverter] = None,
    renderer: Optional[DocumentRenderer] = None,
) -> None:
    """
    Export several markdown resumes into a single PDF, one resume per page group.

    Each resume is wrapped in a container labeled with its name (names[i], or
    "Resume i+1" when names runs short) and separated from the next by a page
    break.

    Args:
        markdown_files: Paths to the markdown sources, in output order
        output_file: Path of the PDF to write (its directory must exist)
        style: Style name; unknown names use the default style
        color: Accent color (hex)
        names: Display names for the resumes
        converter: Markdown converter (default: Python-Markdown)
        renderer: PDF renderer (default: headless Chromium via Playwright)

    Raises:
        ValueError: If markdown_files is empty
        DocumentReadError: If any markdown file cannot be read
        RenderingError: If conversion or rendering fails
    """
    if not markdown_files:
        raise ValueError("No markdown files to export")

    output_file = Path(output_file)
    style = resolve_style(style or DEFAULT_STYLE)
    color = color or DEFAULT_COLOR
    log_export_start(output_file, len(markdown_files), style)

    markdown_documents = [read_markdown(path) for path in markdown_files]
    labels = batch_names(len(markdown_documents), names)
    css = get_style_with_page_breaks(style, color)

    await _export(
        markdown_documents,
        output_file,
        lambda html_documents: build_document(
            BATCH_TITLE, css, build_batch_body(html_documents, labels)
        ),
        converter or PythonMarkdownConverter(),
        renderer or PlaywrightRenderer(),
    )
