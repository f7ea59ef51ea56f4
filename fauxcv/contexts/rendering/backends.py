"""
Rendering backends.

The export pipeline depends only on two capabilities: converting markdown to
HTML, and opening a session that paginates an HTML file into a PDF. The
defaults use Python-Markdown and headless Chromium through Playwright; tests
and alternate renderers substitute their own implementations.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager, AsyncIterator, Dict, Protocol, Sequence

import markdown
from playwright.async_api import Browser, async_playwright

DEFAULT_MARKDOWN_EXTENSIONS = ("extra", "sane_lists")

DEFAULT_PAGE_FORMAT = "A4"
DEFAULT_MARGIN = {"top": "20mm", "right": "20mm", "bottom": "20mm", "left": "20mm"}


class MarkdownConverter(Protocol):
    def convert(self, markdown_text: str) -> str:
        """Return an HTML fragment for markdown_text."""
        ...


class RenderSession(Protocol):
    async def render_pdf(self, html_path: Path, output_path: Path) -> None:
        """Load html_path and write a paginated PDF to output_path."""
        ...


class DocumentRenderer(Protocol):
    def session(self) -> AsyncContextManager[RenderSession]:
        """Open a session; it is released when the context exits, even on error."""
        ...


class PythonMarkdownConverter:
    """Markdown to HTML through Python-Markdown."""

    def __init__(self, extensions: Sequence[str] = DEFAULT_MARKDOWN_EXTENSIONS):
        self.extensions = list(extensions)

    def convert(self, markdown_text: str) -> str:
        return markdown.markdown(markdown_text, extensions=self.extensions)


class PlaywrightSession:
    """One launched Chromium browser; each render gets its own page."""

    def __init__(self, browser: Browser, page_format: str, margin: Dict[str, str]):
        self._browser = browser
        self._page_format = page_format
        self._margin = margin

    async def render_pdf(self, html_path: Path, output_path: Path) -> None:
        page = await self._browser.new_page()
        try:
            await page.goto(Path(html_path).resolve().as_uri(), wait_until="networkidle")
            await page.pdf(
                path=str(output_path),
                format=self._page_format,
                margin=self._margin,
                print_background=True,
            )
        finally:
            await page.close()


class PlaywrightRenderer:
    """
    Headless Chromium PDF renderer.

    Requires the Chromium build Playwright manages:
        python -m playwright install chromium
    """

    def __init__(self, page_format: str = DEFAULT_PAGE_FORMAT, margin: Dict[str, str] = None):
        self.page_format = page_format
        self.margin = dict(margin or DEFAULT_MARGIN)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[PlaywrightSession]:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=True)
            try:
                yield PlaywrightSession(browser, self.page_format, self.margin)
            finally:
                await browser.close()
