"""
PDF style registry.

Each named style is a CSS template parameterized by an accent color. Unknown
style names fall back to the default style without raising.
"""

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, StrictUndefined

STYLES_PATH = Path(__file__).parent / "stylesheets"

DEFAULT_STYLE = "default"
STYLES = ("default", "modern", "minimal", "professional")
PAGE_BREAK_FRAGMENT = "page_break"

_env = Environment(
    loader=FileSystemLoader(str(STYLES_PATH)),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def available_styles() -> List[str]:
    """Return all named styles."""
    return list(STYLES)


def resolve_style(style: str) -> str:
    """Return style if it is known, otherwise the default style name."""
    return style if style in STYLES else DEFAULT_STYLE


def get_style(style: str, color: str) -> str:
    """
    Get CSS for a named style.

    Args:
        style: Style name (default, modern, minimal, professional)
        color: Accent color, e.g. "#0066cc"

    Returns:
        CSS text
    """
    return _env.get_template(f"{resolve_style(style)}.css.jinja").render(color=color)


def get_style_with_page_breaks(style: str, color: str) -> str:
    """Get CSS for a named style plus the rules batch documents need."""
    page_breaks = _env.get_template(f"{PAGE_BREAK_FRAGMENT}.css.jinja").render()
    return get_style(style, color) + "\n" + page_breaks
