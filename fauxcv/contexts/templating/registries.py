"""
Templating Registries

Loading and caching of Jinja2 markdown templates.
"""

from pathlib import Path
from typing import Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

TEMPLATES_PATH = Path(__file__).parent / "template"

DEFAULT_TEMPLATE = "resume.md.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for markdown generation.

    Templates are stored in fauxcv/contexts/templating/template/ and see the
    resume record as its camelCase dict (see ResumeRecord.to_dict):
    - Variable: {{ name }}, {{ contactInfo.email }}
    - Loop: {% for job in experience %} ... {% endfor %}
    - Condition: {% if contactInfo.linkedin %} ... {% endif %}
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding template files. Defaults to the
                           package's template/ directory
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Block tags on their own line leave no trace in the markdown
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def get_template(self, name: str = DEFAULT_TEMPLATE) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found: '{name}' at {self.templates_path / name}"
            ) from e

        self._cache[name] = template
        return template

    def from_source(self, source: str) -> Template:
        """Compile caller-supplied template source with the registry's settings."""
        return self.env.from_string(source)

    def get_template_source(self, name: str = DEFAULT_TEMPLATE) -> str:
        """Raw source of a template, e.g. as a starting point for a custom one."""
        return (self.templates_path / name).read_text(encoding="utf-8")

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
