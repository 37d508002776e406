"""Code-generation template source handed to the compiler.

The template source is built once per batch and shared by every compiler
invocation, so templates are parsed at most once per run. The pipeline
treats it as an opaque handle; only the compiler renders templates.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
from jinja2 import FileSystemLoader, StrictUndefined, Template
from jinja2.sandbox import SandboxedEnvironment

logger = structlog.get_logger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "codegen"
TEMPLATE_DELIMITER = "$"


class TemplateSource:
    """Directory of templates with configurable substitution delimiters.

    Substitution points are written ``$name$`` by default. Loaded
    templates are cached for the life of the instance.

    Attributes:
        location: Directory the templates are loaded from.
        start_delimiter: Character opening a substitution point.
        stop_delimiter: Character closing a substitution point.

    Example:
        >>> templates = TemplateSource()
        >>> templates.render("MANIFEST.MF", title="Account", package_prefix="com.acme",
        ...                  standalone=False)
    """

    def __init__(
        self,
        location: Path | str = DEFAULT_TEMPLATE_DIR,
        start_delimiter: str = TEMPLATE_DELIMITER,
        stop_delimiter: str = TEMPLATE_DELIMITER,
    ) -> None:
        """Initialize the template source.

        Args:
            location: Template directory.
            start_delimiter: Single character opening a substitution point.
            stop_delimiter: Single character closing a substitution point.

        Raises:
            ValueError: If a delimiter is not exactly one character.
        """
        for delimiter in (start_delimiter, stop_delimiter):
            if len(delimiter) != 1:
                raise ValueError(f"Template delimiter must be one character, got {delimiter!r}")

        self.location = Path(location)
        self.start_delimiter = start_delimiter
        self.stop_delimiter = stop_delimiter
        self._env = SandboxedEnvironment(
            loader=FileSystemLoader(self.location),
            variable_start_string=start_delimiter,
            variable_end_string=stop_delimiter,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            cache_size=-1,
        )
        logger.debug("template_source_created", location=str(self.location))

    def get_template(self, template_name: str, /) -> Template:
        """Load a template by name, relative to the template directory.

        Raises:
            jinja2.TemplateNotFound: If the template does not exist.
        """
        return self._env.get_template(template_name)

    def render(self, template_name: str, /, **context: Any) -> str:
        """Render a template with the given substitution values."""
        return self.get_template(template_name).render(**context)

    def list_templates(self) -> list[str]:
        """Names of all templates under the template directory."""
        if not self.location.is_dir():
            return []
        return self._env.list_templates()

    def __repr__(self) -> str:
        return (
            f"TemplateSource({str(self.location)!r}, "
            f"{self.start_delimiter!r}, {self.stop_delimiter!r})"
        )
