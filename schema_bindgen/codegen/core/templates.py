"""
Jinja2 rendering for generated bindings.

Each target ships a ``templates/`` directory with one template per
``TemplateKind``. The engine adds the naming filters the templates use to
spell identifiers and comment blocks.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    select_autoescape,
)
from jinja2 import TemplateError as JinjaTemplateError

from .errors import GeneratorError
from .naming import NameTransformer, NamingCase


class TemplateError(GeneratorError):
    """A template is missing or failed to render."""

    pass


class TemplateKind(Enum):
    """Templates every target provides."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    INDEX = "index"


class TemplateEngine:
    """Jinja2 environment over one target's template directory."""

    def __init__(
        self,
        template_dir: Optional[Path] = None,
        names: Optional[NameTransformer] = None,
    ):
        """
        Initialize template engine.

        Args:
            template_dir: Directory holding the ``*.j2`` templates. Without
                one, templates are registered with ``add_template``.
            names: Transformer behind the ``case`` and ``underscore`` filters
        """
        self.template_dir = template_dir
        self.names = names or NameTransformer()
        self._env = self._create_environment()

    def _create_environment(self) -> Environment:
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            loader = DictLoader({})

        env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        env.filters.update(self.filters())
        return env

    def filters(self) -> Dict[str, Callable[..., str]]:
        """Filters available to every template."""
        return {
            "case": self._case_filter,
            "underscore": self._underscore_filter,
            "comment": self._comment_filter,
        }

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Args:
            template_name: File name inside the template directory
            context: Template variables

        Returns:
            Rendered source text

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, source: str, context: Dict[str, Any]) -> str:
        """Render template source given inline."""
        try:
            return self._env.from_string(source).render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    def add_template(self, name: str, content: str):
        """
        Register an in-memory template.

        A directory-backed engine switches to in-memory templates on the
        first call.
        """
        if not isinstance(self._env.loader, DictLoader):
            self._env.loader = DictLoader({})
        self._env.loader.mapping[name] = content

    # Filters

    def _case_filter(self, value: str, style: str = "original") -> str:
        """``{{ name | case('camel') }}``"""
        return self.names.convert(str(value), NamingCase(style))

    def _underscore_filter(self, value: str) -> str:
        return self.names.underscore(str(value))

    def _comment_filter(self, value: str, marker: str = "//") -> str:
        """Prefix every non-blank line with a comment marker."""
        return "\n".join(
            f"{marker} {line}" if line.strip() else line for line in str(value).split("\n")
        )


def create_template_engine(
    template_dir: Optional[Path] = None, names: Optional[NameTransformer] = None
) -> TemplateEngine:
    """Create a template engine for a template directory."""
    return TemplateEngine(template_dir, names)
