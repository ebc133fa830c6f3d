"""
TypeScript bindings generator implementation.

Renders one ``<Name>.ts`` module per type and an ``index.ts`` barrel per
directory. Classes can be emitted as classes or interfaces.
"""

from pathlib import Path
from typing import FrozenSet, Mapping, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import GenerationContext, TargetGenerator
from ...core.imports import ImportStyle
from ...core.templates import TemplateKind
from .types import TYPESCRIPT_RESERVED_WORDS, TYPESCRIPT_TYPE_MAP


class TypescriptGenerator(TargetGenerator):
    """Bindings generator for TypeScript classes, interfaces and enums."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    @property
    def index_file_name(self) -> str:
        return "index.ts"

    @property
    def import_style(self) -> ImportStyle:
        return ImportStyle.SLASH_PATH

    @property
    def supports_interfaces(self) -> bool:
        return True

    @property
    def reserved_words(self) -> FrozenSet[str]:
        return TYPESCRIPT_RESERVED_WORDS

    def builtin_types(self) -> Mapping[str, str]:
        return TYPESCRIPT_TYPE_MAP

    def get_template_directory(self) -> Path:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    def get_template_name(self, kind: TemplateKind) -> str:
        return f"{kind.value}.ts.j2"


def create_typescript_generator(
    config: Optional[GeneratorConfig] = None,
    context: Optional[GenerationContext] = None,
    **overrides,
) -> TypescriptGenerator:
    """Create a TypeScript generator, applying keyword overrides to the defaults."""
    if config is None:
        config = load_config("typescript", custom_config=overrides)

    return TypescriptGenerator(config, context)
