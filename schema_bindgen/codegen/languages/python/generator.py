"""
Python bindings generator implementation.

Renders one dataclass or ``Enum`` module per type, named after the
underscored type name, plus an ``__init__.py`` per directory that
re-exports every generated symbol.
"""

from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.descriptors import ClassDescriptor, Descriptor
from ...core.generator import GenerationContext, TargetGenerator
from ...core.imports import ImportStyle
from ...core.templates import TemplateKind
from .naming import PYTHON_PREAMBLE_NAMES, PYTHON_RESERVED_WORDS, safe_field_name
from .types import PYTHON_TYPE_MAP


class PythonGenerator(TargetGenerator):
    """Bindings generator for Python dataclasses and enums."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    @property
    def index_file_name(self) -> str:
        return "__init__.py"

    @property
    def import_style(self) -> ImportStyle:
        return ImportStyle.DOTTED_RELATIVE

    @property
    def reserved_words(self) -> FrozenSet[str]:
        return PYTHON_RESERVED_WORDS | PYTHON_PREAMBLE_NAMES

    def builtin_types(self) -> Mapping[str, str]:
        return PYTHON_TYPE_MAP

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def get_template_name(self, kind: TemplateKind) -> str:
        if kind == TemplateKind.INDEX:
            return "__init__.py.j2"
        return f"{kind.value}.py.j2"

    def file_stem(self, module_name: str) -> str:
        return self.context.names.underscore(module_name)

    def directory_parts(self, package: str) -> List[str]:
        return [self.context.names.underscore(part) for part in super().directory_parts(package)]

    def template_context(self, descriptor: Descriptor) -> Dict[str, Any]:
        """Python-safe attribute names for fields and enum members."""
        if isinstance(descriptor, ClassDescriptor):
            return {
                "field_names": {
                    f.symbol_name: safe_field_name(f.display_name)
                    for f in descriptor.fields
                }
            }
        return {"member_names": {v: safe_field_name(v) for v in descriptor.values}}


def create_python_generator(
    config: Optional[GeneratorConfig] = None,
    context: Optional[GenerationContext] = None,
    **overrides,
) -> PythonGenerator:
    """Create a Python generator, applying keyword overrides to the defaults."""
    if config is None:
        config = load_config("python", custom_config=overrides)

    return PythonGenerator(config, context)
