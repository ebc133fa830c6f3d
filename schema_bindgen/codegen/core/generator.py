"""
Base generator interface for all bindings targets.

Defines the contract that all target generators must implement, plus the
per-run context and result objects shared by the emitter.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from ...logging_config import get_logger
from .config import GeneratorConfig, OutputType
from .descriptors import BarrelDescriptor, ClassDescriptor, Descriptor
from .errors import NameCollision
from .extractor import DescriptorExtractor
from .imports import ImportResolver, ImportStyle
from .mapping import TypeMapper
from .naming import NameTransformer, NamingCase
from .templates import TemplateEngine, TemplateKind, create_template_engine
from .types import TypeInfo

logger = get_logger(__name__)


@dataclass
class GenerationContext:
    """
    State shared across every type of one generation run.

    Constructed once per run and passed by reference, so separate runs
    never share caches.
    """

    names: NameTransformer = field(default_factory=NameTransformer)
    generated_at: datetime = field(default_factory=datetime.now)
    # (style, from module, to module) -> module path
    import_paths: Dict[Tuple[str, str, str], str] = field(default_factory=dict)
    # Output path relative to the root -> exported symbol
    emitted: Dict[str, str] = field(default_factory=dict)
    # Output path relative to the root -> module location of the emitted type
    emitted_sources: Dict[str, str] = field(default_factory=dict)

    @property
    def year(self) -> int:
        return self.generated_at.year

    def mark_emitted(
        self, relative_path: PurePosixPath, symbol: str, source: str = ""
    ) -> bool:
        """
        Record an emitted file.

        Args:
            relative_path: Output path relative to the root
            symbol: Type name exported by the file
            source: Module location of the type

        Returns:
            False when the same type was already emitted to this path

        Raises:
            NameCollision: If a different type already owns the path
        """
        key = relative_path.as_posix()
        if key in self.emitted:
            owner = (self.emitted[key], self.emitted_sources.get(key, ""))
            if owner == (symbol, source):
                return False
            raise NameCollision(
                f"{source or symbol} and {owner[1] or owner[0]} both map to {key}"
            )
        self.emitted[key] = symbol
        self.emitted_sources[key] = source
        return True


class TargetGenerator(ABC):
    """Abstract base class for all target generators."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        context: Optional[GenerationContext] = None,
    ):
        """Initialize generator with optional configuration and run context."""
        self.config = config or GeneratorConfig(target=self.language_name)
        self.context = context or GenerationContext()
        self._template_engine = None
        self._type_mapper = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(
            self.get_template_directory(), self.context.names
        )

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    @property
    @abstractmethod
    def index_file_name(self) -> str:
        """Return the per-directory barrel file name."""
        pass

    @property
    @abstractmethod
    def import_style(self) -> ImportStyle:
        """Return the import syntax of the target."""
        pass

    @abstractmethod
    def builtin_types(self) -> Mapping[str, str]:
        """Return the built-in type table of the target."""
        pass

    @abstractmethod
    def get_template_name(self, kind: TemplateKind) -> str:
        """Return the template file used for a template kind."""
        pass

    @property
    def supports_interfaces(self) -> bool:
        return False

    @property
    def reserved_words(self) -> FrozenSet[str]:
        """Words that cannot be used as identifiers in the target."""
        return frozenset()

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @property
    def type_mapper(self) -> TypeMapper:
        if self._type_mapper is None:
            self._type_mapper = TypeMapper(
                self.builtin_types(), self.config.custom.get("type_overrides")
            )
        return self._type_mapper

    @property
    def field_case(self) -> NamingCase:
        try:
            return NamingCase(self.config.field_case)
        except ValueError:
            return NamingCase.ORIGINAL

    def create_resolver(self) -> ImportResolver:
        """Import resolver sharing the run's path cache."""
        return ImportResolver(
            self.import_style,
            self.type_mapper,
            self.context.names,
            platform_packages=self.config.custom.get("platform_packages"),
            cache=self.context.import_paths,
        )

    def create_extractor(self) -> DescriptorExtractor:
        """Descriptor extractor wired to this target's rules."""
        return DescriptorExtractor(
            self.type_mapper,
            self.create_resolver(),
            self.context.names,
            field_case=self.field_case,
        )

    # Output layout

    def file_stem(self, module_name: str) -> str:
        """File name (without extension) for a module."""
        return module_name

    def directory_parts(self, package: str) -> List[str]:
        """Output directory segments for a package, prefix already stripped."""
        return [part for part in package.split(".") if part]

    def relative_package(self, package: str) -> str:
        """Package with the configured host prefix removed."""
        prefix = self.config.strip_prefix
        if prefix and package.startswith(prefix):
            return package[len(prefix) :]
        return package

    def output_path(self, info: TypeInfo) -> PurePosixPath:
        """Path of the output file for a type, relative to the output root."""
        module_package = info.module_path.rpartition(".")[0]
        parts = self.directory_parts(self.relative_package(module_package))
        return PurePosixPath(*parts, self.file_stem(info.module_name) + self.file_extension)

    def index_path(self, directory: PurePosixPath) -> PurePosixPath:
        return directory / self.index_file_name

    # Rendering

    def template_kind_for(self, descriptor: Descriptor) -> TemplateKind:
        """Pick the template for a descriptor given the configured output type."""
        if not isinstance(descriptor, ClassDescriptor):
            return TemplateKind.ENUM
        if self.config.output_type == OutputType.INTERFACE and self.supports_interfaces:
            return TemplateKind.INTERFACE
        return TemplateKind.CLASS

    def render(self, descriptor: Descriptor, kind: Optional[TemplateKind] = None) -> str:
        """Render a class or enum descriptor to source text."""
        kind = kind or self.template_kind_for(descriptor)
        if descriptor.name in self.reserved_words:
            logger.warning(
                "%s is a reserved word in %s", descriptor.name, self.language_name
            )
        context = {
            "binding": descriptor,
            "imports": getattr(descriptor, "sorted_imports", []),
            "year": self.context.year,
            "header": self.header_text(),
            "config": self.config,
            **self.template_context(descriptor),
        }
        code = self.template_engine.render_template(self.get_template_name(kind), context)
        return self.format_code(code)

    def render_barrel(self, barrel: BarrelDescriptor) -> str:
        """Render a per-directory index file."""
        context = {
            "barrel": barrel,
            "year": self.context.year,
            "header": self.header_text(),
            "config": self.config,
        }
        code = self.template_engine.render_template(
            self.get_template_name(TemplateKind.INDEX), context
        )
        return self.format_code(code)

    def header_text(self) -> str:
        """Header comment text placed at the top of generated files."""
        return self.config.custom.get(
            "header", f"Generated bindings, {self.context.year}. Do not edit by hand."
        )

    def template_context(self, descriptor: Descriptor) -> Dict[str, Any]:
        """Extra template variables for a descriptor."""
        return {}

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    def validate(self) -> List[str]:
        """
        Check the generator setup.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        if self.config.output_type == OutputType.INTERFACE and not self.supports_interfaces:
            warnings.append(
                f"{self.language_name} has no interface construct - generating classes"
            )
        for kind in TemplateKind:
            if kind == TemplateKind.INTERFACE and not self.supports_interfaces:
                continue
            name = self.get_template_name(kind)
            if not self.template_engine.template_exists(name):
                warnings.append(f"Template {name} not found")
        return warnings


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Optional[List[Path]] = None,
        barrels: Optional[List[Path]] = None,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Binding files written
            barrels: Index files written
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files or []
        self.barrels = barrels or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.empty_packages: List[str] = []

    @property
    def file_count(self) -> int:
        return len(self.files)
