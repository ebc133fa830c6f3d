"""
Target-neutral descriptors handed to the template renderer.

Descriptors are built once per source type by the extractor and are
immutable afterwards.
"""

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import FrozenSet, List, Optional, Tuple, Union


@dataclass(frozen=True, order=True)
class ImportDescriptor:
    """A type imported from another generated module."""

    exported_symbol: str
    module_path: str


@dataclass(frozen=True)
class FieldDescriptor:
    """Represents a single field of a generated class."""

    symbol_name: str  # Identifier used in generated code
    wire_name: str  # Serialized name, differs when a reserved-word remap applied
    type_name: str
    is_repeated: bool = False
    display_name: str = ""  # symbol_name in the target's field casing
    repeated_suffix: str = "[]"

    def __post_init__(self):
        if not self.display_name:
            object.__setattr__(self, "display_name", self.symbol_name)

    @property
    def is_remapped(self) -> bool:
        return self.symbol_name != self.wire_name

    @property
    def element_type_name(self) -> str:
        """Type name without the repetition marker."""
        if self.is_repeated and self.type_name.endswith(self.repeated_suffix):
            return self.type_name[: -len(self.repeated_suffix)]
        return self.type_name


@dataclass(frozen=True)
class ClassDescriptor:
    """Represents a generated class or interface."""

    name: str
    parent_name: Optional[str] = None
    is_abstract: bool = False
    fields: Tuple[FieldDescriptor, ...] = ()
    imports: FrozenSet[ImportDescriptor] = field(default_factory=frozenset)

    @property
    def sorted_imports(self) -> List[ImportDescriptor]:
        """Imports ordered by module path then symbol for stable output."""
        return sorted(self.imports, key=lambda i: (i.module_path, i.exported_symbol))

    def get_field(self, symbol_name: str) -> Optional[FieldDescriptor]:
        """Get field by symbol name."""
        for field_descriptor in self.fields:
            if field_descriptor.symbol_name == symbol_name:
                return field_descriptor
        return None


@dataclass(frozen=True)
class EnumDescriptor:
    """Represents a generated enumeration."""

    name: str
    values: Tuple[str, ...] = ()
    imports: FrozenSet[ImportDescriptor] = field(default_factory=frozenset)


Descriptor = Union[ClassDescriptor, EnumDescriptor]


@dataclass(frozen=True)
class BarrelEntry:
    """One sibling module or child package listed by an index file."""

    module_name: str
    is_package: bool = False
    exported_symbol: Optional[str] = None

    @property
    def reference(self) -> str:
        """Module name, with a trailing slash marking sub-packages."""
        return f"{self.module_name}/" if self.is_package else self.module_name


@dataclass(frozen=True)
class BarrelDescriptor:
    """Per-directory index listing every module and sub-package."""

    directory: PurePosixPath
    entries: Tuple[BarrelEntry, ...] = ()

    @property
    def modules(self) -> List[BarrelEntry]:
        return [entry for entry in self.entries if not entry.is_package]

    @property
    def packages(self) -> List[BarrelEntry]:
        return [entry for entry in self.entries if entry.is_package]

    @property
    def references(self) -> List[str]:
        return [entry.reference for entry in self.entries]
