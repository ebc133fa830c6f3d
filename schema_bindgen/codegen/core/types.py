"""
Host type model consumed by the descriptor extractor.

A ``TypeSource`` discovers candidate types for a package scope and describes
each one as a ``TypeInfo``. Declared field types are small immutable trees
built from ``ClassRef``, ``ArrayType``, ``GenericType`` and ``WildcardType``,
so the extractor never touches the host's reflection API directly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple, Union


class Kind(Enum):
    """Kind of a discovered type, decided once by the type source."""

    CLASS = "class"
    ENUM = "enum"


@dataclass(frozen=True)
class ClassRef:
    """
    Reference to a concrete (leaf or generic origin) type.

    ``package`` is the dotted package the type is declared in. ``module``
    overrides the module location when it is not ``package.name``, e.g. for
    nested types (``pkg.Outer$Inner``). An empty package with no module means
    the location is unknown.
    """

    name: str
    package: str = ""
    module: Optional[str] = None
    is_collection: bool = False

    @property
    def qualified_name(self) -> str:
        """Host-qualified name used as the built-in lookup key."""
        return f"{self.package}.{self.name}" if self.package else self.name

    @property
    def module_path(self) -> str:
        """Dotted module location, or an empty string when unknown."""
        if self.module:
            return self.module
        if not self.package:
            return ""
        return f"{self.package}.{self.name}"


@dataclass(frozen=True)
class ArrayType:
    """Native array of ``component``."""

    component: "TypeRef"


@dataclass(frozen=True)
class GenericType:
    """Parameterized type such as ``list[Gadget]`` or ``Optional[Base]``."""

    origin: ClassRef
    args: Tuple["TypeRef", ...] = ()


@dataclass(frozen=True)
class WildcardType:
    """Wildcard or type variable; resolves to its first upper bound."""

    upper_bounds: Tuple["TypeRef", ...] = ()


TypeRef = Union[ClassRef, ArrayType, GenericType, WildcardType]


# Well-known leaf types
OBJECT = ClassRef("object", "builtins")
ANY = ClassRef("Any", "typing")
STRING = ClassRef("str", "builtins")
INTEGER = ClassRef("int", "builtins")
FLOAT = ClassRef("float", "builtins")
BOOLEAN = ClassRef("bool", "builtins")
DATETIME = ClassRef("datetime", "datetime")
LIST = ClassRef("list", "builtins", is_collection=True)


@dataclass(frozen=True)
class FieldInfo:
    """A declared field: name, declared type and static flag."""

    name: str
    type: TypeRef
    is_static: bool = False


@dataclass(frozen=True)
class TypeInfo:
    """Read-only description of one candidate type."""

    name: str
    package: str
    kind: Kind = Kind.CLASS
    module: Optional[str] = None
    supertype: Optional[ClassRef] = None
    is_abstract: bool = False
    fields: Tuple[FieldInfo, ...] = field(default_factory=tuple)
    constants: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_enum(self) -> bool:
        return self.kind is Kind.ENUM

    @property
    def module_path(self) -> str:
        """Dotted module location of this type."""
        if self.module:
            return self.module
        return f"{self.package}.{self.name}" if self.package else self.name

    @property
    def module_name(self) -> str:
        """Last segment of the module location; names the output file."""
        return self.module_path.rsplit(".", 1)[-1]

    def as_ref(self) -> ClassRef:
        """Return a ``ClassRef`` pointing at this type."""
        return ClassRef(self.name, self.package, self.module)


class TypeSource(Protocol):
    """Capability that discovers candidate types within a package scope."""

    def find_candidate_types(self, scope: str) -> Sequence[TypeInfo]:
        ...


__all__ = [
    "Kind",
    "ClassRef",
    "ArrayType",
    "GenericType",
    "WildcardType",
    "TypeRef",
    "FieldInfo",
    "TypeInfo",
    "TypeSource",
    "OBJECT",
    "ANY",
    "STRING",
    "INTEGER",
    "FLOAT",
    "BOOLEAN",
    "DATETIME",
    "LIST",
]
