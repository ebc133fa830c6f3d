"""
Descriptor extraction.

Walks one ``TypeInfo`` and builds the ``ClassDescriptor`` or
``EnumDescriptor`` the templates render.
"""

from typing import Optional, Set, Tuple

from ...logging_config import get_logger
from .descriptors import (
    ClassDescriptor,
    Descriptor,
    EnumDescriptor,
    FieldDescriptor,
    ImportDescriptor,
)
from .errors import InputKindMismatch
from .imports import ImportResolver
from .mapping import TypeMapper
from .naming import NameTransformer, NamingCase
from .types import (
    OBJECT,
    ArrayType,
    ClassRef,
    FieldInfo,
    GenericType,
    TypeInfo,
    TypeRef,
    WildcardType,
)

logger = get_logger(__name__)


def unwrap(declared: TypeRef) -> Tuple[ClassRef, bool]:
    """
    Reduce a declared type to its leaf type.

    Arrays and collections mark the field as repeated and continue with
    their element type. Generics are replaced by their first type argument
    and wildcards by their first upper bound until a leaf remains.

    Returns:
        ``(leaf, is_repeated)``
    """
    working = declared
    is_repeated = False

    if isinstance(working, ArrayType):
        is_repeated = True
        working = working.component
    elif isinstance(working, GenericType) and working.origin.is_collection:
        if not working.args:
            # Unparameterized collection such as typing.List
            return OBJECT, True
        is_repeated = True
    elif isinstance(working, ClassRef) and working.is_collection:
        # Raw collection without an element type
        return OBJECT, True

    while not isinstance(working, ClassRef):
        if isinstance(working, GenericType):
            working = working.args[0] if working.args else working.origin
        elif isinstance(working, WildcardType):
            working = working.upper_bounds[0] if working.upper_bounds else OBJECT
        else:
            working = working.component

    return working, is_repeated


class DescriptorExtractor:
    """Builds descriptors for one target."""

    def __init__(
        self,
        type_mapper: TypeMapper,
        resolver: ImportResolver,
        names: Optional[NameTransformer] = None,
        field_case: NamingCase = NamingCase.ORIGINAL,
    ):
        """
        Initialize extractor.

        Args:
            type_mapper: Target type spelling table
            resolver: Import resolver for the same target
            names: Casing and reserved-word transformer
            field_case: Casing applied to produce field display names
        """
        self.type_mapper = type_mapper
        self.resolver = resolver
        self.names = names or NameTransformer()
        self.field_case = field_case

    def extract(self, info: TypeInfo) -> Descriptor:
        """Dispatch on the kind tag decided at discovery."""
        if info.is_enum:
            return self.extract_enum(info)
        return self.extract_class(info)

    def extract_class(self, info: TypeInfo) -> ClassDescriptor:
        """
        Build a class descriptor.

        Raises:
            InputKindMismatch: If ``info`` describes an enum
            UnresolvedReference: If a referenced type has no module location
        """
        if info.is_enum:
            raise InputKindMismatch(
                f"Can't create class for enum {info.name}. "
                f"Try creating an enum instead."
            )

        imports: Set[ImportDescriptor] = set()

        parent_name = None
        if info.supertype is not None and info.supertype != OBJECT:
            parent_name = info.supertype.name
            self._add_import(imports, info, info.supertype)

        fields = []
        for field_info in info.fields:
            descriptor = self._process_field(field_info, info, imports)
            if descriptor is not None:
                fields.append(descriptor)

        descriptor = ClassDescriptor(
            name=info.name,
            parent_name=parent_name,
            is_abstract=info.is_abstract,
            fields=tuple(fields),
            imports=frozenset(imports),
        )
        logger.debug(
            "Extracted class %s (%d fields, %d imports)",
            info.name,
            len(descriptor.fields),
            len(descriptor.imports),
        )
        return descriptor

    def extract_enum(self, info: TypeInfo) -> EnumDescriptor:
        """
        Build an enum descriptor from the declared constants only.

        Raises:
            InputKindMismatch: If ``info`` is not an enum
        """
        if not info.is_enum:
            raise InputKindMismatch(
                f"Can't create enum for class {info.name}. "
                f"Try creating a class instead."
            )

        descriptor = EnumDescriptor(name=info.name, values=tuple(info.constants))
        logger.debug("Extracted enum %s %s", info.name, list(descriptor.values))
        return descriptor

    def _process_field(
        self, field_info: FieldInfo, owner: TypeInfo, imports: Set[ImportDescriptor]
    ) -> Optional[FieldDescriptor]:
        # Static fields carry no per-instance wire data
        if field_info.is_static:
            return None

        leaf, is_repeated = unwrap(field_info.type)
        self._add_import(imports, owner, leaf)

        symbol_name, wire_name = self.names.remap(field_info.name)
        return FieldDescriptor(
            symbol_name=symbol_name,
            wire_name=wire_name,
            type_name=self.type_mapper.spell(leaf, is_repeated),
            is_repeated=is_repeated,
            display_name=self.names.convert(symbol_name, self.field_case),
            repeated_suffix=self.type_mapper.repeated_suffix,
        )

    def _add_import(
        self, imports: Set[ImportDescriptor], owner: TypeInfo, ref: ClassRef
    ) -> None:
        entry = self.resolver.resolve(owner.module_path, ref)
        if entry is not None:
            imports.add(entry)


__all__ = ["DescriptorExtractor", "unwrap"]
