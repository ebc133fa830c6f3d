"""
Core bindings generation components.

Provides the type model, descriptors, naming, type mapping, import
resolution and the base classes used by all target generators.
"""

from .config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    OutputType,
    OverwriteType,
    load_config,
)
from .descriptors import (
    BarrelDescriptor,
    BarrelEntry,
    ClassDescriptor,
    Descriptor,
    EnumDescriptor,
    FieldDescriptor,
    ImportDescriptor,
)
from .emitter import BindingsEmitter, generate_bindings
from .errors import (
    GeneratorError,
    InputKindMismatch,
    NameCollision,
    IOFailure,
    OutputStateConflict,
    ScopeNotFound,
    UnresolvedReference,
)
from .extractor import DescriptorExtractor, unwrap
from .generator import GenerationContext, GenerationResult, TargetGenerator
from .imports import ImportResolver, ImportStyle
from .mapping import BUILTIN_KEYS, TypeMapper
from .naming import RESERVED_NAMES, NameTransformer, NamingCase, underscore
from .templates import TemplateEngine, TemplateError, TemplateKind, create_template_engine
from .types import (
    ArrayType,
    ClassRef,
    FieldInfo,
    GenericType,
    Kind,
    TypeInfo,
    TypeRef,
    TypeSource,
    WildcardType,
)

__all__ = [
    # Type model
    "Kind",
    "ClassRef",
    "ArrayType",
    "GenericType",
    "WildcardType",
    "TypeRef",
    "FieldInfo",
    "TypeInfo",
    "TypeSource",
    # Descriptors
    "ImportDescriptor",
    "FieldDescriptor",
    "ClassDescriptor",
    "EnumDescriptor",
    "Descriptor",
    "BarrelEntry",
    "BarrelDescriptor",
    # Naming, mapping and imports
    "NameTransformer",
    "NamingCase",
    "RESERVED_NAMES",
    "underscore",
    "TypeMapper",
    "BUILTIN_KEYS",
    "ImportResolver",
    "ImportStyle",
    "DescriptorExtractor",
    "unwrap",
    # Generators and emission
    "TargetGenerator",
    "GenerationContext",
    "GenerationResult",
    "BindingsEmitter",
    "generate_bindings",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "OverwriteType",
    "OutputType",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "TemplateKind",
    "create_template_engine",
    # Errors
    "GeneratorError",
    "InputKindMismatch",
    "NameCollision",
    "OutputStateConflict",
    "IOFailure",
    "ScopeNotFound",
    "UnresolvedReference",
]
