"""
Python schema introspection.

``PythonTypeSource`` imports a package and describes its dataclasses and
enums as ``TypeInfo`` values for the bindings generator.
"""

import collections.abc
import dataclasses
import importlib
import inspect
import pkgutil
import sys
import types
import typing
from abc import ABC
from enum import Enum
from typing import Any, List, Sequence

from .codegen.core.errors import ScopeNotFound, UnresolvedReference
from .codegen.core.imports import is_platform_package
from .codegen.core.types import (
    ANY,
    OBJECT,
    ClassRef,
    FieldInfo,
    GenericType,
    Kind,
    TypeInfo,
    TypeRef,
    WildcardType,
)
from .logging_config import get_logger

logger = get_logger(__name__)

UNION = ClassRef("Union", "typing")

_COLLECTION_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)

# Iterable, but never repeated fields
_NEVER_REPEATED = (str, bytes, bytearray, collections.abc.Mapping, Enum)

# Bases that never become the supertype of a generated class
_IGNORED_BASE_MODULES = ("builtins", "typing", "abc", "enum")


class PythonTypeSource:
    """Discovers dataclasses and enums in a Python package."""

    def __init__(self, include_submodules: bool = True):
        """
        Initialize type source.

        Args:
            include_submodules: Also scan the direct, non-package submodules
                of a package scope
        """
        self.include_submodules = include_submodules

    def find_candidate_types(self, scope: str) -> Sequence[TypeInfo]:
        """
        Describe every dataclass and enum defined in ``scope``.

        Raises:
            ScopeNotFound: If the package cannot be imported
            UnresolvedReference: If an annotation cannot be evaluated
        """
        candidates = []
        for module in self._modules(scope):
            for cls in self._classes_in(module):
                candidates.append(self.describe(cls))

        logger.debug("Found %d candidate types in %s", len(candidates), scope)
        return candidates

    def describe(self, cls: type) -> TypeInfo:
        """Build the ``TypeInfo`` of a dataclass or enum."""
        ref = class_ref(cls)

        if issubclass(cls, Enum):
            return TypeInfo(
                name=ref.name,
                package=ref.package,
                kind=Kind.ENUM,
                module=ref.module,
                constants=tuple(cls.__members__),
            )

        return TypeInfo(
            name=ref.name,
            package=ref.package,
            kind=Kind.CLASS,
            module=ref.module,
            supertype=self._supertype(cls),
            is_abstract=inspect.isabstract(cls) or ABC in cls.__bases__,
            fields=tuple(self._fields(cls)),
        )

    def _modules(self, scope: str) -> List[types.ModuleType]:
        try:
            package = importlib.import_module(scope)
        except ImportError as e:
            raise ScopeNotFound(f"Cannot import package {scope}: {e}") from e

        modules = [package]
        if self.include_submodules and hasattr(package, "__path__"):
            submodules = sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name)
            for info in submodules:
                if info.ispkg:
                    continue
                name = f"{scope}.{info.name}"
                try:
                    modules.append(importlib.import_module(name))
                except ImportError as e:
                    raise ScopeNotFound(f"Cannot import module {name}: {e}") from e
        return modules

    def _classes_in(self, module: types.ModuleType) -> List[type]:
        found: List[type] = []
        seen = set()

        def visit(cls):
            if id(cls) in seen:
                return
            seen.add(id(cls))
            if _is_candidate(cls):
                found.append(cls)
            for member in vars(cls).values():
                if (
                    inspect.isclass(member)
                    and member.__module__ == module.__name__
                    and member.__qualname__.startswith(cls.__qualname__ + ".")
                ):
                    visit(member)

        for member in list(vars(module).values()):
            if inspect.isclass(member) and member.__module__ == module.__name__:
                if "." not in member.__qualname__:
                    visit(member)

        return found

    def _fields(self, cls: type) -> List[FieldInfo]:
        own = inspect.get_annotations(cls)
        try:
            hints = typing.get_type_hints(cls)
        except NameError as e:
            raise UnresolvedReference(
                f"Cannot resolve annotations of {cls.__qualname__}: {e}"
            ) from e

        fields = []
        for name in own:
            hint = hints.get(name, own[name])
            if _is_static(hint):
                fields.append(FieldInfo(name, OBJECT, is_static=True))
            else:
                fields.append(FieldInfo(name, convert(hint, owner=cls)))
        return fields

    @staticmethod
    def _supertype(cls: type):
        for base in cls.__bases__:
            if base is object or base.__module__ in _IGNORED_BASE_MODULES:
                continue
            return class_ref(base)
        return None


def _is_candidate(cls: type) -> bool:
    if issubclass(cls, Enum):
        return cls.__module__ != "enum"
    return dataclasses.is_dataclass(cls)


def _is_static(hint: Any) -> bool:
    return (
        hint is typing.ClassVar
        or typing.get_origin(hint) is typing.ClassVar
        or isinstance(hint, dataclasses.InitVar)
        or hint is dataclasses.InitVar
    )


def _package_of(module_name: str) -> str:
    module = sys.modules.get(module_name)
    if module is not None and hasattr(module, "__path__"):
        return module_name
    parent = module_name.rpartition(".")[0]
    return parent or module_name


def class_ref(cls: type) -> ClassRef:
    """
    Reference a Python class.

    Standard library classes keep their defining module as package so they
    match the built-in type table (``datetime.datetime``). Schema classes
    live in their module's package; nested classes get a module location
    of ``package.Outer$Inner``.
    """
    is_collection = (
        isinstance(cls, type)
        and issubclass(cls, _COLLECTION_ORIGINS)
        and not issubclass(cls, _NEVER_REPEATED)
    )
    module_name = cls.__module__
    if is_platform_package(module_name):
        return ClassRef(cls.__name__, module_name, is_collection=is_collection)

    package = _package_of(module_name)
    module = None
    if "." in cls.__qualname__:
        module = f"{package}.{cls.__qualname__.replace('.', '$')}"
    return ClassRef(cls.__name__, package, module, is_collection=is_collection)


def convert(hint: Any, owner: type = None) -> TypeRef:
    """
    Convert a resolved annotation into a declared type tree.

    Raises:
        UnresolvedReference: For string or forward references that were not
            resolved, and annotations with no class behind them
    """
    if hint is Any:
        return ANY
    if hint is None or hint is type(None):
        return OBJECT
    if isinstance(hint, typing.TypeVar):
        bounds = (convert(hint.__bound__, owner),) if hint.__bound__ is not None else ()
        return WildcardType(bounds)

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin is typing.Union or origin is types.UnionType:
        members = tuple(convert(a, owner) for a in args if a is not type(None))
        if len(members) == 1:
            return members[0]
        return GenericType(UNION, members)
    if origin is typing.Literal:
        return class_ref(type(args[0])) if args else OBJECT
    if origin is typing.Annotated:
        return convert(args[0], owner)
    if origin is not None:
        return GenericType(
            class_ref(origin),
            tuple(convert(a, owner) for a in args if a is not Ellipsis),
        )

    if isinstance(hint, type):
        return class_ref(hint)

    where = f" in {owner.__qualname__}" if owner is not None else ""
    raise UnresolvedReference(f"Unsupported annotation {hint!r}{where}")


__all__ = ["PythonTypeSource", "class_ref", "convert"]
