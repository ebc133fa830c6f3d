"""
Cross-module import resolution.

Computes the module path a generated module uses to import a referenced
type, either as a relative file path (``./Gadget``, ``../parts/Gadget``) or
as a dotted relative module (``.gadget``, ``..parts.gadget``).
"""

import sys
import sysconfig
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from ...logging_config import get_logger
from .descriptors import ImportDescriptor
from .errors import UnresolvedReference
from .mapping import TypeMapper
from .naming import NameTransformer
from .types import ClassRef

logger = get_logger(__name__)

PLATFORM_PACKAGES: FrozenSet[str] = frozenset(sys.stdlib_module_names) | {
    "builtins",
    "typing_extensions",
}

_STDLIB_DIRS = tuple(
    Path(p).resolve()
    for p in {sysconfig.get_path("stdlib"), sysconfig.get_path("platstdlib")}
    if p
)


def is_platform_package(
    package: str, platform_packages: Iterable[str] = PLATFORM_PACKAGES
) -> bool:
    """
    Check whether a dotted package belongs to the host standard library.

    The root segment must be a platform package name. When a module of that
    name is already imported from outside the standard library (a schema
    package called ``calendar``, say), it is not treated as platform.
    """
    root = package.split(".", 1)[0]
    if not root or root not in platform_packages:
        return False
    if root not in sys.stdlib_module_names:
        return True

    module = sys.modules.get(root)
    if module is None:
        return True
    file = getattr(module, "__file__", None)
    locations = [file] if file else list(getattr(module, "__path__", []))
    if not locations:
        # Built in or frozen
        return True
    return all(
        any(Path(location).resolve().is_relative_to(base) for base in _STDLIB_DIRS)
        for location in locations
    )


class ImportStyle(Enum):
    """Import syntax of a target language."""

    SLASH_PATH = "slash"  # import { Gadget } from '../parts/Gadget'
    DOTTED_RELATIVE = "dotted"  # from ..parts.gadget import Gadget


class ImportResolver:
    """Resolves referenced types to import descriptors for one target."""

    def __init__(
        self,
        style: ImportStyle,
        type_mapper: TypeMapper,
        names: Optional[NameTransformer] = None,
        platform_packages: Optional[Iterable[str]] = None,
        cache: Optional[Dict[Tuple[str, str, str], str]] = None,
    ):
        """
        Initialize import resolver.

        Args:
            style: Target import syntax
            type_mapper: Decides which leaf types are built-in
            names: Casing transform for dotted module segments
            platform_packages: Root packages treated as the host standard
                library (never imported)
            cache: Shared path cache keyed by (style, from, to)
        """
        self.style = style
        self.type_mapper = type_mapper
        self.names = names or NameTransformer()
        self.platform_packages = frozenset(
            PLATFORM_PACKAGES if platform_packages is None else platform_packages
        )
        self._cache = {} if cache is None else cache

    def is_excluded(self, ref: ClassRef) -> bool:
        """Built-in and standard library types are never imported."""
        if self.type_mapper.is_builtin(ref):
            return True
        return is_platform_package(ref.package, self.platform_packages)

    def resolve(
        self, referencing_module: str, referenced: ClassRef
    ) -> Optional[ImportDescriptor]:
        """
        Build the import needed by ``referencing_module`` to use ``referenced``.

        Args:
            referencing_module: Dotted module location of the referencing type
            referenced: Leaf type being referenced

        Returns:
            ImportDescriptor, or None for built-in, standard library and
            same-module references

        Raises:
            UnresolvedReference: If the referenced type has no module location
        """
        if self.is_excluded(referenced):
            return None

        target_module = referenced.module_path
        if not target_module:
            raise UnresolvedReference(
                f"Type '{referenced.name}' referenced from {referencing_module} "
                f"has no module location"
            )

        if target_module == referencing_module:
            return None

        return ImportDescriptor(
            referenced.name, self.module_path(referencing_module, target_module)
        )

    def module_path(self, from_module: str, to_module: str) -> str:
        """Relative module path from one module location to another."""
        key = (self.style.value, from_module, to_module)
        if key not in self._cache:
            ups, rest = self._relativize(from_module, to_module)
            if self.style == ImportStyle.SLASH_PATH:
                path = self._slash_path(ups, rest)
            else:
                path = self._dotted_path(ups, rest)
            logger.debug("Import path %s -> %s: %s", from_module, to_module, path)
            self._cache[key] = path
        return self._cache[key]

    @staticmethod
    def _relativize(from_module: str, to_module: str) -> Tuple[int, List[str]]:
        """
        Split the path between two modules.

        Returns:
            Number of directory levels to ascend from the referencing
            module's directory, and the remaining segments of the target.
        """
        from_dir = from_module.split(".")[:-1]
        target = to_module.split(".")

        common = 0
        limit = min(len(from_dir), len(target) - 1)
        while common < limit and from_dir[common] == target[common]:
            common += 1

        return len(from_dir) - common, target[common:]

    @staticmethod
    def _slash_path(ups: int, rest: List[str]) -> str:
        if ups == 0:
            return "./" + "/".join(rest)
        return "../" * ups + "/".join(rest)

    def _dotted_path(self, ups: int, rest: List[str]) -> str:
        return "." * (ups + 1) + ".".join(self.names.underscore(s) for s in rest)


__all__ = ["ImportStyle", "ImportResolver", "PLATFORM_PACKAGES", "is_platform_package"]
