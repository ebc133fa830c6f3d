"""
Leaf type to target spelling.

Each target supplies a table of built-in host types; anything outside the
table is spelled with its own declared name and needs an import.
"""

from typing import Dict, Mapping, Optional

from .types import ClassRef

# Host types every target must spell without an import
BUILTIN_KEYS = (
    "builtins.str",
    "builtins.int",
    "builtins.float",
    "builtins.bool",
    "builtins.bytes",
    "builtins.object",
    "decimal.Decimal",
    "datetime.datetime",
    "datetime.date",
    "datetime.time",
    "uuid.UUID",
    "typing.Any",
)


class TypeMapper:
    """Maps fully unwrapped leaf types to a target language spelling."""

    repeated_suffix = "[]"

    def __init__(
        self,
        builtin_types: Mapping[str, str],
        type_overrides: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize with the target's built-in table.

        Args:
            builtin_types: Qualified host name -> target spelling
            type_overrides: Extra or replacement built-in spellings
        """
        self._builtin_types: Dict[str, str] = dict(builtin_types)
        if type_overrides:
            self._builtin_types.update(type_overrides)

        missing = [key for key in BUILTIN_KEYS if key not in self._builtin_types]
        if missing:
            raise ValueError(f"Type table is missing built-in types: {missing}")

    def is_builtin(self, ref: ClassRef) -> bool:
        """Return True when the type has a fixed, import-free spelling."""
        return ref.qualified_name in self._builtin_types

    def name_for(self, ref: ClassRef) -> str:
        """Return the target spelling for a leaf type."""
        return self._builtin_types.get(ref.qualified_name, ref.name)

    def spell(self, ref: ClassRef, is_repeated: bool = False) -> str:
        """Spelling with the repetition marker appended when repeated."""
        name = self.name_for(ref)
        return f"{name}{self.repeated_suffix}" if is_repeated else name

    @property
    def builtin_types(self) -> Mapping[str, str]:
        return dict(self._builtin_types)


__all__ = ["TypeMapper", "BUILTIN_KEYS"]
