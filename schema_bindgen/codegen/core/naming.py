"""
Naming utilities for safe code generation.

Handles case conversion and reserved-word remapping. A remapped field keeps
its original name as the wire name so serialized payloads stay compatible.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")

# Schema names that collide with target keywords, mapped to the symbol used
# in generated code. The original name remains the wire name.
RESERVED_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "default": "_default",
        "interface": "_interface",
    }
)


class NamingCase(Enum):
    """Different naming case styles."""

    ORIGINAL = "original"  # userName (unchanged)
    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName


def underscore(word: str) -> str:
    """
    Underscore a word.

    ``HTTPServer`` becomes ``http_server``, ``fooBarBaz`` becomes
    ``foo_bar_baz`` and the inner-type separator in ``Inner$Class`` becomes a
    double underscore (``inner__class``). The result is all lower case, so
    applying it again changes nothing.
    """
    word = word.replace("$", "__")
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _CAMEL_BOUNDARY.sub(r"\1_\2", word)
    word = word.replace("-", "_")
    return word.lower()


class NameTransformer:
    """Handles casing transforms and reserved-word remapping."""

    def __init__(self, reserved_names: Optional[Mapping[str, str]] = None):
        """
        Initialize name transformer.

        Args:
            reserved_names: Declared name -> symbol name table. Defaults to
                ``RESERVED_NAMES``.
        """
        self.reserved_names: Mapping[str, str] = MappingProxyType(
            dict(RESERVED_NAMES if reserved_names is None else reserved_names)
        )
        self._underscore_cache: Dict[str, str] = {}

    def underscore(self, word: str) -> str:
        """Cached ``underscore``."""
        if word not in self._underscore_cache:
            self._underscore_cache[word] = underscore(word)
        return self._underscore_cache[word]

    def remap(self, name: str) -> Tuple[str, str]:
        """
        Apply the reserved-word table to a declared field name.

        Returns:
            ``(symbol_name, wire_name)``; the wire name is always the
            declared name.
        """
        return self.reserved_names.get(name, name), name

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_names

    def convert(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self.underscore(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return self._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        else:
            return name

    def _to_camel_case(self, name: str) -> str:
        """Convert to camelCase, keeping a leading underscore."""
        prefix, parts = self._split(name)
        if not parts:
            return name
        return prefix + parts[0] + "".join(part.capitalize() for part in parts[1:])

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase, keeping a leading underscore."""
        prefix, parts = self._split(name)
        if not parts:
            return name
        return prefix + "".join(part.capitalize() for part in parts)

    def _split(self, name: str) -> Tuple[str, list]:
        snake = self.underscore(name)
        stripped = snake.lstrip("_")
        prefix = snake[: len(snake) - len(stripped)]
        return prefix, [part for part in stripped.split("_") if part]


__all__ = ["NamingCase", "NameTransformer", "RESERVED_NAMES", "underscore"]
