"""
Python-specific naming utilities.

Handles Python keywords and the names every generated module imports.
"""

import keyword
from typing import FrozenSet

# Python reserved keywords, including soft keywords
PYTHON_RESERVED_WORDS: FrozenSet[str] = frozenset(keyword.kwlist) | frozenset(
    keyword.softkwlist
)

# Names bound by the generated module preamble
PYTHON_PREAMBLE_NAMES: FrozenSet[str] = frozenset(
    {
        "ABC",
        "Enum",
        "Optional",
        "annotations",
        "dataclass",
        "field",
    }
)


def safe_field_name(name: str) -> str:
    """
    Make a field or enum member name a valid Python identifier.

    Keywords get a trailing underscore (``class`` becomes ``class_``).
    Soft keywords are valid attribute names and are left alone.
    """
    if keyword.iskeyword(name):
        return f"{name}_"
    return name
