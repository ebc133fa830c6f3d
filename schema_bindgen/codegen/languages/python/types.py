"""
Python spellings of the host built-in types.

Dates, times, UUIDs and bytes travel as strings on the wire, so the
generated classes declare them as ``str`` and need no imports.
"""

from types import MappingProxyType
from typing import Mapping

PYTHON_TYPE_MAP: Mapping[str, str] = MappingProxyType(
    {
        "builtins.str": "str",
        "builtins.int": "int",
        "builtins.float": "float",
        "builtins.bool": "bool",
        "builtins.bytes": "str",
        "builtins.object": "object",
        "decimal.Decimal": "float",
        "datetime.datetime": "str",
        "datetime.date": "str",
        "datetime.time": "str",
        "uuid.UUID": "str",
        "typing.Any": "object",
    }
)
