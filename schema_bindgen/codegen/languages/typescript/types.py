"""
TypeScript spellings of the host built-in types.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

TYPESCRIPT_TYPE_MAP: Mapping[str, str] = MappingProxyType(
    {
        "builtins.str": "string",
        "builtins.int": "number",
        "builtins.float": "number",
        "builtins.bool": "boolean",
        "builtins.bytes": "string",  # base64 on the wire
        "builtins.object": "any",
        "decimal.Decimal": "number",
        "datetime.datetime": "Date",
        "datetime.date": "Date",
        "datetime.time": "string",
        "uuid.UUID": "string",
        "typing.Any": "any",
    }
)

# Words that cannot name a generated class or enum
TYPESCRIPT_RESERVED_WORDS: FrozenSet[str] = frozenset(
    {
        "any",
        "boolean",
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "interface",
        "new",
        "null",
        "number",
        "return",
        "string",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
    }
)
