"""
TypeScript bindings generator module.

Generates TypeScript classes, interfaces and enums with slash-path imports.
"""

from .generator import TypescriptGenerator, create_typescript_generator
from .types import TYPESCRIPT_RESERVED_WORDS, TYPESCRIPT_TYPE_MAP

__all__ = [
    "TypescriptGenerator",
    "create_typescript_generator",
    "TYPESCRIPT_TYPE_MAP",
    "TYPESCRIPT_RESERVED_WORDS",
]
