"""
Python bindings generator module.

Generates Python dataclasses and enums with dotted relative imports.
"""

from .generator import PythonGenerator, create_python_generator
from .naming import PYTHON_PREAMBLE_NAMES, PYTHON_RESERVED_WORDS, safe_field_name
from .types import PYTHON_TYPE_MAP

__all__ = [
    # Generator
    "PythonGenerator",
    "create_python_generator",
    # Naming
    "PYTHON_RESERVED_WORDS",
    "PYTHON_PREAMBLE_NAMES",
    "safe_field_name",
    # Types
    "PYTHON_TYPE_MAP",
]
