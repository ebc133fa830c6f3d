"""
Target-specific bindings generators.

Each target lives in its own package with a generator, a built-in type
table and a ``templates/`` directory.
"""

from .python import PythonGenerator
from .typescript import TypescriptGenerator

__all__ = ["PythonGenerator", "TypescriptGenerator"]
