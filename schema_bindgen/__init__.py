"""
schema-bindgen: generate TypeScript and Python bindings from schema classes.
"""

__version__ = "0.1.0"
