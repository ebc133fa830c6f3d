"""
Exceptions raised during bindings generation.

Every failure aborts the whole run; nothing here is retried.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InputKindMismatch(GeneratorError):
    """Extraction requested for the wrong kind of type (class vs. enum)."""

    pass


class OutputStateConflict(GeneratorError):
    """Output directory is not empty and the overwrite policy forbids it."""

    pass


class IOFailure(GeneratorError):
    """Wraps an underlying read, write or delete failure."""

    pass


class UnresolvedReference(GeneratorError):
    """A referenced type has no module location to import it from."""

    pass


class ScopeNotFound(GeneratorError):
    """A configured package scope cannot be imported."""

    pass


class NameCollision(GeneratorError):
    """Two different types map to the same output file."""

    pass
