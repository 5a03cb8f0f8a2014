"""
Errors raised by the generator pipeline.

Every error is fatal: the run aborts before anything is written.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generator failures."""

    pass


class DocumentError(GeneratorError):
    """Raised when the document is missing a required collection or entry."""

    pass


class UnresolvedReferenceError(DocumentError):
    """Raised when a $ref names a schema that is not declared in the document."""

    def __init__(self, name: str, source_path: str):
        super().__init__(f"Unresolved reference '{name}' at {source_path}")
        self.name = name
        self.source_path = source_path


class UnsupportedSchemaKindError(GeneratorError):
    """Raised when a schema node is outside the supported subset.

    This covers:
    - number and null types
    - oneOf / anyOf / allOf unions
    - object schemas with properties nested below a top-level declaration
    """

    def __init__(self, message: str, source_path: str):
        super().__init__(f"{message} at {source_path}")
        self.source_path = source_path


class RootKindError(GeneratorError):
    """Raised when a top-level message payload or named schema is not an object."""

    def __init__(self, name: str, kind: str):
        super().__init__(f"Declaration '{name}' must be an object schema, got '{kind}'")
        self.name = name
        self.kind = kind


class NameCollisionError(GeneratorError):
    """Raised when two different declarations derive the same name."""

    def __init__(self, name: str, detail: str = ""):
        message = f"Name collision on '{name}'"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.name = name


class OutputValidationError(GeneratorError):
    """Raised when rendered output fails the structural check before writing."""

    pass
