"""AsyncAPI to Rust type generator

Generates serde-annotated Rust structs and enums from the messages and
schemas of an AsyncAPI document.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    DocumentError,
    GeneratorError,
    NameCollisionError,
    PipelineGenerator,
    RootKindError,
    UnresolvedReferenceError,
    UnsupportedSchemaKindError,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "AtomicWriter",
    "GeneratorError",
    "DocumentError",
    "UnresolvedReferenceError",
    "UnsupportedSchemaKindError",
    "RootKindError",
    "NameCollisionError",
]
