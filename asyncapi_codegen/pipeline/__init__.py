"""
Pipeline - AsyncAPI document to Rust type declarations.

1. Loader: Read the document and split messages and schemas
2. Parser: Parse each schema into the closed Schema AST
3. Analyzer: Resolve types, hoist enums into the registry, build IR
4. Backend: Render IR through Jinja2 templates
5. Writer: Atomically replace the output file
"""

from __future__ import annotations

from .config import CodeGeneratorConfig
from .errors import (
    DocumentError,
    GeneratorError,
    NameCollisionError,
    OutputValidationError,
    RootKindError,
    UnresolvedReferenceError,
    UnsupportedSchemaKindError,
)
from .generator import PipelineGenerator
from .loader import load_document, load_document_from_dict
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "AtomicWriter",
    "load_document",
    "load_document_from_dict",
    "GeneratorError",
    "DocumentError",
    "UnresolvedReferenceError",
    "UnsupportedSchemaKindError",
    "RootKindError",
    "NameCollisionError",
    "OutputValidationError",
]
