"""
Schema AST module.

Contains the AST node definitions and parser for the supported schema subset.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    BooleanNode,
    FieldDocs,
    FieldSchema,
    IntegerNode,
    MessageDef,
    ObjectNode,
    RefNode,
    SchemaDef,
    SchemaDocument,
    SchemaNode,
    StringEnumNode,
    StringNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "RefNode",
    "IntegerNode",
    "StringNode",
    "StringEnumNode",
    "BooleanNode",
    "ArrayNode",
    "ObjectNode",
    "FieldDocs",
    "FieldSchema",
    "MessageDef",
    "SchemaDef",
    "SchemaDocument",
    "SchemaParser",
]
