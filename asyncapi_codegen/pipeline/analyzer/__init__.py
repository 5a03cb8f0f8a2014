"""
Analyzer module.

Contains type resolution, enum hoisting, field and struct emission, and IR building.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer
from .field_emitter import FieldEmitter, render_literal
from .ir_nodes import (
    IR,
    CollectionRef,
    EmptyObjectRef,
    EnumDecl,
    FieldDecl,
    NamedDeclaration,
    NamedRef,
    PrimitiveKind,
    PrimitiveRef,
    StructDecl,
    TypeRef,
    Variant,
)
from .registry import TypeRegistry
from .struct_emitter import StructEmitter
from .type_resolver import TypeResolver

__all__ = [
    "IR",
    "CollectionRef",
    "EmptyObjectRef",
    "EnumDecl",
    "FieldDecl",
    "FieldEmitter",
    "NamedDeclaration",
    "NamedRef",
    "PrimitiveKind",
    "PrimitiveRef",
    "SchemaAnalyzer",
    "StructDecl",
    "StructEmitter",
    "TypeRef",
    "TypeRegistry",
    "TypeResolver",
    "Variant",
    "render_literal",
]
