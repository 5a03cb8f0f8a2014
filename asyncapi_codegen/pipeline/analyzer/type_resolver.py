"""
Type resolver: maps one schema node to a type reference.

String enums found along the way are hoisted into the registry as named
enum declarations, named after the enclosing type and the field.
"""

from __future__ import annotations

import logging
from typing import assert_never

from ...naming import to_pascal_case, variant_wire_name
from ..errors import NameCollisionError, UnsupportedSchemaKindError
from ..schema_ast.nodes import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    ObjectNode,
    RefNode,
    SchemaNode,
    StringEnumNode,
    StringNode,
)
from .ir_nodes import (
    CollectionRef,
    EmptyObjectRef,
    EnumDecl,
    NamedRef,
    PrimitiveKind,
    PrimitiveRef,
    TypeRef,
    Variant,
)
from .registry import TypeRegistry

logger = logging.getLogger(__name__)


class TypeResolver:
    """Resolves schema nodes to TypeRefs, hoisting enums into the registry."""

    def __init__(self, registry: TypeRegistry):
        self.registry = registry

        # name -> source path of the first $ref to it
        self.references: dict[str, str] = {}

    def resolve(self, node: SchemaNode, enclosing: str, field_name: str) -> TypeRef:
        """
        Resolve a schema node in the context of a field.

        Args:
            node: The schema node
            enclosing: Name of the declaration that owns the field
            field_name: Wire name of the field

        Returns:
            The resolved TypeRef
        """
        match node:
            case RefNode(name=name):
                self.references.setdefault(name, node.source_path)
                return NamedRef(name)
            case IntegerNode():
                return PrimitiveRef(PrimitiveKind.U_INTEGER)
            case StringEnumNode():
                return NamedRef(self._hoist_enum(node, enclosing, field_name))
            case StringNode():
                return PrimitiveRef(PrimitiveKind.STRING)
            case BooleanNode():
                return PrimitiveRef(PrimitiveKind.BOOL)
            case ArrayNode(items=items):
                # Enums inside array items are named after the array field
                return CollectionRef(self.resolve(items, enclosing, field_name))
            case ObjectNode(properties=properties):
                if not properties:
                    return EmptyObjectRef()
                raise UnsupportedSchemaKindError(
                    f"Nested object with properties in '{enclosing}.{field_name}' is not supported; declare it as a named schema",
                    node.source_path,
                )
            case _:
                assert_never(node)

    def _hoist_enum(self, node: StringEnumNode, enclosing: str, field_name: str) -> str:
        """Register an enum declaration for an inline string enum and return its name."""
        name = enclosing + to_pascal_case(field_name)

        variants: list[Variant] = []
        seen: dict[str, str] = {}
        for index, literal in enumerate(node.values):
            variant_name = to_pascal_case(literal)
            if not variant_name or variant_name[0].isdigit():
                raise UnsupportedSchemaKindError(f"Enum literal {literal!r} has no usable identifier", node.source_path)
            if variant_name in seen:
                raise NameCollisionError(
                    f"{name}::{variant_name}",
                    f"literals {seen[variant_name]!r} and {literal!r} map to the same variant",
                )
            seen[variant_name] = literal
            variants.append(Variant(name=variant_name, wire_value=variant_wire_name(variant_name), is_default=index == 0))

        self.registry.register(EnumDecl(name=name, doc=node.description, variants=variants))
        logger.debug("Hoisted enum %s from %s", name, node.source_path)
        return name
