"""
Struct emitter: builds one named struct declaration from an object schema.
"""

from __future__ import annotations

from ..errors import RootKindError
from ..schema_ast.nodes import ObjectNode, SchemaNode
from .field_emitter import FieldEmitter
from .ir_nodes import StructDecl
from .registry import TypeRegistry


class StructEmitter:
    """Registers StructDecls for top-level object schemas."""

    def __init__(self, registry: TypeRegistry, field_emitter: FieldEmitter):
        self.registry = registry
        self.field_emitter = field_emitter

    def emit(self, name: str, node: SchemaNode, doc: str | None = None) -> StructDecl:
        """
        Build and register the struct for a message payload or named schema.

        Raises:
            RootKindError: If the schema is not an object
        """
        if not isinstance(node, ObjectNode):
            raise RootKindError(name, node.KIND)

        struct = StructDecl(name=name, doc=doc)
        for field_name in sorted(node.properties):
            struct.fields.append(
                self.field_emitter.emit(
                    name,
                    field_name,
                    field_name in node.required,
                    node.properties[field_name],
                )
            )

        self.registry.register(struct)
        return struct
