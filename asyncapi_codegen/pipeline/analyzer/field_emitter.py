"""
Field emitter: turns one object property into a documented field declaration.
"""

from __future__ import annotations

import json
from typing import Any

from ...naming import escape_identifier
from ..schema_ast.nodes import FieldSchema
from .ir_nodes import FieldDecl
from .type_resolver import TypeResolver


def render_literal(value: Any) -> str:
    """Render a schema value as compact JSON, independent of the target language.

    YAML scalars without a JSON form (dates, timestamps) fall back to ``str``.
    """
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


class FieldEmitter:
    """Builds FieldDecls through a TypeResolver."""

    def __init__(self, resolver: TypeResolver):
        self.resolver = resolver

    def emit(self, enclosing: str, field_name: str, required: bool, field_schema: FieldSchema) -> FieldDecl:
        """
        Build the declaration of one field.

        Args:
            enclosing: Name of the declaration that owns the field
            field_name: Property name as it appears on the wire
            required: Whether the property is listed in the object's required set
            field_schema: The property schema and its documentation metadata

        Returns:
            FieldDecl with escaped identifier, resolved type and doc lines
        """
        identifier, needs_rename = escape_identifier(field_name)
        type_ref = self.resolver.resolve(field_schema.node, enclosing, field_name)

        return FieldDecl(
            name=identifier,
            wire_name=field_name,
            type_ref=type_ref,
            required=required,
            needs_rename=needs_rename,
            doc_lines=self._doc_lines(field_schema),
        )

    def _doc_lines(self, field_schema: FieldSchema) -> list[str]:
        docs = field_schema.docs
        lines = []
        if docs.get("description") is not None:
            lines.append(str(docs.get("description")).strip())
        if docs.get("format") is not None:
            lines.append(f"format: {docs.get('format')}")
        for key in ("minimum", "maximum", "default", "example"):
            if docs.has(key):
                lines.append(f"{key}: {render_literal(docs.get(key))}")
        return lines
