"""
Schema parser that builds the AST.

Parses one raw schema mapping (as loaded from the document) into the closed
node set of ``nodes.py``. Anything outside the supported subset fails here,
with the node's path in the document.
"""

from __future__ import annotations

from typing import Any

from ..errors import UnsupportedSchemaKindError
from .nodes import (
    DOC_KEYS,
    ArrayNode,
    BooleanNode,
    FieldDocs,
    FieldSchema,
    IntegerNode,
    ObjectNode,
    RefNode,
    SchemaNode,
    StringEnumNode,
    StringNode,
)


class SchemaParser:
    """Parses raw schema mappings into an AST."""

    UNION_KEYWORDS = ("oneOf", "anyOf", "allOf")

    def parse(self, schema: Any, path: str) -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The raw schema mapping
            path: Current path in the document (for error messages)

        Returns:
            Appropriate SchemaNode subclass
        """
        if not isinstance(schema, dict):
            raise UnsupportedSchemaKindError(f"Expected a schema mapping, got {type(schema).__name__}", path)

        if "$ref" in schema:
            return self._parse_ref_node(schema, path)

        for keyword in self.UNION_KEYWORDS:
            if keyword in schema:
                raise UnsupportedSchemaKindError(f"Union schema '{keyword}' is not supported", path)

        kind = schema.get("type")
        if kind is None and "properties" in schema:
            kind = "object"

        if not isinstance(kind, str):
            raise UnsupportedSchemaKindError(f"Unsupported schema type {kind!r}", path)

        if "enum" in schema and kind != "string":
            raise UnsupportedSchemaKindError(f"Enum on '{kind}' schema is not supported", path)

        if kind == "integer":
            return IntegerNode(source_path=path)
        if kind == "string":
            return self._parse_string_node(schema, path)
        if kind == "boolean":
            return BooleanNode(source_path=path)
        if kind == "array":
            return self._parse_array_node(schema, path)
        if kind == "object":
            return self._parse_object_node(schema, path)

        raise UnsupportedSchemaKindError(f"Unsupported schema type '{kind}'", path)

    def parse_field(self, schema: Any, path: str) -> FieldSchema:
        """Parse a property schema together with its documentation metadata."""
        node = self.parse(schema, path)
        docs = FieldDocs({key: schema[key] for key in DOC_KEYS if key in schema})
        return FieldSchema(node=node, docs=docs)

    def _parse_ref_node(self, schema: dict[str, Any], path: str) -> RefNode:
        """Parse a $ref node."""
        ref_path = schema["$ref"]
        if not isinstance(ref_path, str) or not ref_path:
            raise UnsupportedSchemaKindError(f"Invalid $ref {ref_path!r}", path)

        # e.g. "#/components/schemas/Point" -> "Point"
        return RefNode(source_path=path, name=ref_path.rstrip("/").split("/")[-1])

    def _parse_string_node(self, schema: dict[str, Any], path: str) -> SchemaNode:
        """Parse a plain string or a string enum."""
        if "enum" not in schema:
            return StringNode(source_path=path)

        values = schema["enum"]
        if not isinstance(values, list) or not values:
            raise UnsupportedSchemaKindError("String enum must list at least one value", path)
        for value in values:
            if not isinstance(value, str):
                raise UnsupportedSchemaKindError(f"Enum literal {value!r} is not a string", path)

        return StringEnumNode(
            source_path=path,
            values=list(values),
            description=schema.get("description"),
        )

    def _parse_array_node(self, schema: dict[str, Any], path: str) -> ArrayNode:
        """Parse an array node; ``items`` is required."""
        if "items" not in schema:
            raise UnsupportedSchemaKindError("Array schema without 'items'", path)
        if isinstance(schema["items"], list):
            raise UnsupportedSchemaKindError("Tuple arrays are not supported", path)

        return ArrayNode(source_path=path, items=self.parse(schema["items"], f"{path}/items"))

    def _parse_object_node(self, schema: dict[str, Any], path: str) -> ObjectNode:
        """Parse an object node and its properties."""
        properties = schema.get("properties") or {}
        if not isinstance(properties, dict):
            raise UnsupportedSchemaKindError("Object 'properties' must be a mapping", path)

        required = schema.get("required") or []
        if not isinstance(required, list):
            raise UnsupportedSchemaKindError("Object 'required' must be a list", path)

        node = ObjectNode(
            source_path=path,
            required={str(name) for name in required},
            description=schema.get("description"),
        )
        for prop_name, prop_schema in properties.items():
            node.properties[str(prop_name)] = self.parse_field(prop_schema, f"{path}/properties/{prop_name}")

        return node
