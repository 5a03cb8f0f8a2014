"""
AST node definitions for the supported schema subset.

These nodes represent the parsed structure of a message payload or named
schema before any type resolution or language-specific processing.
The set is closed: the resolver matches on exactly these classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

# Documentation keys, in the order they are rendered
DOC_KEYS = ("description", "format", "minimum", "maximum", "default", "example")


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    KIND: ClassVar[str] = ""

    # Original location in the document (for error messages)
    source_path: str = ""


@dataclass
class RefNode(SchemaNode):
    """A $ref to a named schema."""

    KIND: ClassVar[str] = "reference"

    name: str = ""  # Last segment of the $ref path


@dataclass
class IntegerNode(SchemaNode):
    KIND: ClassVar[str] = "integer"


@dataclass
class StringNode(SchemaNode):
    KIND: ClassVar[str] = "string"


@dataclass
class StringEnumNode(SchemaNode):
    """A string restricted to an ordered list of literals."""

    KIND: ClassVar[str] = "string"

    values: list[str] = field(default_factory=list)
    description: str | None = None


@dataclass
class BooleanNode(SchemaNode):
    KIND: ClassVar[str] = "boolean"


@dataclass
class ArrayNode(SchemaNode):
    KIND: ClassVar[str] = "array"

    items: SchemaNode | None = None


@dataclass
class FieldDocs:
    """Display-only metadata of a property; never affects typing.

    ``values`` only holds the keys that were present on the schema, so a
    present ``0`` or ``false`` is kept apart from an absent key.
    """

    values: dict[str, Any] = field(default_factory=dict)

    def has(self, key: str) -> bool:
        return key in self.values

    def get(self, key: str) -> Any:
        return self.values.get(key)


@dataclass
class FieldSchema:
    """A property of an object: its schema plus documentation metadata."""

    node: SchemaNode | None = None
    docs: FieldDocs = field(default_factory=FieldDocs)


@dataclass
class ObjectNode(SchemaNode):
    KIND: ClassVar[str] = "object"

    properties: dict[str, FieldSchema] = field(default_factory=dict)
    required: set[str] = field(default_factory=set)
    description: str | None = None


@dataclass
class MessageDef:
    """A named message and its raw payload schema."""

    name: str = ""
    summary: str | None = None
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass
class SchemaDef:
    """A named schema from the document's schema collection."""

    name: str = ""
    schema: dict[str, Any] = field(default_factory=dict)


@dataclass
class SchemaDocument:
    """Root of a loaded document."""

    messages: list[MessageDef] = field(default_factory=list)
    schemas: list[SchemaDef] = field(default_factory=list)

    # Where the document came from (for the generation banner)
    source_name: str = ""
