"""
Document loader.

Reads an AsyncAPI-style document (YAML or JSON) and extracts the named
messages and schemas. Schemas stay raw here; the analyzer parses them.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from .errors import DocumentError
from .schema_ast.nodes import MessageDef, SchemaDef, SchemaDocument

BOOL_TAG = "tag:yaml.org,2002:bool"


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans.

    Only ``true``/``false`` resolve to booleans, so keys and literals such as
    ``on``, ``off``, ``yes`` and ``no`` stay strings.
    """


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
DocumentLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_document(path: str | Path) -> SchemaDocument:
    """Load and split a document file. JSON documents load through the YAML parser."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.load(f, Loader=DocumentLoader)
    except OSError as e:
        raise DocumentError(f"Cannot read document {path}: {e}") from e
    except yaml.YAMLError as e:
        raise DocumentError(f"Cannot parse document {path}: {e}") from e

    return load_document_from_dict(data, source_name=path.name)


def load_document_from_dict(data: Any, source_name: str = "") -> SchemaDocument:
    """
    Build a SchemaDocument from already-parsed data.

    The collections are read from ``components`` when present, otherwise
    from the document root.
    """
    if not isinstance(data, dict):
        raise DocumentError("Document root must be a mapping")

    container = data.get("components")
    if not isinstance(container, dict):
        container = data

    messages = _collection(container, "messages")
    schemas = _collection(container, "schemas")

    document = SchemaDocument(source_name=source_name)
    for name, message in messages.items():
        if not isinstance(message, dict) or "payload" not in message:
            raise DocumentError(f"Message '{name}' has no payload")
        document.messages.append(
            MessageDef(
                name=str(name),
                summary=message.get("summary"),
                payload=message["payload"],
            )
        )

    for name, schema in schemas.items():
        document.schemas.append(SchemaDef(name=str(name), schema=schema))

    return document


def _collection(container: dict[str, Any], key: str) -> dict[str, Any]:
    value = container.get(key)
    if not isinstance(value, dict):
        raise DocumentError(f"Document is missing the '{key}' collection")
    return value
