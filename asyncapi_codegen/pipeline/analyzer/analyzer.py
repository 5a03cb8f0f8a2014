"""
Schema analyzer that transforms a loaded document into IR.

Walks every object-payload message and every named schema, hoisting inline
enums, then checks that every $ref points at a declared type.
"""

from __future__ import annotations

import logging

from ..errors import UnresolvedReferenceError
from ..schema_ast.nodes import MessageDef, SchemaDocument
from ..schema_ast.parser import SchemaParser
from .field_emitter import FieldEmitter
from .ir_nodes import IR
from .registry import TypeRegistry
from .struct_emitter import StructEmitter
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)


class SchemaAnalyzer:
    """Analyzes a SchemaDocument and builds IR."""

    def __init__(self):
        self.parser = SchemaParser()

    def analyze(self, document: SchemaDocument) -> IR:
        """
        Analyze the document and build IR.

        A fresh registry is created for every call, so one analyzer can be
        reused across documents.

        Args:
            document: The loaded document

        Returns:
            IR with every declaration sorted by name
        """
        registry = TypeRegistry()
        resolver = TypeResolver(registry)
        structs = StructEmitter(registry, FieldEmitter(resolver))

        for message in document.messages:
            if not self._has_object_payload(message):
                logger.debug("Skipping message %s: payload is not an object", message.name)
                continue
            path = f"messages/{message.name}/payload"
            structs.emit(message.name, self.parser.parse(message.payload, path), doc=message.summary)

        for schema_def in document.schemas:
            path = f"schemas/{schema_def.name}"
            node = self.parser.parse(schema_def.schema, path)
            structs.emit(schema_def.name, node, doc=getattr(node, "description", None))

        for name, source_path in resolver.references.items():
            if name not in registry:
                raise UnresolvedReferenceError(name, source_path)

        declarations = sorted(registry.all(), key=lambda d: d.name)
        logger.debug("Analyzed %d declarations", len(declarations))
        return IR(declarations=declarations, source_name=document.source_name)

    def _has_object_payload(self, message: MessageDef) -> bool:
        payload = message.payload
        if not isinstance(payload, dict) or "$ref" in payload:
            return False
        return payload.get("type", "object" if "properties" in payload else None) == "object"
