from unittest import TestCase

from asyncapi_codegen.pipeline.analyzer import (
    FieldEmitter,
    NamedRef,
    PrimitiveKind,
    PrimitiveRef,
    TypeRegistry,
    TypeResolver,
    render_literal,
)
from asyncapi_codegen.pipeline.schema_ast import SchemaParser


class TestFieldEmitter(TestCase):
    def setUp(self):
        self.registry = TypeRegistry()
        self.emitter = FieldEmitter(TypeResolver(self.registry))
        self.parser = SchemaParser()

    def _emit(self, field_name, schema, required=False, enclosing="Step"):
        field_schema = self.parser.parse_field(schema, f"schemas/{enclosing}/properties/{field_name}")
        return self.emitter.emit(enclosing, field_name, required, field_schema)

    def test_required_flag_is_carried(self):
        self.assertTrue(self._emit("index", {"type": "integer"}, required=True).required)
        self.assertFalse(self._emit("index", {"type": "integer"}).required)

    def test_keyword_is_escaped_but_wire_name_kept(self):
        field = self._emit("type", {"type": "string"})
        self.assertEqual(field.name, "r#type")
        self.assertEqual(field.wire_name, "type")
        self.assertFalse(field.needs_rename)

    def test_invalid_identifier_gets_rename(self):
        field = self._emit("content-type", {"type": "string"})
        self.assertEqual(field.name, "content_type")
        self.assertEqual(field.wire_name, "content-type")
        self.assertTrue(field.needs_rename)

    def test_doc_lines_fixed_order(self):
        schema = {
            "type": "integer",
            "example": 5,
            "default": 1,
            "maximum": 10,
            "minimum": 0,
            "format": "int32",
            "description": "Retry count",
        }
        field = self._emit("retries", schema)
        self.assertEqual(
            field.doc_lines,
            ["Retry count", "format: int32", "minimum: 0", "maximum: 10", "default: 1", "example: 5"],
        )

    def test_falsy_metadata_is_still_documented(self):
        field = self._emit("enabled", {"type": "boolean", "default": False})
        self.assertEqual(field.doc_lines, ["default: false"])

    def test_structured_default_and_example(self):
        schema = {
            "type": "array",
            "items": {"type": "string"},
            "default": [],
            "example": ["a", "b"],
        }
        field = self._emit("tags", schema)
        self.assertEqual(field.doc_lines, ["default: []", 'example: ["a","b"]'])

    def test_no_docs(self):
        self.assertEqual(self._emit("name", {"type": "string"}).doc_lines, [])

    def test_null_description_and_format_are_absent(self):
        field = self._emit("name", {"type": "string", "description": None, "format": None})
        self.assertEqual(field.doc_lines, [])

    def test_null_default_renders_as_json(self):
        field = self._emit("name", {"type": "string", "default": None})
        self.assertEqual(field.doc_lines, ["default: null"])

    def test_type_is_resolved(self):
        self.assertEqual(self._emit("name", {"type": "string"}).type_ref, PrimitiveRef(PrimitiveKind.STRING))
        field = self._emit("state", {"type": "string", "enum": ["idle", "running"]}, enclosing="Session")
        self.assertEqual(field.type_ref, NamedRef("SessionState"))
        self.assertIn("SessionState", self.registry)


class TestRenderLiteral(TestCase):
    def test_json_forms(self):
        self.assertEqual(render_literal("started"), '"started"')
        self.assertEqual(render_literal(None), "null")
        self.assertEqual(render_literal({"x": 1, "y": [True]}), '{"x":1,"y":[true]}')
        self.assertEqual(render_literal("é"), '"é"')

    def test_non_json_scalar(self):
        import datetime

        self.assertEqual(render_literal(datetime.date(2024, 1, 2)), '"2024-01-02"')
