"""
Rust code generation backend.

Generates serde-annotated structs and enums from IR.
"""

from __future__ import annotations

import jinja2

from ..analyzer.ir_nodes import (
    IR,
    CollectionRef,
    EmptyObjectRef,
    EnumDecl,
    FieldDecl,
    NamedRef,
    PrimitiveRef,
    StructDecl,
    TypeRef,
)
from ..config import CodeGeneratorConfig
from .base import CodeBackend


def rust_string(value: str) -> str:
    """Quote a value as a Rust string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class RustBackend(CodeBackend):
    """Rust code generation backend."""

    TEMPLATE_LANG = "rust"
    FILE_EXTENSION = "rs"

    TYPE_MAP = {
        "u_integer": "usize",
        "string": "String",
        "bool": "bool",
    }

    SERDE_IMPORT = "serde::{Deserialize, Serialize}"
    JSON_IMPORT = "serde_json::{Map, Value}"

    def __init__(self, config: CodeGeneratorConfig):
        super().__init__(config)
        self.rust_imports: set[str] = set()

    def _register_filters(self, env: jinja2.Environment) -> None:
        env.filters["rust_string"] = rust_string

    def generate(self, ir: IR) -> str:
        """Generate Rust code from IR."""
        # Reset import tracking; always include serde
        self.rust_imports = {self.SERDE_IMPORT}

        # Declarations are rendered first so type translation can record imports
        rendered = []
        for declaration in ir.declarations:
            if isinstance(declaration, StructDecl):
                text = self.struct_template.render(self._prepare_struct_context(declaration))
            elif isinstance(declaration, EnumDecl):
                text = self.enum_template.render(self._prepare_enum_context(declaration))
            else:
                raise TypeError(f"Unknown declaration type: {type(declaration).__name__}")
            rendered.append(text.rstrip("\n"))

        prefix = self.prefix_template.render(
            generation_comment=self.generation_comment(ir) if self.config.add_generation_comment else "",
            imports=sorted(self.rust_imports),
        )

        output = prefix
        if rendered:
            output += "\n" + "\n\n".join(rendered) + "\n"
        return output

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to Rust type string."""
        if isinstance(type_ref, PrimitiveRef):
            return self.TYPE_MAP[type_ref.kind.value]

        if isinstance(type_ref, NamedRef):
            return type_ref.name

        if isinstance(type_ref, CollectionRef):
            return f"Vec<{self.translate_type(type_ref.element)}>"

        if isinstance(type_ref, EmptyObjectRef):
            self.rust_imports.add(self.JSON_IMPORT)
            return "Map<String, Value>"

        raise TypeError(f"Unknown type reference: {type_ref!r}")

    def translate_field_type(self, field: FieldDecl) -> str:
        type_str = self.translate_type(field.type_ref)
        if field.required:
            return type_str
        return f"Option<{type_str}>"
