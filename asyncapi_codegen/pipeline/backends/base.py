"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import IR, EnumDecl, FieldDecl, StructDecl, TypeRef
from ..config import CodeGeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from primitive kinds to language types
    TYPE_MAP: dict[str, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self._register_filters(self.jinja_env)

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.struct_template = self.jinja_env.get_template(f"struct.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")

    def _register_filters(self, env: jinja2.Environment) -> None:
        """Hook for language-specific template filters."""

    @abstractmethod
    def generate(self, ir: IR) -> str:
        """
        Generate code from IR.

        Args:
            ir: The intermediate representation

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    @abstractmethod
    def translate_field_type(self, field: FieldDecl) -> str:
        """Translate a field's type, applying the language's optional wrapper."""

    def generation_comment(self, ir: IR) -> str:
        source = ir.source_name or self.config.source_name
        return f"Automatically generated from {source}, don't edit!"

    def _doc_lines(self, entries: list[Any] | Any) -> list[str]:
        """
        Flatten documentation entries into comment lines.

        Each entry may span several lines; entries are separated by an empty line.
        """
        if entries is None:
            return []
        if not isinstance(entries, list):
            entries = [entries]

        lines: list[str] = []
        for entry in entries:
            if lines:
                lines.append("")
            lines.extend(line.rstrip() for line in str(entry).strip().splitlines() or [""])
        return lines

    def _prepare_struct_context(self, struct: StructDecl) -> dict[str, Any]:
        return {
            "name": struct.name,
            "doc": self._doc_lines(struct.doc),
            "derives": ", ".join(self.config.derives),
            "fields": [self._prepare_field_context(field) for field in struct.fields],
        }

    def _prepare_field_context(self, field: FieldDecl) -> dict[str, Any]:
        return {
            "name": field.name,
            "type": self.translate_field_type(field),
            "doc": self._doc_lines(field.doc_lines),
            "rename": field.wire_name if field.needs_rename else None,
        }

    def _prepare_enum_context(self, enum: EnumDecl) -> dict[str, Any]:
        return {
            "name": enum.name,
            "doc": self._doc_lines(enum.doc),
            "derives": ", ".join(self.config.derives),
            "variants": enum.variants,
        }
