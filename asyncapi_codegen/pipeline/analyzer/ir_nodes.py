"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed schema, ready for code generation:
every field has a resolved type and every inline enum has been hoisted
into its own named declaration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PrimitiveKind(Enum):
    """Primitive types of the supported subset."""

    U_INTEGER = "u_integer"  # Unsigned whole number
    STRING = "string"
    BOOL = "bool"


@dataclass(frozen=True)
class TypeRef:
    """Base class for resolved type references."""


@dataclass(frozen=True)
class PrimitiveRef(TypeRef):
    kind: PrimitiveKind = PrimitiveKind.STRING


@dataclass(frozen=True)
class NamedRef(TypeRef):
    """Reference to a declaration (struct or enum) by name."""

    name: str = ""


@dataclass(frozen=True)
class CollectionRef(TypeRef):
    element: TypeRef | None = None


@dataclass(frozen=True)
class EmptyObjectRef(TypeRef):
    """An object schema without properties."""


@dataclass
class FieldDecl:
    """A field in a struct declaration."""

    name: str = ""  # Identifier in the generated code (may be escaped)
    wire_name: str = ""  # Property name as serialized
    type_ref: TypeRef | None = None
    required: bool = False

    # Rename attribute needed to keep the wire name
    needs_rename: bool = False

    doc_lines: list[str] = field(default_factory=list)


@dataclass
class Variant:
    """An enum member."""

    name: str = ""
    wire_value: str = ""
    is_default: bool = False


@dataclass
class NamedDeclaration:
    """Base class for top-level generated types."""

    name: str = ""
    doc: str | None = None


@dataclass
class StructDecl(NamedDeclaration):
    fields: list[FieldDecl] = field(default_factory=list)


@dataclass
class EnumDecl(NamedDeclaration):
    variants: list[Variant] = field(default_factory=list)


@dataclass
class IR:
    """The complete Intermediate Representation."""

    # All declarations, sorted by name
    declarations: list[NamedDeclaration] = field(default_factory=list)

    # Document name for the generation banner
    source_name: str = ""

    def get(self, name: str) -> NamedDeclaration | None:
        for declaration in self.declarations:
            if declaration.name == name:
                return declaration
        return None
