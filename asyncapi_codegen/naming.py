"""
Name conversion helpers shared by the analyzer and the backends.
"""

from __future__ import annotations

import re

_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Strict and reserved Rust keywords (2021 edition)
RUST_KEYWORDS = {
    "abstract",
    "as",
    "async",
    "await",
    "become",
    "box",
    "break",
    "const",
    "continue",
    "crate",
    "do",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "final",
    "fn",
    "for",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "macro",
    "match",
    "mod",
    "move",
    "mut",
    "override",
    "priv",
    "pub",
    "ref",
    "return",
    "self",
    "Self",
    "static",
    "struct",
    "super",
    "trait",
    "true",
    "try",
    "type",
    "typeof",
    "unsafe",
    "unsized",
    "use",
    "virtual",
    "where",
    "while",
    "yield",
}

# Keywords that cannot be written as raw identifiers
NON_RAW_KEYWORDS = {"crate", "self", "Self", "super"}


def split_words(text: str) -> list[str]:
    """Split snake_case, kebab-case, camelCase or spaced text into words."""
    return _WORD_PATTERN.findall(text.replace("_", " ").replace("-", " "))


def to_pascal_case(text: str) -> str:
    """Convert any casing to PascalCase: ``key_press`` -> ``KeyPress``."""
    return "".join(word.capitalize() for word in split_words(text))


def to_snake_case(text: str) -> str:
    """Convert any casing to lowercase snake_case: ``mouseMove`` -> ``mouse_move``."""
    return "_".join(word.lower() for word in split_words(text))


def is_identifier(text: str) -> bool:
    return bool(_IDENTIFIER_PATTERN.match(text)) and text != "_"


def escape_identifier(name: str) -> tuple[str, bool]:
    """
    Make a field name usable as a Rust identifier.

    Returns:
        (identifier, needs_rename): ``needs_rename`` is True when the identifier
        no longer maps back to the wire name through serde's own rules.
    """
    if name in NON_RAW_KEYWORDS:
        return f"{to_snake_case(name)}_", True
    if name in RUST_KEYWORDS:
        # serde strips the r# prefix when serializing
        return f"r#{name}", False
    if is_identifier(name):
        return name, False

    identifier = to_snake_case(name) or "field"
    if identifier[0].isdigit():
        identifier = f"_{identifier}"
    if identifier in RUST_KEYWORDS:
        identifier = f"{identifier}_"
    return identifier, True


def variant_wire_name(variant: str) -> str:
    """
    Wire value of an enum variant under ``#[serde(rename_all = "snake_case")]``.

    Mirrors serde's rule: an underscore before every uppercase letter except
    the first, then lowercase. ``KeyPress`` -> ``key_press``.
    """
    out = []
    for index, char in enumerate(variant):
        if char.isupper() and index > 0:
            out.append("_")
        out.append(char.lower())
    return "".join(out)
