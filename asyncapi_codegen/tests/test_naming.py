import pytest

from asyncapi_codegen.naming import escape_identifier, to_pascal_case, to_snake_case, variant_wire_name


@pytest.mark.parametrize(
    "text,expected",
    [
        ("up", "Up"),
        ("key_press", "KeyPress"),
        ("mouseMove", "MouseMove"),
        ("content-type", "ContentType"),
        ("direction", "Direction"),
        ("", ""),
    ],
)
def test_to_pascal_case(text, expected):
    assert to_pascal_case(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("mouseMove", "mouse_move"),
        ("content-type", "content_type"),
        ("KeyPress", "key_press"),
    ],
)
def test_to_snake_case(text, expected):
    assert to_snake_case(text) == expected


@pytest.mark.parametrize(
    "variant,expected",
    [
        ("Up", "up"),
        ("KeyPress", "key_press"),
        ("MouseMove", "mouse_move"),
    ],
)
def test_variant_wire_name(variant, expected):
    assert variant_wire_name(variant) == expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("session_id", ("session_id", False)),
        ("type", ("r#type", False)),
        ("match", ("r#match", False)),
        ("self", ("self_", True)),
        ("Self", ("self_", True)),
        ("content-type", ("content_type", True)),
        ("2fa", ("_2_fa", True)),
        ("_", ("field", True)),
    ],
)
def test_escape_identifier(name, expected):
    assert escape_identifier(name) == expected
