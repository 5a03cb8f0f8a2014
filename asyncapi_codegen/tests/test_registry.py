import pytest

from asyncapi_codegen.pipeline.analyzer import EnumDecl, StructDecl, TypeRegistry, Variant
from asyncapi_codegen.pipeline.errors import NameCollisionError


def _enum(name, *values):
    return EnumDecl(name=name, variants=[Variant(name=v, wire_value=v.lower(), is_default=i == 0) for i, v in enumerate(values)])


def test_register_and_snapshot():
    registry = TypeRegistry()
    registry.register(_enum("Direction", "Up", "Down"))
    registry.register(StructDecl(name="Step"))

    snapshot = registry.all()
    assert [d.name for d in snapshot] == ["Direction", "Step"]
    assert "Step" in registry
    assert len(registry) == 2

    # The snapshot does not follow later registrations
    registry.register(StructDecl(name="Zoom"))
    assert len(snapshot) == 2


def test_identical_reregistration_is_noop():
    registry = TypeRegistry()
    registry.register(_enum("Direction", "Up", "Down"))
    registry.register(_enum("Direction", "Up", "Down"))
    assert len(registry) == 1


def test_different_content_collides():
    registry = TypeRegistry()
    registry.register(_enum("Direction", "Up", "Down"))
    with pytest.raises(NameCollisionError, match="Direction"):
        registry.register(_enum("Direction", "Left", "Right"))


def test_struct_and_enum_with_same_name_collide():
    registry = TypeRegistry()
    registry.register(StructDecl(name="Direction"))
    with pytest.raises(NameCollisionError):
        registry.register(_enum("Direction", "Up"))
