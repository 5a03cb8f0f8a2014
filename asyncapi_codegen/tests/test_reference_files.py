"""
Full-document generation checked against a reference Rust file.
"""

from __future__ import annotations

from pathlib import Path

from asyncapi_codegen.pipeline import PipelineGenerator

TEST_DATA = Path(__file__).parent / "test_data"


def test_reference_output():
    generated = PipelineGenerator.from_file(TEST_DATA / "asyncapi.yaml").generate()
    expected = (TEST_DATA / "types.rs").read_text(encoding="utf-8")
    assert generated == expected


def test_write_is_idempotent(tmp_path):
    output = tmp_path / "automation" / "types.rs"
    generator = PipelineGenerator.from_file(TEST_DATA / "asyncapi.yaml")

    generator.write(output)
    first = output.read_bytes()
    PipelineGenerator.from_file(TEST_DATA / "asyncapi.yaml").write(output)
    second = output.read_bytes()

    assert first == second
    assert first == (TEST_DATA / "types.rs").read_bytes()


def test_fields_sorted_within_structs():
    ir = PipelineGenerator.from_file(TEST_DATA / "asyncapi.yaml").analyze()
    for declaration in ir.declarations:
        names = [f.wire_name for f in getattr(declaration, "fields", [])]
        assert names == sorted(names)
