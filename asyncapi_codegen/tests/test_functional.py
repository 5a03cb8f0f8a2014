"""
Data-driven generation tests.

Each case in test_data/functional_tests.json holds a document and
substrings that must or must not appear in the generated source.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from asyncapi_codegen.pipeline import CodeGeneratorConfig, PipelineGenerator


def load_test_cases():
    path = Path(__file__).parent / "test_data" / "functional_tests.json"
    with open(path) as f:
        return json.load(f)


@pytest.mark.parametrize("test_case", load_test_cases(), ids=lambda tc: tc["name"])
def test_functional_generation(test_case):
    output = PipelineGenerator(test_case["document"]).generate()

    assert output.startswith("//! Automatically generated from asyncapi.yaml, don't edit!\nuse serde::{Deserialize, Serialize};\n")

    for expected in test_case["expected_contains"]:
        assert expected in output, f"Expected '{expected}' not found in output:\n{output}"

    for not_expected in test_case["expected_not_contains"]:
        assert not_expected not in output, f"Unwanted '{not_expected}' found in output:\n{output}"


def test_generation_comment_can_be_disabled():
    config = CodeGeneratorConfig(add_generation_comment=False)
    output = PipelineGenerator({"messages": {}, "schemas": {}}, config).generate()
    assert output == "use serde::{Deserialize, Serialize};\n"


def test_custom_derives():
    config = CodeGeneratorConfig.from_dict({"derives": ["Debug", "Default", "Deserialize"], "unknown": 1})
    output = PipelineGenerator({"messages": {}, "schemas": {"A": {"type": "object"}}}, config).generate()
    assert "#[derive(Debug, Default, Deserialize)]\n#[serde(default)]\npub struct A {}\n" in output


def test_config_round_trip():
    config = CodeGeneratorConfig(source_name="api.yaml", atomic_write=False)
    assert CodeGeneratorConfig.from_dict(config.to_dict()) == config
