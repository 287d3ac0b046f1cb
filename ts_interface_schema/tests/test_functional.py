"""
Functional tests for PipelineGenerator.

Each case in test_data/functional/*_tests.json holds TypeScript source,
an optional config and the expected schema.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ts_interface_schema.pipeline import PipelineGenerator, SchemaGeneratorConfig


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda tc: tc["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases."""
    config = SchemaGeneratorConfig.from_dict(test_case.get("config", {}))
    generated = PipelineGenerator(config).generate(test_case["source"])

    assert json.loads(generated) == test_case["expected"], f"{test_case['description']} ({test_case['_source_file']})"


if __name__ == "__main__":
    pytest.main([__file__])
