"""Tests for power-set rendering."""

import json

from powerset.formatting import format_subset, power_set_to_dict, render_power_set
from powerset.generator import generate


def test_format_subset_empty():
    assert format_subset([]) == "{ }"


def test_format_subset_values():
    assert format_subset([1]) == "{ 1 }"
    assert format_subset([1, 2, 3]) == "{ 1 2 3 }"
    assert format_subset([-4, 10]) == "{ -4 10 }"


def test_render_power_set_matches_demo_layout():
    text = render_power_set(generate([1, 2, 3]))

    assert text.splitlines() == [
        "Power set:",
        "{ }",
        "{ 1 }",
        "{ 2 }",
        "{ 1 2 }",
        "{ 3 }",
        "{ 1 3 }",
        "{ 2 3 }",
        "{ 1 2 3 }",
    ]
    assert not text.endswith("\n")


def test_render_power_set_empty_result_is_header_only():
    assert render_power_set([]) == "Power set:"


def test_render_power_set_custom_header():
    assert render_power_set([[5]], header="Subsets:") == "Subsets:\n{ 5 }"


def test_power_set_to_dict_is_json_serializable():
    data = power_set_to_dict((1, 2, 3), generate([1, 2, 3]))

    assert data["input"] == [1, 2, 3]
    assert len(data["subsets"]) == 8
    assert json.loads(json.dumps(data)) == data
