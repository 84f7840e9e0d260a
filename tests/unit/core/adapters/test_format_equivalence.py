from __future__ import annotations

"""
Cross-adapter regression tests.

The same logical structure expressed in every supported format must
produce identical canonical trees.
"""

import json

import pytest

from folderforge.core.adapters import SUPPORTED_FORMATS, parse


@pytest.mark.parametrize("fmt", SUPPORTED_FORMATS)
def test_every_format_yields_the_canonical_tree(fmt, project_inputs, expected_project_tree):
    """TC-01: Each adapter reproduces the shared project tree."""
    assert parse(fmt, project_inputs[fmt]) == expected_project_tree


@pytest.mark.parametrize("fmt", ["nested", "flat", "segments", "paths"])
def test_json_text_matches_structured_value(fmt, project_inputs):
    """TC-02: Serialized input parses like the in-memory value."""
    value = project_inputs[fmt]

    assert parse(fmt, json.dumps(value)) == parse(fmt, value)


def test_trees_are_equal_across_all_formats(project_inputs):
    trees = [parse(fmt, project_inputs[fmt]) for fmt in SUPPORTED_FORMATS]

    assert all(tree == trees[0] for tree in trees)


@pytest.mark.parametrize("fmt", SUPPORTED_FORMATS)
def test_empty_string_yields_empty_tree(fmt):
    """TC-03: Empty input is an empty tree, never an error."""
    assert parse(fmt, "") == []
