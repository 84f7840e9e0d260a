from __future__ import annotations

"""
Unit tests for the tree renderer.

Verifies ASCII diagram layout, path flattening and the parse-back
contract with the tree-string adapter.
"""

from folderforge.core.adapters.tree_string import parse_tree_string
from folderforge.core.analysis.tree_renderer import render_tree, tree_to_dicts, tree_to_paths
from folderforge.domain.tree_models import Node


def test_render_tree_layout(expected_project_tree):
    """TC-01: Connectors and continuation pipes follow the standard layout."""
    assert render_tree(expected_project_tree) == [
        "project",
        "├── src",
        "│   ├── utils",
        "│   │   └── helper.ts",
        "│   └── index.ts",
        "├── .bunfig.toml",
        "├── README.md",
        "└── package.json",
    ]


def test_render_tree_marks_folders():
    tree = [Node.folder("app", [Node.folder("empty")])]

    assert render_tree(tree, mark_folders=True) == ["app/", "└── empty/"]


def test_rendered_tree_parses_back(expected_project_tree):
    """TC-02: Rendering with folder markers round-trips through the parser."""
    lines = render_tree(expected_project_tree, mark_folders=True)

    assert parse_tree_string("\n".join(lines)) == expected_project_tree


def test_tree_to_paths_depth_first(expected_project_tree):
    paths = tree_to_paths(expected_project_tree, mark_folders=True)

    assert paths[:4] == ["project/", "project/src/", "project/src/utils/", "project/src/utils/helper.ts"]
    assert paths[-1] == "project/package.json"
    assert len(paths) == 8


def test_tree_to_dicts():
    assert tree_to_dicts([Node.file("a.txt")]) == [{"type": "file", "name": "a.txt"}]


def test_empty_tree_renders_nothing():
    assert render_tree([]) == []
    assert tree_to_paths([]) == []
