from __future__ import annotations

"""
Unit tests for the nested-mapping adapter.

Covers mapping and text input, the empty-mapping policy and rejection of
malformed documents.
"""

import pytest

from folderforge.core.adapters.nested_map import parse_nested_mapping
from folderforge.domain.errors import ParseError
from folderforge.domain.tree_models import Node


def test_nested_mapping():
    """TC-01: null is a file, a mapping is a folder."""
    raw = {"app": {"src": {"main.py": None}, "README": None}}

    assert parse_nested_mapping(raw) == [
        Node.folder("app", [
            Node.folder("src", [Node.file("main.py")]),
            Node.file("README"),
        ])
    ]


def test_string_value_counts_as_file():
    assert parse_nested_mapping({"LICENSE": "MIT"}) == [Node.file("LICENSE")]


def test_empty_mapping_policy():
    """TC-02: An empty mapping is a file only when its key contains a dot."""
    tree = parse_nested_mapping({"root": {"cache": {}, "settings.json": {}}})

    assert tree[0].children == [Node.folder("cache"), Node.file("settings.json")]


def test_json_text_input():
    text = '{"root": {"a.txt": null, "b": {}}}'

    assert parse_nested_mapping(text) == [Node.folder("root", [Node.folder("b"), Node.file("a.txt")])]


def test_yaml_text_input():
    """TC-03: YAML is accepted when the text is not JSON."""
    text = "root:\n  src:\n    main.py:\n  2024:\n    notes.md:\n"

    assert parse_nested_mapping(text) == [
        Node.folder("root", [
            Node.folder("2024", [Node.file("notes.md")]),
            Node.folder("src", [Node.file("main.py")]),
        ])
    ]


@pytest.mark.parametrize("raw", [None, "", "   ", b""])
def test_blank_input_is_empty_tree(raw):
    assert parse_nested_mapping(raw) == []


@pytest.mark.parametrize("raw", ['{"root": {"a.txt": null', "root: [unclosed"])
def test_invalid_syntax_raises_parse_error(raw):
    """TC-04: Malformed text names the adapter."""
    with pytest.raises(ParseError) as exc:
        parse_nested_mapping(raw)

    assert exc.value.format_name == "nested"
    assert exc.value.raw == raw


def test_non_mapping_document_is_rejected():
    with pytest.raises(ParseError, match="expected a mapping"):
        parse_nested_mapping('["a", "b"]')


def test_yaml_names_are_kept_verbatim():
    """TC-05: YAML scalars are not retyped, so '1.10' and '010' survive unchanged."""
    tree = parse_nested_mapping("root:\n  1.10:\n  010:\n  on:\n")

    assert [child.name for child in tree[0].children] == ["010", "1.10", "on"]


def test_yaml_null_key_is_a_name():
    tree = parse_nested_mapping("root:\n  null:\n    a.txt:\n")

    assert tree == [Node.folder("root", [Node.folder("null", [Node.file("a.txt")])])]


def test_none_key_is_rejected_not_dropped():
    with pytest.raises(ParseError, match="NoneType"):
        parse_nested_mapping({"root": {None: {"a.txt": None}}})


def test_undecodable_bytes_raise_parse_error():
    with pytest.raises(ParseError) as exc:
        parse_nested_mapping(b"\xff\xfe{")
    assert exc.value.format_name == "nested"


def test_unsupported_value_type_is_rejected():
    with pytest.raises(ParseError, match="root/count"):
        parse_nested_mapping({"root": {"count": 3}})
