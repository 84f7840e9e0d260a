from __future__ import annotations

"""
Format Adapter Registry.

Maps format tags to their adapter functions. Selecting an unknown tag is a
configuration error raised before any input is read or any file touched.
"""

from typing import Any, Callable, Dict, Optional

from folderforge.core.adapters.flat_map import parse_flat_mapping
from folderforge.core.adapters.nested_map import parse_nested_mapping
from folderforge.core.adapters.path_list import parse_path_list
from folderforge.core.adapters.segment_list import parse_path_segments
from folderforge.core.adapters.tree_string import parse_tree_string
from folderforge.domain.constants import (
    DEFAULT_INDENT_UNIT,
    FORMAT_ALIASES,
    FORMAT_FLAT,
    FORMAT_NESTED,
    FORMAT_PATHS,
    FORMAT_SEGMENTS,
    FORMAT_TREE,
    SUPPORTED_FORMATS,
)
from folderforge.domain.errors import ConfigurationError
from folderforge.domain.tree_models import Tree

Adapter = Callable[[Any], Tree]

ADAPTERS: Dict[str, Adapter] = {
    FORMAT_TREE: parse_tree_string,
    FORMAT_NESTED: parse_nested_mapping,
    FORMAT_FLAT: parse_flat_mapping,
    FORMAT_SEGMENTS: parse_path_segments,
    FORMAT_PATHS: parse_path_list,
}


def normalize_format(tag: Any) -> str:
    """
    Resolve a format tag (case-insensitive, aliases allowed) to its
    canonical spelling.

    Raises:
        ConfigurationError: If the tag names no known adapter.
    """
    key = str(tag or "").strip().lower()
    key = FORMAT_ALIASES.get(key, key)
    if key not in ADAPTERS:
        raise ConfigurationError(
            f"Unknown format '{tag}'. Expected one of: {', '.join(SUPPORTED_FORMATS)}."
        )
    return key


def get_adapter(tag: Any) -> Adapter:
    """Return the adapter function registered for a format tag."""
    return ADAPTERS[normalize_format(tag)]


def parse(tag: Any, raw: Any, *, indent_unit: Optional[int] = DEFAULT_INDENT_UNIT) -> Tree:
    """
    Parse raw input with the adapter selected by tag.

    Args:
        tag: Format tag.
        raw: Adapter input.
        indent_unit: Tree-string indent width (None auto-detects).

    Returns:
        Tree: Canonical root nodes.
    """
    fmt = normalize_format(tag)
    if fmt == FORMAT_TREE:
        return parse_tree_string(raw, indent_unit=indent_unit)
    return ADAPTERS[fmt](raw)


__all__ = [
    "ADAPTERS",
    "SUPPORTED_FORMATS",
    "get_adapter",
    "normalize_format",
    "parse",
    "parse_flat_mapping",
    "parse_nested_mapping",
    "parse_path_list",
    "parse_path_segments",
    "parse_tree_string",
]
