from __future__ import annotations

"""
Nested-Mapping Adapter.

Parses mappings where each key is an entry name and each value states its
type: null (or a string) for a file, a mapping for a folder. Every key
must be a name; a null key is rejected rather than dropped with its subtree.

An empty mapping carries no explicit marker. It becomes a file when its
key contains a dot and an empty folder otherwise.
"""

import logging
from typing import Any, Dict, List

from folderforge.core.adapters.structured import coerce_name, decode_structured, require_mapping
from folderforge.core.analysis.builder import TreeBuilder
from folderforge.core.analysis.classifier import classify
from folderforge.domain.constants import FORMAT_NESTED, PATH_SEPARATOR
from folderforge.domain.errors import ParseError
from folderforge.domain.tree_models import NodeKind, Tree

logger = logging.getLogger(__name__)


def parse_nested_mapping(raw: Any) -> Tree:
    """
    Parse a nested mapping (or its JSON/YAML text) into canonical nodes.

    Args:
        raw: Mapping, JSON/YAML text, or None.

    Returns:
        Tree: Sorted root nodes (empty for blank input).

    Raises:
        ParseError: On invalid syntax, a non-mapping document or a value
                    that is neither null, string nor mapping.
    """
    data = decode_structured(raw, FORMAT_NESTED)
    if data is None:
        return []
    mapping = require_mapping(data, FORMAT_NESTED, raw)

    builder = TreeBuilder()
    _walk(mapping, [], builder, raw)
    logger.debug(f"Parsed nested mapping with {len(mapping)} top-level keys.")
    return builder.build()


def _walk(mapping: Dict[Any, Any], parent: List[str], builder: TreeBuilder, raw: Any) -> None:
    """Depth-first traversal feeding one assertion per key."""
    for key, value in mapping.items():
        where = PATH_SEPARATOR.join(parent) or "<root>"
        name = coerce_name(key, FORMAT_NESTED, raw, where)
        path = parent + [name]

        if value is None or isinstance(value, str):
            explicit = NodeKind.FILE
        elif isinstance(value, dict):
            explicit = NodeKind.FOLDER if value else None
        else:
            raise ParseError(
                FORMAT_NESTED,
                f"unsupported value for '{PATH_SEPARATOR.join(path)}': {type(value).__name__}",
                raw,
            )

        kind = classify(name, is_terminal=True, explicit=explicit)
        builder.add(path, kind is NodeKind.FILE)

        if isinstance(value, dict) and value:
            _walk(value, path, builder, raw)
