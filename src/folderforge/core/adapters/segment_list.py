from __future__ import annotations

"""
Path-Segment List Adapter.

Parses sequences of pre-split paths, e.g. [["app", "src"], ["app", "README.md"]].
Same semantics as the flat mapping without string splitting: segments are
cleaned before classification, and a trailing '/' (or a trailing empty
segment) marks a folder.
"""

from typing import Any, List

from folderforge.core.adapters.structured import coerce_name, decode_structured, require_sequence
from folderforge.core.analysis.builder import TreeBuilder, clean_segments
from folderforge.core.analysis.classifier import classify
from folderforge.domain.constants import FORMAT_SEGMENTS, PATH_SEPARATOR
from folderforge.domain.errors import ParseError
from folderforge.domain.tree_models import NodeKind, Tree


def parse_path_segments(raw: Any) -> Tree:
    """
    Parse a list of segment lists (or its JSON/YAML text) into canonical nodes.

    Args:
        raw: Sequence of sequences of strings, JSON/YAML text, bytes, or None.

    Returns:
        Tree: Sorted root nodes (empty for blank input).

    Raises:
        ParseError: On undecodable bytes, invalid syntax, or when an item
                    is not a list of string segments.
    """
    data = decode_structured(raw, FORMAT_SEGMENTS)
    if data is None:
        return []
    items = require_sequence(data, FORMAT_SEGMENTS, raw)

    builder = TreeBuilder()
    for index, item in enumerate(items):
        if not isinstance(item, (list, tuple)):
            raise ParseError(
                FORMAT_SEGMENTS,
                f"item {index} must be a list of segments, received {type(item).__name__}",
                raw,
            )
        names: List[str] = [
            coerce_name(segment, FORMAT_SEGMENTS, raw, f"item {index}") for segment in item
        ]
        segments = clean_segments(names)
        if not segments:
            continue

        joined = PATH_SEPARATOR.join(names)
        explicit = NodeKind.FOLDER if joined.rstrip().endswith(PATH_SEPARATOR) else None
        kind = classify(segments[-1], is_terminal=True, explicit=explicit)
        builder.add(segments, kind is NodeKind.FILE)

    return builder.build()
