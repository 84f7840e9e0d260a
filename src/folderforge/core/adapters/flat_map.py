from __future__ import annotations

"""
Flat-Mapping Adapter.

Parses mappings of full path -> flag, e.g. {"app/src/main.py": true}.
Every key is split on '/' and merged by the tree builder, so intermediate
folders do not need their own keys.
"""

import logging
from typing import Any

from folderforge.core.adapters.structured import (
    coerce_name,
    decode_structured,
    is_enabled_flag,
    require_mapping,
)
from folderforge.core.analysis.builder import TreeBuilder, clean_segments
from folderforge.core.analysis.classifier import classify
from folderforge.domain.constants import FORMAT_FLAT, PATH_SEPARATOR
from folderforge.domain.tree_models import NodeKind, Tree

logger = logging.getLogger(__name__)


def parse_flat_mapping(raw: Any) -> Tree:
    """
    Parse a flat path mapping (or its JSON/YAML text) into canonical nodes.

    Entries with a disabled flag (false, 0, or text such as 'no' / 'off')
    are skipped. A trailing '/' on a key marks a folder explicitly;
    otherwise a dotted final segment is a file.

    Args:
        raw: Mapping, JSON/YAML text, bytes, or None.

    Returns:
        Tree: Sorted root nodes (empty for blank input).

    Raises:
        ParseError: On undecodable bytes, invalid syntax or a non-mapping
                    document.
    """
    data = decode_structured(raw, FORMAT_FLAT)
    if data is None:
        return []
    mapping = require_mapping(data, FORMAT_FLAT, raw)

    builder = TreeBuilder()
    skipped = 0

    for key, flag in mapping.items():
        path = coerce_name(key, FORMAT_FLAT, raw, "<key>")
        if not is_enabled_flag(flag):
            skipped += 1
            continue

        segments = clean_segments([path])
        if not segments:
            continue

        explicit = NodeKind.FOLDER if path.rstrip().endswith(PATH_SEPARATOR) else None
        kind = classify(segments[-1], is_terminal=True, explicit=explicit)
        builder.add(segments, kind is NodeKind.FILE)

    if skipped:
        logger.debug(f"Skipped {skipped} flat entries with a false flag.")
    return builder.build()
