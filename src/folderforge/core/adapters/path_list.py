from __future__ import annotations

"""
Plain Path List Adapter.

Parses lists of full paths. Text input is a JSON array when it decodes as
one, otherwise one path per line (blank lines and '#' comments ignored).

Classification is stricter than the other adapters: a final segment is a
file only when it matches the extension allow-list, so names like
'v1.2' stay folders.
"""

import json
import logging
from typing import Any, Iterable, List, Optional

from folderforge.core.adapters.structured import coerce_name, decode_text, require_sequence
from folderforge.core.analysis.builder import TreeBuilder, clean_segments
from folderforge.core.analysis.classifier import ClassifierPolicy, classify
from folderforge.domain.constants import FORMAT_PATHS, PATH_SEPARATOR
from folderforge.domain.tree_models import NodeKind, Tree

logger = logging.getLogger(__name__)


def parse_path_list(raw: Any, extensions: Optional[Iterable[str]] = None) -> Tree:
    """
    Parse a path list into canonical nodes.

    The builder's root list acts as the synthetic super-root: when every
    path lives under one project folder, that folder is the only root.

    Args:
        raw: Sequence of strings, text, bytes, or None.
        extensions: Optional allow-list override.

    Returns:
        Tree: Sorted root nodes (empty for blank input).

    Raises:
        ParseError: On undecodable bytes or non-string items.
    """
    paths = _decode_paths(raw)
    if not paths:
        return []

    builder = TreeBuilder()
    for path in sorted(paths):
        segments = clean_segments([path])
        if not segments:
            continue

        explicit = NodeKind.FOLDER if path.rstrip().endswith(PATH_SEPARATOR) else None
        kind = classify(
            segments[-1],
            is_terminal=True,
            explicit=explicit,
            policy=ClassifierPolicy.EXTENSION_ALLOWLIST,
            extensions=extensions,
        )
        builder.add(segments, kind is NodeKind.FILE)

    logger.debug(f"Parsed {len(paths)} paths.")
    return builder.build()


def _decode_paths(raw: Any) -> List[str]:
    """
    Normalize every accepted input shape into a list of path strings.

    Text is read as a JSON array only when it decodes to one; anything else
    is one path per line, so entries like '[slug]/page.tsx' stay paths.
    """
    if raw is None:
        return []
    raw_text = decode_text(raw, FORMAT_PATHS)

    if isinstance(raw_text, str):
        text = raw_text.strip()
        if not text:
            return []
        decoded = _try_json_array(text)
        if decoded is None:
            lines = [line.strip() for line in text.splitlines()]
            return [line for line in lines if line and not line.startswith("#")]
        raw_items = decoded
    else:
        raw_items = require_sequence(raw_text, FORMAT_PATHS, raw)

    return [
        coerce_name(item, FORMAT_PATHS, raw, f"item {index}")
        for index, item in enumerate(raw_items)
    ]


def _try_json_array(text: str) -> Optional[List[Any]]:
    if not text.startswith("["):
        return None
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug(f"Text starting with '[' is not a JSON array ({e.msg}); reading it line by line.")
        return None
    return value if isinstance(value, list) else None
