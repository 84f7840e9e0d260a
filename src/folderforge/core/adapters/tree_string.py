from __future__ import annotations

"""
Tree-String Adapter.

Parses ASCII tree diagrams (the output of `tree`, or hand-written
diagrams using ├ └ │ ─ connectors) into the canonical tree.

Nesting is measured by the column of the first character that is neither
whitespace nor a connector, divided by a fixed indent unit (4 by
default). An explicit stack of (depth, path) pairs tracks the entries that
are still open.
"""

import logging
import re
from typing import Iterator, List, Optional, Tuple

from folderforge.core.adapters.structured import decode_text
from folderforge.core.analysis.builder import TreeBuilder, clean_segments
from folderforge.core.analysis.classifier import classify
from folderforge.domain.constants import (
    DEFAULT_INDENT_UNIT,
    FORMAT_TREE,
    PATH_SEPARATOR,
    TREE_CONNECTOR_CHARS,
)
from folderforge.domain.errors import ConfigurationError, ParseError
from folderforge.domain.tree_models import NodeKind, Tree

logger = logging.getLogger(__name__)

# '//' not preceded by '/', or '#' not preceded by a word character
_COMMENT_RE = re.compile(r"(?<!/)//|(?<!\w)#")
_CONTENT_RE = re.compile(rf"[^\s{TREE_CONNECTOR_CHARS}]")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_tree_string(text: Optional[str], indent_unit: Optional[int] = DEFAULT_INDENT_UNIT) -> Tree:
    """
    Parse a tree diagram into canonical nodes.

    Args:
        text: Multi-line diagram.
        indent_unit: Columns per nesting level. None detects the smallest
                     non-zero indentation in the document.

    Returns:
        Tree: Sorted root nodes (empty for blank input).

    Raises:
        ParseError: If the input is not text or not valid UTF-8.
        ConfigurationError: If the indent unit is not positive.
    """
    if text is None:
        return []
    text = decode_text(text, FORMAT_TREE)
    if not isinstance(text, str):
        raise ParseError(FORMAT_TREE, f"expected text, received {type(text).__name__}", text)
    if not text.strip():
        return []

    tab_width = indent_unit or DEFAULT_INDENT_UNIT
    entries = list(_iter_entries(text, tab_width))

    if indent_unit is None:
        indent_unit = detect_indent_unit([column for _, column, _ in entries])
        logger.debug(f"Detected indent unit: {indent_unit}")
    if indent_unit <= 0:
        raise ConfigurationError(f"Indent unit must be a positive integer, got {indent_unit}.")

    builder = TreeBuilder()
    stack: List[Tuple[int, List[str]]] = []

    for line_no, column, entry in entries:
        segments = clean_segments([entry])
        if not segments:
            logger.debug(f"Line {line_no}: skipping placeholder entry '{entry}'.")
            continue

        depth = column // indent_unit
        while stack and stack[-1][0] >= depth:
            stack.pop()

        parent_path = stack[-1][1] if stack else []
        path = parent_path + segments
        explicit = NodeKind.FOLDER if entry.endswith(PATH_SEPARATOR) else None
        kind = classify(segments[-1], is_terminal=True, explicit=explicit)

        builder.add(path, kind is NodeKind.FILE)
        # Files are pushed too: deeper lines below them promote them to folders
        stack.append((depth, path))

    logger.debug(f"Parsed {len(entries)} tree lines.")
    return builder.build()


def detect_indent_unit(columns: List[int]) -> int:
    """
    Return the smallest non-zero entry column, or the default unit when
    every entry sits at column zero.
    """
    indented = [c for c in columns if c > 0]
    return min(indented) if indented else DEFAULT_INDENT_UNIT

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _iter_entries(text: str, tab_width: int) -> Iterator[Tuple[int, int, str]]:
    """Yield (line number, entry column, entry text) for every content line."""
    for line_no, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.rstrip("\r").expandtabs(tab_width)

        comment = _COMMENT_RE.search(line)
        if comment:
            line = line[:comment.start()].rstrip()

        match = _CONTENT_RE.search(line)
        if not match:
            continue

        yield line_no, match.start(), line[match.start():].strip()
