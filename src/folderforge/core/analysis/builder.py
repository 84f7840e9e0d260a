from __future__ import annotations

"""
Canonical Tree Builder.

Merges a stream of (path, is_file) assertions into a deduplicated node
tree and applies the canonical ordering. Every format adapter converges
here, so two inputs describing the same structure yield equal trees.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from folderforge.core.analysis.classifier import is_placeholder_segment
from folderforge.domain.constants import PATH_SEPARATOR
from folderforge.domain.tree_models import Assertion, Node, NodeKind, Tree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# BUILDER
# -----------------------------------------------------------------------------

class TreeBuilder:
    """
    Accumulates assertions into a canonical tree.

    Nodes are keyed by full path alone, so a file and a folder with the
    same name under one parent collapse into a single node. A filesystem
    cannot hold both at one path, and the collision resolves to the
    folder: asserting something below a file promotes it, and a later file
    assertion never downgrades a folder.

    The path lookup table is owned by the instance; builders never share
    state, so one builder must be used per parse.
    """

    def __init__(self) -> None:
        self._index: Dict[str, Node] = {}
        self._roots: Tree = []
        self._assertions = 0

    def add(self, segments: Sequence[str], is_file: bool) -> Optional[Node]:
        """
        Merge one assertion into the tree.

        Intermediate prefixes are folders. A prefix previously recorded as a
        file is promoted to a folder once something is nested below it, and
        a file assertion never downgrades an existing folder.

        Args:
            segments: Path segments from the root.
            is_file: Whether the final segment is a file.

        Returns:
            Optional[Node]: The node of the final segment, or None when the
            path had no usable segments.
        """
        clean = clean_segments(segments)
        if not clean:
            logger.debug(f"Ignoring assertion without usable segments: {list(segments)!r}")
            return None

        self._assertions += 1
        parent: Optional[Node] = None
        path = ""
        node: Optional[Node] = None

        for i, segment in enumerate(clean):
            path = f"{path}{PATH_SEPARATOR}{segment}" if path else segment
            wants_file = is_file and i == len(clean) - 1

            node = self._index.get(path)
            if node is None:
                node = Node(NodeKind.FILE if wants_file else NodeKind.FOLDER, segment)
                self._index[path] = node
                if parent is None:
                    self._roots.append(node)
                else:
                    parent.children.append(node)
            elif node.is_file and not wants_file:
                logger.debug(f"Promoting '{path}' from file to folder.")
                node.kind = NodeKind.FOLDER

            parent = node

        return node

    def add_assertion(self, assertion: Assertion) -> Optional[Node]:
        return self.add(assertion.segments, assertion.is_file)

    def extend(self, assertions: Iterable[Assertion]) -> None:
        for assertion in assertions:
            self.add_assertion(assertion)

    def build(self) -> Tree:
        """Return the sorted root list."""
        logger.debug(f"Built tree from {self._assertions} assertions ({len(self._index)} nodes).")
        return sort_tree(list(self._roots))

# -----------------------------------------------------------------------------
# CANONICALIZATION
# -----------------------------------------------------------------------------

def sort_tree(tree: Tree) -> Tree:
    """
    Recursively apply the canonical order in place and return the tree.

    Folders come before files; within each group names compare by code
    point (case-sensitive). The sort is stable and idempotent.
    """
    tree.sort(key=_sort_key)
    for node in tree:
        if node.is_folder and node.children:
            sort_tree(node.children)
    return tree


def clean_segments(segments: Sequence[str]) -> List[str]:
    """
    Normalize raw segments: split embedded separators, trim whitespace and
    drop empty or dot-only placeholder segments.
    """
    out: List[str] = []
    for raw in segments:
        for part in str(raw).split(PATH_SEPARATOR):
            part = part.strip()
            if is_placeholder_segment(part):
                continue
            out.append(part)
    return out


def build_tree(assertions: Iterable[Assertion]) -> Tree:
    """Convenience wrapper: build a canonical tree from an assertion stream."""
    builder = TreeBuilder()
    builder.extend(assertions)
    return builder.build()

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _sort_key(node: Node) -> tuple:
    return (0 if node.is_folder else 1, node.name)
