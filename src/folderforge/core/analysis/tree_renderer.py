from __future__ import annotations

"""
Tree Renderer.

Converts canonical trees into visual ASCII diagrams and flat path lists.
The diagram uses the same connectors the tree-string adapter reads, so a
rendered tree can be fed straight back into the parser.
"""

from typing import Any, Dict, List

from folderforge.domain.constants import (
    PATH_SEPARATOR,
    TREE_BRANCH,
    TREE_LAST_BRANCH,
    TREE_PIPE,
    TREE_SPACE,
)
from folderforge.domain.tree_models import Node, Tree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(tree: Tree, mark_folders: bool = False) -> List[str]:
    """
    Render a tree as ASCII diagram lines.

    Roots are printed without connectors; descendants use standard
    connectors (├──, └──) with 4-column indentation.

    Args:
        tree: Root nodes to render.
        mark_folders: Append '/' to folder names so the diagram keeps
                      explicit folder markers when parsed again.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = []
    for root in tree:
        lines.append(_label(root, mark_folders))
        _render_children(root.children, lines, "", mark_folders)
    return lines


def tree_to_paths(tree: Tree, mark_folders: bool = False) -> List[str]:
    """
    Flatten a tree into depth-first '/'-joined paths, one per node.

    Args:
        tree: Root nodes to flatten.
        mark_folders: Suffix folder paths with '/'.

    Returns:
        List[str]: Paths in canonical depth-first order.
    """
    paths: List[str] = []
    for root in tree:
        _collect_paths(root, "", paths, mark_folders)
    return paths


def tree_to_dicts(tree: Tree) -> List[Dict[str, Any]]:
    """Serialize a tree into JSON-ready dictionaries."""
    return [node.to_dict() for node in tree]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_children(children: List[Node], lines: List[str], prefix: str, mark_folders: bool) -> None:
    total = len(children)
    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = TREE_LAST_BRANCH if is_last else TREE_BRANCH
        lines.append(f"{prefix}{connector}{_label(child, mark_folders)}")
        if child.is_folder and child.children:
            new_prefix = prefix + (TREE_SPACE if is_last else TREE_PIPE)
            _render_children(child.children, lines, new_prefix, mark_folders)


def _collect_paths(node: Node, parent: str, out: List[str], mark_folders: bool) -> None:
    path = f"{parent}{PATH_SEPARATOR}{node.name}" if parent else node.name
    out.append(path + PATH_SEPARATOR if (mark_folders and node.is_folder) else path)
    for child in node.children:
        _collect_paths(child, path, out, mark_folders)


def _label(node: Node, mark_folders: bool) -> str:
    return node.name + PATH_SEPARATOR if (mark_folders and node.is_folder) else node.name
