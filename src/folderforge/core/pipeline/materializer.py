from __future__ import annotations

"""
Tree Materializer.

Walks a canonical tree depth-first and issues directory and file creation
calls against a filesystem collaborator. Parents are always created before
their children; sibling order follows the canonical child order.

Files are written empty with truncate semantics, so re-running over an
existing tree empties files it names. Existing directories are left
untouched. A collaborator failure aborts the walk and nothing already
created is rolled back.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from folderforge.domain.tree_models import Node, Tree
from folderforge.infra.fs import FileSystemPort, LocalFileSystem

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# REPORTING MODEL
# -----------------------------------------------------------------------------

@dataclass
class MaterializeReport:
    """
    Accumulates the effects of a materialization walk.

    Attributes:
        created_dirs: Directories created by the walk.
        created_files: Files created or truncated by the walk.
        existing_dirs: Directories that already existed and were kept.
    """
    created_dirs: List[str] = field(default_factory=list)
    created_files: List[str] = field(default_factory=list)
    existing_dirs: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.created_dirs) + len(self.created_files) + len(self.existing_dirs)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize(
        node: Node,
        base_directory: str,
        parent_relative_path: str = "",
        fs: Optional[FileSystemPort] = None,
        report: Optional[MaterializeReport] = None,
) -> MaterializeReport:
    """
    Create one node (and, for folders, its whole subtree) on disk.

    Args:
        node: Node to create.
        base_directory: Directory the tree is rooted in.
        parent_relative_path: Path of the node's parent relative to base.
        fs: Filesystem collaborator (defaults to the local filesystem).
        report: Report to accumulate into; a new one is created if omitted.

    Returns:
        MaterializeReport: Effects of the walk.

    Raises:
        FilesystemError: Propagated from the collaborator; aborts the walk.
    """
    fs = fs or LocalFileSystem()
    report = report if report is not None else MaterializeReport()
    full_path = os.path.join(base_directory, parent_relative_path, node.name)

    if node.is_file:
        fs.write_file(full_path, b"")
        report.created_files.append(full_path)
        logger.info(f"Created file: {full_path}")
        return report

    if fs.exists(full_path):
        report.existing_dirs.append(full_path)
        logger.debug(f"Directory already exists: {full_path}")
    else:
        fs.mkdir(full_path, recursive=True)
        report.created_dirs.append(full_path)
        logger.info(f"Created directory: {full_path}")

    child_relative_path = os.path.join(parent_relative_path, node.name)
    for child in node.children:
        materialize(child, base_directory, child_relative_path, fs, report)

    return report


def materialize_tree(
        tree: Tree,
        base_directory: str,
        fs: Optional[FileSystemPort] = None,
) -> MaterializeReport:
    """
    Materialize every root of a tree into base_directory.

    Args:
        tree: Canonical root nodes.
        base_directory: Target directory.
        fs: Filesystem collaborator (defaults to the local filesystem).

    Returns:
        MaterializeReport: Combined effects of all roots.
    """
    fs = fs or LocalFileSystem()
    report = MaterializeReport()
    for root in tree:
        materialize(root, base_directory, "", fs, report)
    return report
