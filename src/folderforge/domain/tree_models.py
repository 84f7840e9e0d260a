from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the canonical node model shared by every format adapter, the
tree builder and the materializer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Classification of a tree entry."""
    FOLDER = "folder"
    FILE = "file"


@dataclass
class Node:
    """
    Represents a single entry (folder or file) in the canonical tree.

    Attributes:
        kind: Folder or file classification.
        name: Last path segment only. Never contains '/'.
        children: Ordered child entries. Always empty for files.
    """
    kind: NodeKind
    name: str
    children: List["Node"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Node name must be a non-empty string.")
        if "/" in self.name:
            raise ValueError(f"Node name must not contain '/': {self.name!r}")
        if self.kind is NodeKind.FILE and self.children:
            raise ValueError(f"File node '{self.name}' cannot have children.")

    @classmethod
    def folder(cls, name: str, children: Optional[List["Node"]] = None) -> "Node":
        return cls(NodeKind.FOLDER, name, list(children or []))

    @classmethod
    def file(cls, name: str) -> "Node":
        return cls(NodeKind.FILE, name)

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the node (recursively) into a JSON-ready dictionary.

        Returns:
            Dict[str, Any]: {"type", "name"} plus "children" for folders.
        """
        data: Dict[str, Any] = {"type": self.kind.value, "name": self.name}
        if self.is_folder:
            data["children"] = [child.to_dict() for child in self.children]
        return data


Tree = List[Node]

# -----------------------------------------------------------------------------
# BUILDER INPUT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Assertion:
    """
    A single (path, file-or-folder) fact consumed by the tree builder.

    Attributes:
        segments: Non-empty sequence of path segments.
        is_file: Whether the final segment is a file.
    """
    segments: Tuple[str, ...]
    is_file: bool

    @property
    def path(self) -> str:
        return "/".join(self.segments)
