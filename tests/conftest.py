from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. One logical project structure expressed in every input format.
3. An in-memory recording filesystem collaborator.
"""

import os
import sys
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from folderforge.domain.errors import FilesystemError  # noqa: E402
from folderforge.domain.tree_models import Node  # noqa: E402
from folderforge.infra.fs import FileSystemPort  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class RecordingFileSystem(FileSystemPort):
    """
    In-memory filesystem collaborator recording every call.

    Args:
        existing_dirs: Directories that exist before the run.
        fail_on: Basename whose mkdir/write_file raises FilesystemError.
    """

    def __init__(self, existing_dirs: Iterable[str] = (), fail_on: Optional[str] = None):
        self.dirs: Set[str] = {os.path.normpath(d) for d in existing_dirs}
        self.files: Dict[str, bytes] = {}
        self.calls: List[Tuple[str, str]] = []
        self.fail_on = fail_on

    def exists(self, path: str) -> bool:
        p = os.path.normpath(path)
        self.calls.append(("exists", p))
        return p in self.dirs or p in self.files

    def mkdir(self, path: str, recursive: bool = True) -> None:
        p = os.path.normpath(path)
        self._maybe_fail("mkdir", p)
        self.calls.append(("mkdir", p))
        self.dirs.add(p)

    def write_file(self, path: str, content: bytes = b"") -> None:
        p = os.path.normpath(path)
        self._maybe_fail("write_file", p)
        self.calls.append(("write_file", p))
        self.files[p] = content

    @property
    def mutations(self) -> List[Tuple[str, str]]:
        return [c for c in self.calls if c[0] != "exists"]

    def _maybe_fail(self, operation: str, path: str) -> None:
        if self.fail_on and os.path.basename(path) == self.fail_on:
            raise FilesystemError(operation, path, "Permission denied")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def recording_fs() -> RecordingFileSystem:
    """Return an empty in-memory filesystem."""
    return RecordingFileSystem()


@pytest.fixture
def make_recording_fs() -> Callable[..., RecordingFileSystem]:
    """Return a factory for customised in-memory filesystems."""
    return RecordingFileSystem


@pytest.fixture
def expected_project_tree() -> List[Node]:
    """
    Canonical tree shared by every format fixture below.

    Structure:
    project
      src
        utils
          helper.ts
        index.ts
      .bunfig.toml
      README.md
      package.json
    """
    return [
        Node.folder("project", [
            Node.folder("src", [
                Node.folder("utils", [Node.file("helper.ts")]),
                Node.file("index.ts"),
            ]),
            Node.file(".bunfig.toml"),
            Node.file("README.md"),
            Node.file("package.json"),
        ])
    ]


@pytest.fixture
def project_inputs() -> Dict[str, Any]:
    """Return the project structure expressed in every supported format."""
    tree_text = "\n".join([
        "/project",
        "├── src",
        "│   ├── index.ts",
        "│   └── utils",
        "│       └── helper.ts",
        "├── .bunfig.toml",
        "├── README.md",
        "└── package.json",
    ])
    nested = {
        "project": {
            "package.json": None,
            "README.md": None,
            ".bunfig.toml": None,
            "src": {
                "index.ts": None,
                "utils": {"helper.ts": None},
            },
        }
    }
    flat = {
        "project": True,
        "project/.bunfig.toml": True,
        "project/README.md": True,
        "project/package.json": True,
        "project/src": True,
        "project/src/index.ts": True,
        "project/src/utils": True,
        "project/src/utils/helper.ts": True,
    }
    segments = [
        ["project"],
        ["project", "src", "utils", "helper.ts"],
        ["project", "src", "index.ts"],
        ["project", "package.json"],
        ["project", ".bunfig.toml"],
        ["project", "README.md"],
    ]
    paths = [
        "project/src/utils/helper.ts",
        "project/package.json",
        "project/.bunfig.toml",
        "project/src/index.ts",
        "project/README.md",
    ]
    return {
        "tree": tree_text,
        "nested": nested,
        "flat": flat,
        "segments": segments,
        "paths": paths,
    }
