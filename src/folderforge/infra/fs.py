from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the filesystem collaborator used by the materializer, plus path
normalization and directory walking utilities. Implementations wrap the
'os' module so OS failures surface as FilesystemError.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from folderforge.domain.errors import FilesystemError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# COLLABORATOR INTERFACE
# -----------------------------------------------------------------------------

class FileSystemPort(ABC):
    """
    Abstract filesystem collaborator consumed by the materializer.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if anything exists at path."""

    @abstractmethod
    def mkdir(self, path: str, recursive: bool = True) -> None:
        """
        Create a directory.

        Raises:
            FilesystemError: If the directory cannot be created.
        """

    @abstractmethod
    def write_file(self, path: str, content: bytes = b"") -> None:
        """
        Create or truncate a file with the given content.

        Raises:
            FilesystemError: If the file cannot be written.
        """

# -----------------------------------------------------------------------------
# IMPLEMENTATIONS
# -----------------------------------------------------------------------------

class LocalFileSystem(FileSystemPort):
    """Collaborator backed by the real operating system."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def mkdir(self, path: str, recursive: bool = True) -> None:
        try:
            if recursive:
                os.makedirs(path, exist_ok=True)
            else:
                os.mkdir(path)
        except OSError as e:
            raise FilesystemError("mkdir", path, e.strerror or str(e)) from e

    def write_file(self, path: str, content: bytes = b"") -> None:
        try:
            with open(path, "wb") as f:
                f.write(content)
        except OSError as e:
            raise FilesystemError("write_file", path, e.strerror or str(e)) from e


class DryRunFileSystem(FileSystemPort):
    """
    Collaborator that records planned operations without touching disk.

    Existence checks consult the real filesystem plus the directories
    planned so far, so a dry run reports the same decisions a real run
    would take.
    """

    def __init__(self) -> None:
        self.operations: List[Tuple[str, str]] = []
        self._planned_dirs: set = set()

    def exists(self, path: str) -> bool:
        return os.path.normpath(path) in self._planned_dirs or os.path.exists(path)

    def mkdir(self, path: str, recursive: bool = True) -> None:
        self._planned_dirs.add(os.path.normpath(path))
        self.operations.append(("mkdir", path))

    def write_file(self, path: str, content: bytes = b"") -> None:
        self.operations.append(("write_file", path))

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def collect_paths(root: str) -> List[str]:
    """
    Walk a directory and list every entry below it.

    Args:
        root: Directory to walk.

    Returns:
        List[str]: Sorted POSIX-style relative paths; directories carry a
                   trailing '/'.
    """
    found: List[str] = []
    for current, dirs, files in os.walk(root):
        dirs.sort()
        rel_root = os.path.relpath(current, root)
        prefix = "" if rel_root == "." else rel_root.replace(os.sep, "/") + "/"
        for d in dirs:
            found.append(f"{prefix}{d}/")
        for f in sorted(files):
            found.append(f"{prefix}{f}")
    return sorted(found)
