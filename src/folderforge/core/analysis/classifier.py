from __future__ import annotations

"""
Entry Classifier.

Decides whether a path segment names a folder or a file. The policy is an
explicit parameter so each format adapter states how strict it is.
"""

from enum import Enum
from typing import Iterable, Optional

from folderforge.domain.constants import FILE_EXTENSIONS
from folderforge.domain.tree_models import NodeKind

# -----------------------------------------------------------------------------
# POLICIES
# -----------------------------------------------------------------------------

class ClassifierPolicy(str, Enum):
    """
    Strategy used when no explicit marker is available.

    GENERIC_DOT: a terminal segment containing '.' is a file.
    EXTENSION_ALLOWLIST: a terminal segment is a file only when it ends with
        an allow-listed extension or equals an allow-listed bare name.
    """
    GENERIC_DOT = "generic_dot"
    EXTENSION_ALLOWLIST = "extension_allowlist"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify(
        name: str,
        *,
        is_terminal: bool,
        explicit: Optional[NodeKind] = None,
        policy: ClassifierPolicy = ClassifierPolicy.GENERIC_DOT,
        extensions: Optional[Iterable[str]] = None,
) -> NodeKind:
    """
    Classify a single segment as folder or file.

    Args:
        name: Segment to classify.
        is_terminal: Whether the segment ends its path.
        explicit: Marker stated by the source format; always wins.
        policy: Fallback heuristic when no marker is given.
        extensions: Allow-list override for EXTENSION_ALLOWLIST.

    Returns:
        NodeKind: FOLDER or FILE.
    """
    if explicit is not None:
        return explicit

    # Segments with descendants are folders regardless of dots
    if not is_terminal or is_placeholder_segment(name):
        return NodeKind.FOLDER

    if policy is ClassifierPolicy.EXTENSION_ALLOWLIST:
        allowed = FILE_EXTENSIONS if extensions is None else extensions
        return NodeKind.FILE if has_file_extension(name, allowed) else NodeKind.FOLDER

    return NodeKind.FILE if "." in name else NodeKind.FOLDER


def has_file_extension(name: str, extensions: Iterable[str] = FILE_EXTENSIONS) -> bool:
    """
    Check a name against the extension allow-list.

    Entries with a leading dot match as suffixes, bare entries
    (e.g. 'Dockerfile') must match the whole name.
    """
    for ext in extensions:
        if ext.startswith("."):
            if name.endswith(ext):
                return True
        elif name == ext:
            return True
    return False


def is_placeholder_segment(name: str) -> bool:
    """True for empty segments and names made only of dots ('.', '..', '...')."""
    stripped = name.strip()
    return not stripped or set(stripped) == {"."}
