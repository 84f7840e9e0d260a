from __future__ import annotations

"""
Input Provider.

Resolves the user-supplied input source into literal text. The source may
name an existing file, '-' for standard input, or be the content itself.
"""

import logging
import os
import sys
from typing import Optional, TextIO

from folderforge.domain.errors import FilesystemError

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def resolve_input(source: Optional[str], stdin: Optional[TextIO] = None) -> str:
    """
    Turn an input source into the text the adapters parse.

    Args:
        source: File path, '-' for standard input, or literal content.
        stdin: Stream used for '-' (defaults to sys.stdin).

    Returns:
        str: Resolved text ('' when the source is empty).

    Raises:
        FilesystemError: If an existing file cannot be read.
    """
    if not source:
        return ""

    if source == STDIN_MARKER:
        logger.debug("Reading input from standard input.")
        return (stdin or sys.stdin).read()

    if _looks_like_path(source) and os.path.isfile(source):
        logger.info(f"Reading input file: {source}")
        try:
            with open(source, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FilesystemError("read", source, str(e)) from e

    return source


def _looks_like_path(source: str) -> bool:
    """Multi-line strings are always literal content."""
    return "\n" not in source and len(source) < 4096
