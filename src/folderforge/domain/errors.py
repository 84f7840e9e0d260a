from __future__ import annotations

"""
Domain Error Taxonomy.

Defines the exceptions raised by the parsing, configuration and
materialization layers. All errors surface to the caller unchanged; no
layer retries.
"""

from typing import Any, Optional

# Maximum characters of raw input echoed back inside a ParseError message
_RAW_PREVIEW_LEN: int = 80


class FolderforgeError(Exception):
    """Base class for every error raised by folderforge."""


class ConfigurationError(FolderforgeError):
    """Invalid configuration (e.g. unknown format tag), raised before any I/O."""


class ParseError(FolderforgeError):
    """
    Malformed input for a given format adapter.

    Attributes:
        format_name: Tag of the adapter that rejected the input.
        reason: Human-readable description of the problem.
        raw: The offending raw input.
    """

    def __init__(self, format_name: str, reason: str, raw: Any = None):
        self.format_name = format_name
        self.reason = reason
        self.raw = raw
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        msg = f"[{self.format_name}] {self.reason}"
        if self.raw is None:
            return msg
        preview = repr(self.raw)
        if len(preview) > _RAW_PREVIEW_LEN:
            preview = preview[:_RAW_PREVIEW_LEN] + "..."
        return f"{msg} (input: {preview})"


class FilesystemError(FolderforgeError):
    """
    Failure reported by the filesystem collaborator.

    Attributes:
        operation: Name of the failed operation (mkdir, write_file, ...).
        path: Target path of the operation.
        reason: Underlying error message.
    """

    def __init__(self, operation: str, path: str, reason: Optional[str] = None):
        self.operation = operation
        self.path = path
        self.reason = reason or "unknown error"
        super().__init__(f"{operation} failed for '{path}': {self.reason}")
