from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate
execution outcomes between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        format: Adapter tag used to parse the input.
        base_directory: Directory the tree was (or would be) created in.
        dry_run: Whether filesystem operations were only simulated.
        roots: Names of the top-level entries of the parsed tree.
        tree_lines: ASCII rendering of the parsed tree.
        created_dirs: Directories created during materialization.
        created_files: Files created (or truncated) during materialization.
        existing_dirs: Directories that already existed and were kept.
        summary: Technical execution summary and statistics.
    """
    ok: bool
    error: str

    format: str
    base_directory: str
    dry_run: bool

    roots: List[str] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)

    created_dirs: List[str] = field(default_factory=list)
    created_files: List[str] = field(default_factory=list)
    existing_dirs: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        tree_lines: Optional[List[str]] = None,
        report: Optional[Any] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        tree_lines: Rendered tree, if parsing got that far.
        report: Partial materialization report, if any entries were created.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        format=str(cfg.get("format", "")),
        base_directory=str(cfg.get("base_directory", "")),
        dry_run=bool(cfg.get("dry_run", False)),
        tree_lines=tree_lines or [],
        created_dirs=list(report.created_dirs) if report else [],
        created_files=list(report.created_files) if report else [],
        existing_dirs=list(report.existing_dirs) if report else [],
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        roots: List[str],
        tree_lines: List[str],
        report: Any,
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        cfg: Final configuration used during execution.
        roots: Names of the materialized root entries.
        tree_lines: Rendered tree.
        report: Materialization report.
        summary_extra: Final execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        format=str(cfg.get("format", "")),
        base_directory=str(cfg.get("base_directory", "")),
        dry_run=bool(cfg.get("dry_run", False)),
        roots=list(roots),
        tree_lines=list(tree_lines),
        created_dirs=list(report.created_dirs),
        created_files=list(report.created_files),
        existing_dirs=list(report.existing_dirs),
        summary=summary_extra or {},
    )
