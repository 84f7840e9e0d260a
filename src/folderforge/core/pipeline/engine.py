from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the scaffolding workflow:
1. Validates configuration (unknown formats fail before any I/O).
2. Resolves the input source into text.
3. Parses the text with the selected format adapter.
4. Renders a preview of the canonical tree.
5. Materializes the tree (or simulates it on a dry run).
"""

import logging
import os
from typing import Any, Dict, List, Optional

from folderforge.core.adapters import parse
from folderforge.core.analysis.tree_renderer import render_tree
from folderforge.core.pipeline.materializer import MaterializeReport, materialize
from folderforge.core.pipeline.validator import validate_config
from folderforge.domain.errors import ConfigurationError, FilesystemError, ParseError
from folderforge.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from folderforge.infra.fs import DryRunFileSystem, FileSystemPort, LocalFileSystem, normalize_path
from folderforge.infra.input_provider import resolve_input

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        fs: Optional[FileSystemPort] = None,
) -> PipelineResult:
    """
    Execute the full scaffolding pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        fs: Filesystem collaborator override. Ignored on dry runs, which
            always use a recording DryRunFileSystem.

    Returns:
        PipelineResult: Object containing status, tree preview and effects.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config Validation
    # -------------------------------------------------------------------------
    try:
        cfg, warnings = validate_config(config or {}, strict=False)
    except ConfigurationError as e:
        logger.error(str(e))
        return create_error_result(str(e), dict(config or {}))

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cfg["base_directory"] = normalize_path(cfg["base_directory"], os.getcwd())
    fmt = cfg["format"]

    # -------------------------------------------------------------------------
    # 2) Input Resolution & Parsing
    # -------------------------------------------------------------------------
    try:
        text = resolve_input(cfg["input_source"])
        tree = parse(fmt, text, indent_unit=cfg["indent_unit"])
    except ParseError as e:
        logger.error(f"Parsing failed: {e}")
        return create_error_result(str(e), cfg)
    except (ConfigurationError, FilesystemError) as e:
        logger.error(str(e))
        return create_error_result(str(e), cfg)

    if not tree:
        msg = "Input describes no entries; nothing to create."
        logger.warning(msg)
        return create_error_result(msg, cfg)

    tree_lines = render_tree(tree)
    if cfg["print_tree"]:
        logger.info("Tree Preview:\n" + "\n".join(tree_lines))

    # -------------------------------------------------------------------------
    # 3) Materialization
    # -------------------------------------------------------------------------
    dry_run = cfg["dry_run"]
    if dry_run:
        target_fs: FileSystemPort = DryRunFileSystem()
    else:
        target_fs = fs or LocalFileSystem()

    base_directory = cfg["base_directory"]
    if not dry_run and not target_fs.exists(base_directory):
        try:
            target_fs.mkdir(base_directory, recursive=True)
        except FilesystemError as e:
            logger.error(str(e))
            return create_error_result(str(e), cfg, tree_lines)

    report = MaterializeReport()
    try:
        for root in tree:
            materialize(root, base_directory, "", target_fs, report)
    except FilesystemError as e:
        logger.error(f"Materialization aborted: {e}")
        return create_error_result(
            str(e), cfg, tree_lines, report,
            summary_extra=_build_summary(fmt, tree_lines, report, dry_run),
        )

    roots: List[str] = [node.name for node in tree]
    logger.info(
        f"Pipeline finished: {len(report.created_dirs)} directories, "
        f"{len(report.created_files)} files{' (dry run)' if dry_run else ''}."
    )
    return create_success_result(
        cfg, roots, tree_lines, report,
        summary_extra=_build_summary(fmt, tree_lines, report, dry_run),
    )


def _build_summary(fmt: str, tree_lines: List[str], report: MaterializeReport, dry_run: bool) -> Dict[str, Any]:
    return {
        "format": fmt,
        "dry_run": dry_run,
        "entries": len(tree_lines),
        "created_dirs": len(report.created_dirs),
        "created_files": len(report.created_files),
        "existing_dirs": len(report.existing_dirs),
    }
