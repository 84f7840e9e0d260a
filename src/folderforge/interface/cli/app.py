from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
and validation, pipeline execution, and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import List, Optional

from folderforge.core.pipeline.engine import run_pipeline
from folderforge.core.pipeline.validator import validate_config
from folderforge.domain.config import get_default_config, merge_config
from folderforge.domain.errors import ConfigurationError
from folderforge.domain.pipeline_models import PipelineResult
from folderforge.infra.logging import LoggingConfig, configure_logging, get_logger
from folderforge.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    # 3. Configuration merge and validation (before any I/O)
    raw_conf = merge_config(get_default_config(), cli_args.args_to_overrides(args))
    try:
        clean_conf, warnings = validate_config(raw_conf, strict=False)
    except ConfigurationError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf)
    except KeyboardInterrupt:
        msg = "Interrupted. Entries created so far were left in place."
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """
    Format and print the execution result to the standard output.

    Args:
        result: The pipeline result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.dry_run:
        print(f"Dry run: nothing was written. Target: {result.base_directory}")
        print("\n".join(result.tree_lines))
        print(
            f"Would create {len(result.created_dirs)} directories "
            f"and {len(result.created_files)} files."
        )
        return

    print(f"Structure created in: {result.base_directory}")
    print(f"Directories created: {len(result.created_dirs)}")
    print(f"Files created: {len(result.created_files)}")
    if result.existing_dirs:
        print(f"Existing directories kept: {len(result.existing_dirs)}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
