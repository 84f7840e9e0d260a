from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

from folderforge.domain.constants import DEFAULT_INDENT_UNIT, SUPPORTED_FORMATS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the folderforge CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="folderforge",
        description="Create directories and empty files from a tree diagram, "
                    "nested mapping, flat mapping, segment list or path list.",
    )

    # --- Input ---
    p.add_argument(
        "input_source",
        help="File containing the structure, '-' for stdin, or the structure text itself.",
    )
    p.add_argument(
        "-f", "--format",
        dest="format",
        default=None,
        help=f"Input format: {', '.join(SUPPORTED_FORMATS)} (default: tree).",
    )
    p.add_argument(
        "--indent",
        dest="indent_unit",
        default=None,
        help=f"Tree diagram columns per level, or 'auto' (default: {DEFAULT_INDENT_UNIT}).",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="base_directory",
        default=None,
        help="Directory in which the structure is created (default: current directory).",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be created without touching the filesystem.",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Log the parsed tree before creating it.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_source"] = args.input_source
    overrides["format"] = args.format
    overrides["base_directory"] = args.base_directory
    overrides["indent_unit"] = args.indent_unit

    if args.dry_run:
        overrides["dry_run"] = True
    if args.print_tree:
        overrides["print_tree"] = True

    return overrides
