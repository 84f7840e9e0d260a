from __future__ import annotations

"""
Configuration Domain Management.

Defines the session configuration consumed by the pipeline. Every value
the core needs (format, input source, target directory) travels in this
dictionary; nothing below the CLI reads process globals.
"""

import logging
import os
from typing import Any, Dict

from folderforge.domain.constants import DEFAULT_INDENT_UNIT, FORMAT_TREE

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "format": FORMAT_TREE,
        "input_source": "",

        # Output
        "base_directory": os.getcwd(),

        # Parsing
        "indent_unit": DEFAULT_INDENT_UNIT,

        # Execution
        "dry_run": False,
        "print_tree": False,
    }


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged and None values are ignored, so unset CLI
    flags never mask defaults.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for key in get_default_config():
        if key in overrides and overrides[key] is not None:
            out[key] = overrides[key]
    ignored = sorted(set(overrides) - set(out))
    if ignored:
        logger.debug(f"Ignoring unknown configuration keys: {ignored}")
    return out
