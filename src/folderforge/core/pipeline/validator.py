from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the pipeline: ensures the configuration dictionary conforms
to the expected schema. Handles type coercion, format tag normalization and
default value injection. Never touches the filesystem.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from folderforge.core.adapters import normalize_format
from folderforge.domain.config import get_default_config
from folderforge.domain.constants import DEFAULT_INDENT_UNIT

logger = logging.getLogger(__name__)

AUTO_INDENT = "auto"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        ConfigurationError: If the format tag is unknown (in both modes).
        TypeError / ValueError: On invalid values when strict=True.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing & Normalization
    for field in ("input_source", "base_directory"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in ("dry_run", "print_tree"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    # 3. Domain-Specific Normalization
    merged["format"] = normalize_format(merged.get("format"))
    merged["indent_unit"] = _as_indent_unit(merged.get("indent_unit"), warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        # input_source may be literal multi-line content; only blank strings fall back
        return value if value.strip() else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_indent_unit(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """
    Normalize the tree-string indent width. None and 'auto' select
    auto-detection; anything else must be a positive integer.
    """
    if value is None:
        return None
    if isinstance(value, str):
        s = value.strip().lower()
        if s == AUTO_INDENT:
            return None
        if s.isdigit():
            value = int(s)
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value

    msg = f"Invalid field 'indent_unit': expected a positive int or '{AUTO_INDENT}', received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using {DEFAULT_INDENT_UNIT}.")
    return DEFAULT_INDENT_UNIT
