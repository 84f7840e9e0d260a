from __future__ import annotations

"""
Structured Input Decoding.

Shared helpers for the adapters whose input is a structured value
(nested mapping, flat mapping, segment list, JSON path list). Text is
decoded as JSON first and as YAML when JSON rejects it.

YAML is loaded without implicit scalar typing: every plain scalar stays the
exact text the user wrote, so names like '1.10', '010', 'on' or 'null'
reach the filesystem unchanged.
"""

import json
import logging
from typing import Any, Dict, List

import yaml

from folderforge.domain.errors import ParseError

logger = logging.getLogger(__name__)

# Flag spellings the flat mapping treats as "disabled" once YAML keeps them as text
_FALSE_FLAGS = frozenset({"", "false", "no", "n", "off", "0", "null", "~"})


class _TextLoader(yaml.SafeLoader):
    """SafeLoader with no implicit resolvers: untagged scalars load as str."""


_TextLoader.yaml_implicit_resolvers = {}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def decode_text(raw: Any, format_name: str) -> Any:
    """
    Decode bytes input as UTF-8; other values are returned unchanged.

    Raises:
        ParseError: If the bytes are not valid UTF-8.
    """
    if not isinstance(raw, bytes):
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(format_name, f"input is not valid UTF-8 ({e.reason} at byte {e.start})", raw) from e


def decode_structured(raw: Any, format_name: str) -> Any:
    """
    Turn raw adapter input into a Python value.

    Already-structured values are returned untouched. Blank text and None
    decode to None, which every adapter treats as an empty tree.

    Args:
        raw: Text, bytes or an already decoded value.
        format_name: Adapter tag used in error reporting.

    Returns:
        Any: Decoded value, or None for blank input.

    Raises:
        ParseError: If the bytes are not UTF-8, or the text is neither
                    valid JSON nor valid YAML.
    """
    if raw is None:
        return None
    text = decode_text(raw, format_name)
    if not isinstance(text, str):
        return text

    text = text.strip()
    if not text:
        return None

    try:
        return json.loads(text)
    except json.JSONDecodeError as json_err:
        logger.debug(f"[{format_name}] Input is not JSON ({json_err.msg}); trying YAML.")
        try:
            return yaml.load(text, Loader=_TextLoader)
        except yaml.YAMLError as yaml_err:
            reason = f"invalid syntax: {json_err.msg} at line {json_err.lineno} column {json_err.colno}"
            raise ParseError(format_name, reason, raw) from yaml_err


def require_mapping(value: Any, format_name: str, raw: Any) -> Dict[Any, Any]:
    """Ensure the decoded input is a mapping."""
    if not isinstance(value, dict):
        raise ParseError(format_name, f"expected a mapping, received {type(value).__name__}", raw)
    return value


def require_sequence(value: Any, format_name: str, raw: Any) -> List[Any]:
    """Ensure the decoded input is a list or tuple."""
    if not isinstance(value, (list, tuple)):
        raise ParseError(format_name, f"expected a list, received {type(value).__name__}", raw)
    return list(value)


def coerce_name(value: Any, format_name: str, raw: Any, where: str) -> str:
    """
    Convert a scalar key or segment into a string name.

    Numbers passed in already-decoded values are accepted and converted.
    Containers, booleans and nulls are rejected.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ParseError(
        format_name,
        f"expected a string name at {where}, received {type(value).__name__}",
        raw,
    )


def is_enabled_flag(value: Any) -> bool:
    """
    Interpret a flat-mapping flag. Text flags such as 'false', 'no' or
    'off' are disabled; everything else follows Python truthiness.
    """
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_FLAGS
    return bool(value)
