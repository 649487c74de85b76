#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions for resgen: identifier casing
    (underscore/camelize), dictionary merge, and file I/O helpers.
"""

import json
from pathlib import Path
from typing import Dict, Any

from resgen.core.constants import (
    ACRONYM_BOUNDARY_RE, CAMEL_BOUNDARY_RE,
    CAMEL_HEAD_RE, CAMEL_SEGMENT_RE, DEFAULT_TEXT_ENCODING,
)


# --- Naming Helpers --- #

def underscore(source: str) -> str:
    """
    Convert a camelCase identifier to snake_case.

    Examples
    --------
    >>> underscore("fooBar")
    'foo_bar'
    >>> underscore("HTTPServer")
    'http_server'
    """
    tmp = ACRONYM_BOUNDARY_RE.sub(r"\1_\2", source)
    tmp = CAMEL_BOUNDARY_RE.sub(r"\1_\2", tmp)
    # only the first dash/dot is folded
    tmp = tmp.replace("-", "_", 1)
    tmp = tmp.replace(".", "_", 1)
    return tmp.lower()


def camelize(term: str, first_letter: str = "upper") -> str:
    """
    Convert a snake_case identifier to camelCase.

    Args:
        term: identifier to convert.
        first_letter: "upper" for UpperCamel, "lower" for lowerCamel.

    Examples
    --------
    >>> camelize("foo_bar", "upper")
    'FooBar'
    >>> camelize("foo_bar", "lower")
    'fooBar'
    """
    if first_letter not in ("upper", "lower"):
        raise ValueError(f"first_letter must be 'upper' or 'lower', got {first_letter!r}")

    if first_letter == "upper":
        res = CAMEL_HEAD_RE.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:], term, count=1)
    else:
        res = term[:1].lower() + term[1:]

    return CAMEL_SEGMENT_RE.sub(lambda m: m.group(1)[:1].upper() + m.group(1)[1:], res)


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
