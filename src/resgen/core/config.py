#!/usr/bin/env python3
"""
resgen configuration loader.
"""

import os
from pathlib import Path
from typing import Any, Dict, Final, List

from resgen.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "target_version": "ga",
    "compiler": "terraformgoogle-codegen",
    "template_paths": [str(Path("./templates").resolve())],
    "fail_fast": False,
    "logging": {"level": "INFO"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "resgen" / "config.json"

_TRUE_STRINGS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load resgen configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/resgen/config.json)
        3. Project config (./resgen.json)
        4. Environment overrides:
           - RESGEN_TARGET_VERSION
           - RESGEN_COMPILER
           - RESGEN_TEMPLATE_PATHS (pathsep-separated list)
           - RESGEN_FAIL_FAST ("1", "true", "yes", "on")
           - RESGEN_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = dict(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / "resgen.json"
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    version_env = os.getenv("RESGEN_TARGET_VERSION")
    if version_env:
        config["target_version"] = version_env.strip().lower()

    compiler_env = os.getenv("RESGEN_COMPILER")
    if compiler_env:
        config["compiler"] = compiler_env.strip()

    template_paths_env = os.getenv("RESGEN_TEMPLATE_PATHS")
    if template_paths_env:
        config["template_paths"] = _split_paths_env(template_paths_env)

    fail_fast_env = os.getenv("RESGEN_FAIL_FAST")
    if fail_fast_env:
        config["fail_fast"] = fail_fast_env.strip().lower() in _TRUE_STRINGS

    log_level_env = os.getenv("RESGEN_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    return config


# --- Internals --- #

def _split_paths_env(value: str) -> List[str]:
    """
    Split a path-list env var on os.pathsep, trimming empties and expanding '~'.

    Example:
        "a:~/b:/tmp" on Unix  -> ["a", "/home/user/b", "/tmp"] (no resolve here)
    """
    parts = [p.strip() for p in value.split(os.pathsep)]
    return [str(Path(p).expanduser()) for p in parts if p]
