#!/usr/bin/env python3
"""
Purpose:
    Applies the `logging` section of the resgen configuration.
"""

import logging
from typing import Any, Dict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: Dict[str, Any]) -> int:
    """
    Configure the root logger from `config["logging"]["level"]`.

    Unknown level names fall back to INFO. Returns the numeric level applied.
    """
    name = str(config.get("logging", {}).get("level", "INFO")).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("resgen").setLevel(level)
    return level
