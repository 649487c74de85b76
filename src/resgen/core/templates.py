#!/usr/bin/env python3
"""
Purpose:
    Template executor for custom code fragments (custom expanders and
    flatteners). The property and its prefix are the template inputs.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from resgen.core.utils import camelize, underscore

if TYPE_CHECKING:
    from resgen.core.schema.property_node import PropertyNode


def _build_env(
    templates_roots: Iterable[Path],
    extra_filters: Optional[Dict[str, Any]] = None
) -> Environment:
    loader = FileSystemLoader([str(Path(p).resolve()) for p in templates_roots])
    env = Environment(
        loader=loader,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["underscore"] = underscore
    env.filters["camelize"] = camelize
    if extra_filters:
        env.filters.update(extra_filters)
    return env


class TemplateExecutor:
    """
    Holds a Jinja Environment rooted at the configured template paths.

    Templates see `property` (the PropertyNode) and `prefix` (its
    code-generation prefix).
    """

    def __init__(self, templates_roots: Iterable[Path], filters: Optional[Dict[str, Any]] = None):
        self.env = _build_env(templates_roots, filters)

    def execute(self, node: PropertyNode, template_path: str, append_newline: bool = False) -> str:
        if not template_path:
            return ""
        template = self.env.get_template(Path(template_path).as_posix())
        rendered = template.render(property=node, prefix=node.get_prefix())
        if not append_newline:
            rendered = rendered.removesuffix("\n")
        return rendered
