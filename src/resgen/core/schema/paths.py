#!/usr/bin/env python3
"""
Purpose:
    Resolves configuration paths written against the conceptual property
    tree (e.g. `parent_field.0.child_name`) to the paths that exist in the
    generated schema, dropping segments of flattened nested objects.

    A path that no longer resolves yields "" rather than an error; callers
    drop such entries from emitted constraint lists.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, TYPE_CHECKING

from resgen.core.constants import INDEX_MARKER
from resgen.core.utils import camelize, underscore

if TYPE_CHECKING:
    from resgen.core.schema.property_node import PropertyNode

logger = logging.getLogger(__name__)


def resolve_schema_path(properties: Sequence[PropertyNode], schema_path: str) -> str:
    """
    Resolve `schema_path` against `properties` (a resource's top-level user properties).

    Renamed fields must be referenced by their new name; flattened fields
    still appear in the input, i.e. `flattened.0.new_parent.0.renamed`.

    Example
    -------
    With `nested` flattened, `nested.0.inner` resolves to `inner`.
    """
    candidates: Sequence[PropertyNode] = properties
    tokens: List[str] = []

    for segment in schema_path.split(INDEX_MARKER):
        match = _find_by_name(candidates, camelize(segment, "lower"))
        if match is None:
            # renamed at the top level
            match = _find_by_name(candidates, segment)
        if match is None:
            logger.debug("Schema path %r: no property matches segment %r", schema_path, segment)
            return ""

        candidates = match.nested_properties()
        if not match.flatten_object:
            tokens.append(underscore(match.name))

    if not tokens or tokens[-1] == "":
        return ""
    return INDEX_MARKER.join(tokens)


def resolve_schema_path_list(properties: Sequence[PropertyNode], property_list: Iterable[str]) -> List[str]:
    """Resolve each path, dropping the ones that no longer apply."""
    resolved = []
    for path in property_list:
        result = resolve_schema_path(properties, path)
        if result:
            resolved.append(result)
    return resolved


def _find_by_name(candidates: Sequence[PropertyNode], name: str) -> Optional[PropertyNode]:
    return next((p for p in candidates if p.name == name), None)
