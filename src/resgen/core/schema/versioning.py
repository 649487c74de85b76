#!/usr/bin/env python3
"""
Purpose:
    Version filtering: marks properties excluded when the targeted product
    version does not satisfy their exact/minimum version constraint.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resgen.core.version import Version
from resgen.core.schema.property_kind import PropertyKind

if TYPE_CHECKING:
    from resgen.core.schema.property_node import PropertyNode
    from resgen.core.schema.resource import Resource

logger = logging.getLogger(__name__)


def exclude_resource_if_not_in_version(resource: Resource, version: Version) -> int:
    """Filter every property of `resource`. Returns the number of excluded properties."""
    for prop in resource.all_properties():
        exclude_if_not_in_version(prop, version)
    excluded = sum(1 for top in resource.all_properties() for p in top.walk() if p.exclude)
    logger.debug("Resource %s at %s: %d excluded properties", resource.name, version, excluded)
    return excluded


def exclude_if_not_in_version(node: PropertyNode, version: Version) -> None:
    """
    Exclude `node` (and, independently, its descendants) if it is not part of `version`.

    An exact version wins over the minimum version; the minimum falls back to
    the owning resource's. Nodes are never re-included.
    """
    if not node.exclude:
        exact = node.exact_version_obj()
        if exact is not None:
            node.exclude = exact.compare_to(version) != 0

        if not node.exclude:
            node.exclude = version.compare_to(node.min_version_obj()) < 0

        if node.exclude:
            logger.debug("Excluding %s at version %s", node.lineage, version)

    if node.is_a(PropertyKind.NESTED_OBJECT):
        for child in node.properties or []:
            exclude_if_not_in_version(child, version)
    elif node.is_a(PropertyKind.ARRAY):
        item = node.item_type
        if item is not None and item.is_a(PropertyKind.NESTED_OBJECT):
            exclude_if_not_in_version(item, version)
    elif node.is_a(PropertyKind.MAP):
        if node.value_type is not None:
            exclude_if_not_in_version(node.value_type, version)
