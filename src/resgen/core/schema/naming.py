#!/usr/bin/env python3
"""
Purpose:
    Name and path computations over a property tree: diagnostic lineage,
    configuration lineage (flattened objects are transparent), the memoised
    code-generation prefix, and globally unique namespace names.
"""
from __future__ import annotations

import logging
from typing import List, TYPE_CHECKING

from resgen.core import constants as C
from resgen.core.utils import camelize, underscore
from resgen.core.schema.property_kind import PropertyKind

if TYPE_CHECKING:
    from resgen.core.schema.property_node import PropertyNode
    from resgen.core.schema.resource import Resource

logger = logging.getLogger(__name__)


def ancestry(node: PropertyNode) -> List[PropertyNode]:
    """Return the chain of properties from the tree root down to `node`."""
    chain = [node]
    while chain[-1].parent is not None:
        chain.append(chain[-1].parent)
    chain.reverse()
    return chain


# --- Lineage --- #

def lineage(node: PropertyNode) -> str:
    """
    Dot notation path to the property, e.g. `parent.meta.label.foo`.

    Only meant for error messages; it is not guaranteed to be a valid
    configuration path.
    """
    return ".".join(underscore(p.name) for p in ancestry(node))


def lineage_as_snake_case(node: PropertyNode) -> str:
    return "_".join(underscore(p.name) for p in ancestry(node))


def config_lineage(node: PropertyNode) -> str:
    """
    Access path of the property in configuration values, e.g. `metadata.0.labels`.

    A flattened parent does not appear in the path.
    """
    parent = node.parent
    if parent is None or parent.flatten_object:
        return underscore(node.name)
    return f"{config_lineage(parent)}{C.INDEX_MARKER}{underscore(node.name)}"


# --- Prefix --- #

def compute_prefix(node: PropertyNode) -> str:
    """
    Prefix of generated expand/flatten function names for `node`.

    Arrays and maps are transparent; a map's value object adds the map's own
    name instead of its synthetic key-holder level.
    """
    parent = node.parent
    if parent is None:
        resource = node.require_resource()
        nested = ""
        # TODO: emit the nested prefix for the conversion compiler once its templates expect it
        if resource.nested_query is not None and resource.compiler != C.CONVERSION_COMPILER:
            nested = C.NESTED_PREFIX
        return f"{nested}{resource.resource_name()}"

    if parent.is_a(PropertyKind.ARRAY) or parent.is_a(PropertyKind.MAP):
        return parent.get_prefix()

    grandparent = parent.parent
    if grandparent is not None and grandparent.is_a(PropertyKind.MAP):
        return f"{parent.get_prefix()}{grandparent.titlelize_property()}"

    return f"{parent.get_prefix()}{parent.titlelize_property()}"


def precompute_prefixes(resource: Resource) -> int:
    """Fix the prefix of every property of `resource`. Returns the number of properties visited."""
    count = 0
    for top in resource.all_properties():
        for node in top.walk():
            node.get_prefix()
            count += 1
    logger.debug("Computed %d prefixes for resource %s", count, resource.name)
    return count


# --- Namespaces --- #

def property_ns_prefix(node: PropertyNode) -> List[str]:
    product = node.require_resource().product_metadata
    return [C.PROPERTY_NS_HEAD, camelize(product.name, "upper"), C.PROPERTY_NS_TAIL]


def namespace_property(node: PropertyNode) -> str:
    """Product- and resource-qualified name of the property, e.g. `computeDiskSourceImageKey`."""
    resource = node.require_resource()
    name = "".join(camelize(p.name, "upper") for p in ancestry(node))
    return f"{camelize(resource.product_metadata.api_name, 'lower')}{resource.name}{name}"
