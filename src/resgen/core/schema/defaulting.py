#!/usr/bin/env python3
"""
Purpose:
    Default resolution for property trees. Fills derived fields once per
    tree, parent before children; explicitly set values are kept.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resgen.core import constants as C
from resgen.core.schema.property_kind import PropertyKind

if TYPE_CHECKING:
    from resgen.core.schema.property_node import PropertyNode
    from resgen.core.schema.resource import Resource

logger = logging.getLogger(__name__)


def set_resource_defaults(resource: Resource) -> None:
    """Resolve defaults for every top-level parameter and property of `resource`."""
    if not resource.update_verb:
        resource.update_verb = C.DEFAULT_UPDATE_VERB
    for prop in resource.all_properties():
        prop.link_parent(None)
        set_default(prop, resource)
    logger.debug("Resolved defaults for resource %s", resource.name)


def set_default(node: PropertyNode, resource: Resource) -> None:
    node.link_resource(resource)
    if not node.update_verb:
        node.update_verb = resource.update_verb

    kind = node.resolve_kind()

    if kind is PropertyKind.ARRAY:
        item = node.item_type
        if item is not None:
            item.name = node.name
            item.parent_name = node.name
            item.link_parent(node)
            set_default(item, resource)

    elif kind is PropertyKind.MAP:
        if not node.key_expander:
            node.key_expander = C.DEFAULT_KEY_EXPANDER
        value = node.value_type
        if value is not None:
            value.parent_name = node.name
            value.link_parent(node)
            set_default(value, resource)

    elif kind is PropertyKind.NESTED_OBJECT:
        if not node.name:
            node.name = node.parent_name
        if not node.description:
            node.description = C.NESTED_OBJECT_DESCRIPTION
        for child in node.properties or []:
            child.link_parent(node)
            set_default(child, resource)

    elif kind is PropertyKind.RESOURCE_REF:
        if not node.name:
            node.name = node.resource
        if not node.description:
            node.description = C.RESOURCE_REF_DESCRIPTION.format(resource=node.resource)

    elif kind is PropertyKind.FINGERPRINT:
        # Server-computed token used for optimistic locking during updates
        node.output = True

    if not node.api_name:
        node.api_name = node.name
