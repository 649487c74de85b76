#!/usr/bin/env python3
"""
Purpose:
    Validation rules for resolved property trees. Each rule reports into a
    ValidationResult; with `strict=True` the first violation raises
    ConfigurationError instead of being collected.
"""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from resgen.core import constants as C
from resgen.core.errors import ConfigurationError
from resgen.core.validation import ValidationResult
from resgen.core.schema.property_kind import PropertyKind

if TYPE_CHECKING:
    from resgen.core.schema.property_node import PropertyNode
    from resgen.core.schema.resource import Resource

logger = logging.getLogger(__name__)


def validate_resource(
    resource: Resource,
    collector: Optional[ValidationResult] = None,
    strict: bool = False,
) -> ValidationResult:
    """Validate every top-level parameter and property of a defaulted resource."""
    if collector is None:
        collector = ValidationResult()
    before = len(collector)
    for prop in resource.all_properties():
        validate_property(prop, resource.name, collector=collector, strict=strict)
    found = len(collector) - before
    if found:
        logger.error("Resource %s has %d configuration error(s)", resource.name, found)
    return collector


def validate_property(
    node: PropertyNode,
    resource_name: str,
    collector: Optional[ValidationResult] = None,
    strict: bool = False,
) -> ValidationResult:
    """Validate `node`, then its item type, value type or child properties."""
    if collector is None:
        collector = ValidationResult()
    lineage = node.lineage

    def report(msg: str) -> None:
        collector.report(msg, strict, ConfigurationError, lineage=lineage, resource=resource_name)

    if not node.name:
        report(f"Missing `name` for property with type {node.resolved_kind.value} in resource {resource_name}")

    if node.output and node.required:
        report(f"Property {node.name} cannot be output and required at the same time in resource {resource_name}.")

    if node.default_from_api and node.default_value is not None:
        report(f"'default_value' and 'default_from_api' cannot be both set for {lineage} in resource {resource_name}")

    _validate_labels_field(node, report)
    _validate_structure(node, report)

    if node.is_a(PropertyKind.ARRAY):
        if node.item_type is not None:
            validate_property(node.item_type, resource_name, collector, strict)
    elif node.is_a(PropertyKind.MAP):
        if node.value_type is not None:
            validate_property(node.value_type, resource_name, collector, strict)
    elif node.is_a(PropertyKind.NESTED_OBJECT):
        for child in node.properties or []:
            validate_property(child, resource_name, collector, strict)

    return collector


# --- Rules --- #

def _owner_names(node: PropertyNode) -> tuple[str, str]:
    resource = node.resource_metadata
    if resource is None:
        return "", ""
    return resource.product_metadata.name, resource.name


def _validate_labels_field(node: PropertyNode, report) -> None:
    """Labels/annotations fields at the conventional lineages must use the dedicated kinds, and only they may."""
    product_name, resource_name = _owner_names(node)
    lineage = node.lineage
    owner = f"{product_name}/{resource_name}"

    if lineage in C.LABELS_LINEAGES:
        if not node.is_a(PropertyKind.KEY_VALUE_LABELS) and (product_name, resource_name) not in C.LABELS_EXCEPTIONS:
            report(f"Please use type KeyValueLabels for field {lineage} in resource {owner}")
    elif node.is_a(PropertyKind.KEY_VALUE_LABELS):
        report(f"Please don't use type KeyValueLabels for field {lineage} in resource {owner}")

    if lineage in C.ANNOTATIONS_LINEAGES:
        if (not node.is_a(PropertyKind.KEY_VALUE_ANNOTATIONS)
                and (product_name, resource_name) not in C.ANNOTATIONS_EXCEPTIONS):
            report(f"Please use type KeyValueAnnotations for field {lineage} in resource {owner}")
    elif node.is_a(PropertyKind.KEY_VALUE_ANNOTATIONS):
        report(f"Please don't use type KeyValueAnnotations for field {lineage} in resource {owner}")


def _validate_structure(node: PropertyNode, report) -> None:
    """Containers must carry the children their kind requires."""
    if node.is_a(PropertyKind.ARRAY) and node.item_type is None:
        report(f"Array property {node.lineage} is missing `item_type`")
    elif node.is_a(PropertyKind.MAP):
        if node.value_type is None:
            report(f"Map property {node.lineage} is missing `value_type`")
        elif not node.value_type.is_a(PropertyKind.NESTED_OBJECT):
            report(f"Map property {node.lineage} must have a NestedObject `value_type`")
    elif node.is_a(PropertyKind.NESTED_OBJECT) and node.properties is None:
        report(f"Properties missing on {node.lineage}")
