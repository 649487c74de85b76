#!/usr/bin/env python3
"""
Purpose:
    Drives the property tree passes over a product: default resolution and
    validation (`prepare`), then version filtering and prefix precomputation
    for one target version (`build`).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from resgen.core.config import load_config
from resgen.core.validation import ValidationResult
from resgen.core.version import Version
from resgen.core.schema.checks import validate_resource
from resgen.core.schema.defaulting import set_resource_defaults
from resgen.core.schema.naming import precompute_prefixes
from resgen.core.schema.resource import Product
from resgen.core.schema.versioning import exclude_resource_if_not_in_version

logger = logging.getLogger(__name__)


# --- Engine --- #

@dataclass
class PropertyTreeEngine:
    """
    Runs the passes in order. Trees are mutated in place; version filtering
    never re-includes a property, so build each version from a freshly
    loaded product.
    """
    config: Dict[str, Any] = field(default_factory=dict)

    @property
    def fail_fast(self) -> bool:
        return bool(self.config.get("fail_fast", False))

    def prepare(self, product: Product) -> ValidationResult:
        """
        Resolve defaults and validate every resource of `product`.

        Raises:
            ConfigurationError: listing every violation found (or the first
            one when `fail_fast` is set). Nothing is built in that case.
        """
        collector = ValidationResult()
        compiler = self.config.get("compiler", "")
        for resource in product.objects:
            if compiler and not resource.compiler:
                resource.compiler = compiler
            set_resource_defaults(resource)
            validate_resource(resource, collector=collector, strict=self.fail_fast)
        collector.raise_if_invalid()
        logger.info("Prepared %d resource(s) for product %s", len(product.objects), product.name)
        return collector

    def build(self, product: Product, version: Optional[str] = None) -> Version:
        """Filter `product` to `version` (default: configured target) and fix every prefix."""
        target = product.version_obj_or_closest(version or self.config.get("target_version"))
        for resource in product.objects:
            exclude_resource_if_not_in_version(resource, target)
            precompute_prefixes(resource)
        logger.info("Built product %s at version %s", product.name, target)
        return target

    def run(self, product: Product, version: Optional[str] = None) -> Version:
        self.prepare(product)
        return self.build(product, version)


# --- Factory --- #

def build_engine(config: Optional[Dict[str, Any]] = None) -> PropertyTreeEngine:
    """
    Build a `PropertyTreeEngine`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
    """
    return PropertyTreeEngine(config=config or load_config())
