#!/usr/bin/env python3
from typing import Iterable, List

import pytest

from resgen.core.schema.defaulting import set_resource_defaults
from resgen.core.schema.property_node import PropertyNode
from resgen.core.schema.resource import Product, Resource


@pytest.fixture
def make_resource():
    """
    Factory: wrap properties in a Resource owned by a Product and (by default)
    resolve defaults. Products are kept alive for the duration of the test
    because properties only hold weak links to their owners.
    """
    products: List[Product] = []

    def _make(
        properties: Iterable[PropertyNode],
        *,
        name: str = "Widget",
        product_name: str = "Compute",
        versions: Iterable[str] = ("ga", "beta", "alpha"),
        resolve: bool = True,
        **resource_kwargs,
    ) -> Resource:
        resource = Resource(name=name, properties=list(properties), **resource_kwargs)
        product = Product(
            name=product_name,
            versions=[{"name": v} for v in versions],
            objects=[resource],
        )
        products.append(product)
        if resolve:
            set_resource_defaults(resource)
        return resource

    return _make
