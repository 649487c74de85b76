#!/usr/bin/env python3
"""
Purpose:
    Pydantic models for the collaborators of a property tree: the Product
    (version catalogue, resource list) and the Resource that owns a tree of
    PropertyNode values.
"""
from __future__ import annotations

import weakref
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from resgen.core.constants import DEFAULT_UPDATE_VERB, VERSION_ORDER
from resgen.core.errors import ConfigurationError
from resgen.core.version import Version
from resgen.core.schema.property_kind import PropertyKind
from resgen.core.schema.property_node import PropertyNode


class NestedQuery(BaseModel):
    """Location of a resource inside a parent object's response."""
    model_config = ConfigDict(extra="forbid")

    keys: List[str] = Field(default_factory=list)
    is_list_of_ids: bool = False
    modify_by_patch: bool = False


class Resource(BaseModel):
    """
    An API resource and its property tree.

    The resource owns every PropertyNode reachable from `parameters` and
    `properties`; nodes only hold weak links back to it.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")
    _product: Optional[weakref.ReferenceType] = PrivateAttr(default=None)

    name: str = Field(..., description="Resource name, e.g. 'Disk'.")
    description: str = ""
    base_url: str = ""
    self_link: str = ""
    id_format: str = ""
    update_verb: str = DEFAULT_UPDATE_VERB
    update_url: str = ""
    immutable: bool = False
    exclude: bool = False
    min_version: str = ""
    nested_query: Optional[NestedQuery] = None
    compiler: str = Field(default="", description="Compiler target the resource is generated for.")

    parameters: List[PropertyNode] = Field(default_factory=list)
    properties: List[PropertyNode] = Field(default_factory=list)

    # --- Links --- #

    @property
    def product_metadata(self) -> Product:
        product = self._product() if self._product is not None else None
        if product is None:
            raise ConfigurationError(f"Resource {self.name!r} does not belong to a product")
        return product

    def link_product(self, product: Product) -> None:
        self._product = weakref.ref(product)

    # --- Queries --- #

    def resource_name(self) -> str:
        return self.name

    def all_properties(self) -> List[PropertyNode]:
        """Parameters and properties, including excluded ones."""
        return [*self.parameters, *self.properties]

    def user_properties(self) -> List[PropertyNode]:
        return [p for p in self.properties if not p.exclude]

    def all_user_properties(self) -> List[PropertyNode]:
        return [p for p in self.all_properties() if not p.exclude]

    def root_labels(self) -> bool:
        """True if the resource has a top-level KeyValueLabels property."""
        return any(p.is_a(PropertyKind.KEY_VALUE_LABELS) for p in self.all_user_properties())

    def updatable(self) -> bool:
        if not self.immutable:
            return True
        return any(p.update_url != "" for p in self.all_properties())

    def min_version_obj(self) -> Version:
        if self.min_version:
            return self.product_metadata.version_obj(self.min_version)
        return self.product_metadata.lowest_version()

    def self_link_uri(self) -> str:
        if self.self_link:
            return self.self_link
        return f"{self.base_url}/{{{{name}}}}"

    def get_id_format(self) -> str:
        return self.id_format or self.self_link_uri()


class Product(BaseModel):
    """
    A versioned API product: the catalogue that version names resolve against,
    and the resources generated for it.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Product name, e.g. 'Compute'.")
    display_name: str = ""
    api_name: str = Field(default="", description="API service name; defaults to the lowercased name.")
    versions: List[Version] = Field(default_factory=list)
    objects: List[Resource] = Field(default_factory=list)

    def model_post_init(self, __context: Any) -> None:
        if not self.api_name:
            self.api_name = self.name.lower()
        for resource in self.objects:
            resource.link_product(self)

    def add_resource(self, resource: Resource) -> Resource:
        self.objects.append(resource)
        resource.link_product(self)
        return resource

    # --- Versions --- #

    def exists_at_version(self, name: str) -> bool:
        return any(v.name == name for v in self.versions)

    def version_obj(self, name: str) -> Version:
        for v in self.versions:
            if v.name == name:
                return v
        raise ConfigurationError(f"API version {name!r} does not exist for product {self.name!r}")

    def version_obj_or_closest(self, name: Optional[str]) -> Version:
        """Return `name`, or the nearest more stable version the product has."""
        name = (name or "ga").strip().lower()
        if self.exists_at_version(name):
            return self.version_obj(name)
        if name not in VERSION_ORDER:
            raise ConfigurationError(f"Unknown version {name!r} for product {self.name!r}")
        for candidate in reversed(VERSION_ORDER[:VERSION_ORDER.index(name)]):
            if self.exists_at_version(candidate):
                return self.version_obj(candidate)
        raise ConfigurationError(f"Could not find object for version {name!r} and product {self.name!r}")

    def lowest_version(self) -> Version:
        if not self.versions:
            raise ConfigurationError(f"Product {self.name!r} declares no versions")
        return min(self.versions, key=lambda v: v.rank)

    # --- Resources --- #

    def find_resource(self, name: str) -> Optional[Resource]:
        return next((r for r in self.objects if r.name == name), None)

    def require_resource(self, name: str) -> Resource:
        resource = self.find_resource(name)
        if resource is None:
            raise ConfigurationError(f"Resource {name!r} referenced but not found in product {self.name!r}")
        return resource
