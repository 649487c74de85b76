#!/usr/bin/env python3
"""
Purpose:
    Implements the PropertyNode model: one field in a resource's property
    tree. Holds the declared attributes, the weak parent/resource links
    wired during default resolution, and the accessors consumed by code
    generation templates (kind predicates, lineage, prefix, schema paths,
    force-new, literals).
"""
from __future__ import annotations

import weakref
from typing import Any, List, Optional, TYPE_CHECKING

from pydantic import (
    BaseModel,
    Field,
    ConfigDict,
    PrivateAttr,
    field_validator,
)

from resgen.core.errors import ConfigurationError
from resgen.core.utils import camelize
from resgen.core.version import Version
from resgen.core.schema.property_kind import PropertyKind
from resgen.core.schema import naming, paths

if TYPE_CHECKING:
    from resgen.core.schema.resource import Resource
    from resgen.core.templates import TemplateExecutor


class PropertyNode(BaseModel):
    """
    One property of an API resource.

    Kind-specific attributes:
      - NestedObject: properties (list[PropertyNode])
      - Array:        item_type (PropertyNode)
      - Map:          value_type (NestedObject PropertyNode), key_name, key_expander
      - ResourceRef:  resource, imports
      - Enum:         enum_values

    The YAML key `type` populates `kind`; `new_type` is a provider-level
    override of it and wins whenever kind membership is tested.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid", populate_by_name=True)

    _parent: Optional[weakref.ReferenceType] = PrivateAttr(default=None)
    _resource: Optional[weakref.ReferenceType] = PrivateAttr(default=None)
    _resolved_kind: Optional[PropertyKind] = PrivateAttr(default=None)
    _prefix: Optional[str] = PrivateAttr(default=None)

    # Identity
    name: str = Field(default="", description="Schema-facing identifier.")
    api_name: str = Field(default="", description="Wire identifier; defaults to `name`.")
    kind: PropertyKind = Field(default=PropertyKind.STRING, alias="type", description="Property kind.")
    new_type: Optional[PropertyKind] = Field(default=None, description="Provider-level kind override.")
    description: str = ""
    default_value: Any = None

    # Lifecycle
    exclude: bool = False
    deprecation_message: str = ""
    removed_message: str = ""
    min_version: str = ""
    exact_version: str = ""

    # Behaviour
    output: bool = False
    immutable: bool = False
    required: bool = False
    client_side: bool = False
    url_param_only: bool = False
    send_empty_value: bool = False
    allow_empty_object: bool = False
    ignore_read: bool = False
    ignore_write: bool = False
    flatten_object: bool = False
    unordered_list: bool = False
    is_set: bool = False
    default_from_api: bool = False
    schema_config_mode_attr: bool = False
    sensitive: bool = False

    # Requests
    read_query_params: str = ""
    update_verb: str = ""
    update_url: str = ""
    update_id: str = ""
    fingerprint_name: str = ""
    update_mask_fields: List[str] = Field(default_factory=list)

    # Cross-field constraints (configuration paths)
    conflicts: List[str] = Field(default_factory=list)
    at_least_one_of: List[str] = Field(default_factory=list)
    exactly_one_of: List[str] = Field(default_factory=list)
    required_with: List[str] = Field(default_factory=list)

    # NestedObject / Enum
    properties: Optional[List[PropertyNode]] = None
    enum_values: List[str] = Field(default_factory=list)
    exclude_docs_values: bool = False

    # Array
    item_type: Optional[PropertyNode] = None
    min_size: Optional[int] = None
    max_size: Optional[int] = None
    parent_name: str = ""

    # ResourceRef
    resource: str = ""
    imports: str = ""

    # Map
    value_type: Optional[PropertyNode] = None
    key_name: str = ""
    key_description: str = ""
    key_expander: str = ""
    key_diff_suppress_func: str = ""

    # Generated-code hooks
    diff_suppress_func: str = ""
    state_func: str = ""
    set_hash_func: str = ""
    custom_expand: str = ""
    custom_flatten: str = ""

    # --- Validators --- #

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, v: Any) -> PropertyKind:
        kind = PropertyKind.parse(v)
        if kind is PropertyKind.INVALID:
            valid = ", ".join(k.value for k in PropertyKind if k is not PropertyKind.INVALID)
            raise ValueError(f"Unknown property type {v!r}; valid types are: {valid}")
        return kind

    @field_validator("new_type", mode="before")
    @classmethod
    def _parse_new_type(cls, v: Any) -> Optional[PropertyKind]:
        if v is None or v == "":
            return None
        kind = PropertyKind.try_parse(v)
        if kind is None:
            raise ValueError(f"Unknown property type override {v!r}")
        return kind

    @field_validator("enum_values", mode="before")
    @classmethod
    def _stringify_enum_values(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [str(item) for item in v]
        return v

    @field_validator("item_type", "value_type", mode="before")
    @classmethod
    def _expand_type_shorthand(cls, v: Any) -> Any:
        """Accept `item_type: String` as shorthand for `item_type: {type: String}`."""
        if isinstance(v, (str, PropertyKind)):
            return {"type": v}
        return v

    # --- Links --- #

    @property
    def parent(self) -> Optional[PropertyNode]:
        """Enclosing property, or None for top-level properties."""
        return self._parent() if self._parent is not None else None

    @property
    def resource_metadata(self) -> Optional[Resource]:
        """Resource owning this property tree (set during default resolution)."""
        return self._resource() if self._resource is not None else None

    def link_parent(self, parent: Optional[PropertyNode]) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    def link_resource(self, resource: Resource) -> None:
        self._resource = weakref.ref(resource)

    def walk(self):
        """Yield this property and every descendant, parent before children."""
        yield self
        for child in self._children():
            yield from child.walk()

    def _children(self) -> List[PropertyNode]:
        if self.is_a(PropertyKind.ARRAY):
            return [self.item_type] if self.item_type is not None else []
        if self.is_a(PropertyKind.MAP):
            return [self.value_type] if self.value_type is not None else []
        if self.is_a(PropertyKind.NESTED_OBJECT):
            return list(self.properties or [])
        return []

    # --- Kind --- #

    @property
    def resolved_kind(self) -> PropertyKind:
        if self._resolved_kind is not None:
            return self._resolved_kind
        return self.new_type or self.kind

    def resolve_kind(self) -> PropertyKind:
        """Fix the effective kind (override wins); called once by default resolution."""
        self._resolved_kind = self.new_type or self.kind
        return self._resolved_kind

    def is_a(self, kind: PropertyKind | str) -> bool:
        if not kind:
            raise ConfigurationError("class cannot be empty")
        return self.resolved_kind is PropertyKind.parse(kind)

    def tf_type(self, kind: PropertyKind | str | None = None) -> str:
        """
        Schema representation tag for `kind`, or for this property's own kind
        when omitted. Unknown or empty kinds map to the string type, so
        `tf_type(item_type_class())` works for non-array properties too.
        """
        if kind is None:
            return self.resolved_kind.schema_type
        return PropertyKind.parse(kind).schema_type

    def item_type_class(self) -> str:
        """Kind name of the elements of an Array, or "" for other kinds."""
        if not self.is_a(PropertyKind.ARRAY) or self.item_type is None:
            return ""
        return self.item_type.kind.value

    # --- Naming --- #

    @property
    def lineage(self) -> str:
        return naming.lineage(self)

    @property
    def lineage_as_snake_case(self) -> str:
        return naming.lineage_as_snake_case(self)

    @property
    def config_lineage(self) -> str:
        return naming.config_lineage(self)

    @property
    def prefix(self) -> str:
        return self.get_prefix()

    def get_prefix(self) -> str:
        """Code-generation prefix, computed on first access and then fixed."""
        if self._prefix is None:
            self._prefix = naming.compute_prefix(self)
        return self._prefix

    def titlelize_property(self) -> str:
        return camelize(self.name, "upper")

    def property_ns_prefix(self) -> List[str]:
        return naming.property_ns_prefix(self)

    def namespace_property(self) -> str:
        return naming.namespace_property(self)

    # --- Descriptions & enums --- #

    def get_description(self) -> str:
        return self.description.rstrip("\n").strip()

    def removed(self) -> bool:
        return self.removed_message != ""

    def deprecated(self) -> bool:
        return self.deprecation_message != ""

    def enum_values_to_string(self, quote_separator: str, add_empty: bool) -> str:
        """
        Join enum values as literals, e.g. `"A", "B"`.

        With `add_empty`, optional properties also accept the empty string.
        """
        values = [f"{quote_separator}{v}{quote_separator}" for v in self.enum_values]
        if add_empty and '""' not in values and not self.required:
            values.append('""')
        return ", ".join(values)

    # --- Constraint lists --- #

    def conflicting(self) -> List[str]:
        return list(self.conflicts) if self.resource_metadata is not None else []

    def at_least_one_of_list(self) -> List[str]:
        return list(self.at_least_one_of) if self.resource_metadata is not None else []

    def exactly_one_of_list(self) -> List[str]:
        return list(self.exactly_one_of) if self.resource_metadata is not None else []

    def required_with_list(self) -> List[str]:
        return list(self.required_with) if self.resource_metadata is not None else []

    def get_property_schema_path(self, schema_path: str) -> str:
        """
        Map a configuration path (e.g. 'parent_field.0.child_name') to its
        current schema path, dropping flattened segments. "" if it no longer
        resolves.
        """
        return paths.resolve_schema_path(self.require_resource().user_properties(), schema_path)

    def get_property_schema_path_list(self, property_list: List[str]) -> List[str]:
        return paths.resolve_schema_path_list(self.require_resource().user_properties(), property_list)

    # --- Versions --- #

    def min_version_obj(self) -> Version:
        resource = self.require_resource()
        if self.min_version:
            return resource.product_metadata.version_obj(self.min_version)
        return resource.min_version_obj()

    def exact_version_obj(self) -> Optional[Version]:
        if not self.exact_version:
            return None
        return self.require_resource().product_metadata.version_obj(self.exact_version)

    # --- Children --- #

    def all_properties(self) -> Optional[List[PropertyNode]]:
        """Child properties including excluded ones."""
        return self.properties

    def user_properties(self) -> Optional[List[PropertyNode]]:
        """Non-excluded child properties of a NestedObject; None for other kinds."""
        if not self.is_a(PropertyKind.NESTED_OBJECT):
            return None
        if self.properties is None:
            raise ConfigurationError(f"Field '{self.lineage}' properties are nil!")
        return [p for p in self.properties if not p.exclude]

    def nested_properties(self) -> List[PropertyNode]:
        """Properties reachable one level down, looking through arrays and maps."""
        if self.is_a(PropertyKind.ARRAY):
            item = self.item_type
            if item is None or not item.is_a(PropertyKind.NESTED_OBJECT) or self.exclude:
                return []
            return item.nested_properties()
        if self.is_a(PropertyKind.NESTED_OBJECT):
            return self.user_properties() or []
        if self.is_a(PropertyKind.MAP):
            if self.value_type is None or self.exclude:
                return []
            return self.value_type.nested_properties()
        return []

    def root_properties(self) -> List[PropertyNode]:
        """User properties with flattened nested objects collapsed into their parent."""
        props: List[PropertyNode] = []
        for p in self.user_properties() or []:
            if p.flatten_object:
                props.extend(p.root_properties())
            else:
                props.append(p)
        return props

    # --- Resource references --- #

    def resource_ref(self) -> Optional[Resource]:
        if not self.is_a(PropertyKind.RESOURCE_REF):
            return None
        product = self.require_resource().product_metadata
        return product.require_resource(self.resource)

    def resource_type(self) -> str:
        ref = self.resource_ref()
        if ref is None:
            return ""
        return ref.base_url.split("/")[-1]

    def get_id_format(self) -> str:
        return self.require_resource().get_id_format()

    # --- Code generation --- #

    def is_force_new(self) -> bool:
        """True if changing this property requires recreating the resource."""
        resource = self.require_resource()
        if self.is_a(PropertyKind.KEY_VALUE_LABELS) and resource.root_labels():
            return False

        if (self.is_a(PropertyKind.KEY_VALUE_TERRAFORM_LABELS)
                and not resource.updatable() and not resource.root_labels()):
            return True

        # Client-side fields don't inherit immutability
        if self.client_side:
            return self.immutable

        parent = self.parent
        return (not self.output or self.is_a(PropertyKind.KEY_VALUE_EFFECTIVE_LABELS)) and (
            self.immutable
            or (
                resource.immutable
                and self.update_url == ""
                and (
                    parent is None
                    or (
                        parent.is_force_new()
                        and not (parent.flatten_object and self.is_a(PropertyKind.KEY_VALUE_LABELS))
                    )
                )
            )
        )

    def literal(self, value: Any) -> str:
        """Render `value` as a literal in generated code."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return f"{value:.1f}"
        if isinstance(value, str):
            return value if value.startswith('"') else f'"{value}"'
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return "[]string{" + ",".join(f'"{v}"' for v in value) + "}"
        raise ConfigurationError(f"unknown literal type {value!r} for property {self.lineage}")

    def custom_template(self, executor: TemplateExecutor, template_path: str, append_newline: bool = False) -> str:
        return executor.execute(self, template_path, append_newline)

    # --- Helpers --- #

    def require_resource(self) -> Resource:
        resource = self.resource_metadata
        if resource is None:
            raise ConfigurationError(
                f"Property {self.name!r} is not attached to a resource; resolve defaults first"
            )
        return resource


# --- Forward-Ref Resolution --- #
PropertyNode.model_rebuild()
