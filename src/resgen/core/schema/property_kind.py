#!/usr/bin/env python3
"""
Purpose:
    Defines the PropertyKind enumeration for resource property trees, along
    with helpers for parsing, introspection, and the schema representation
    tag emitted for each kind.
"""

from __future__ import annotations

from enum import Enum


class PropertyKind(str, Enum):
    """
    Supported property kinds.

    - String/Integer/Double/Boolean/Time/Enum/Fingerprint : primitives
    - Array        : homogeneous list with one `item_type`
    - Map          : string keys mapped to a NestedObject `value_type`
    - NestedObject : object with named child `properties`
    - ResourceRef  : reference to another resource of the product
    - KeyValue*    : string -> string pairs (labels/annotations variants)
    - invalid      : unrecognized/unsupported kind (returned by `parse`)
    """

    STRING = "String"
    INTEGER = "Integer"
    DOUBLE = "Double"
    BOOLEAN = "Boolean"
    TIME = "Time"
    ENUM = "Enum"
    FINGERPRINT = "Fingerprint"
    ARRAY = "Array"
    MAP = "Map"
    NESTED_OBJECT = "NestedObject"
    RESOURCE_REF = "ResourceRef"
    KEY_VALUE_PAIRS = "KeyValuePairs"
    KEY_VALUE_LABELS = "KeyValueLabels"
    KEY_VALUE_ANNOTATIONS = "KeyValueAnnotations"
    KEY_VALUE_TERRAFORM_LABELS = "KeyValueTerraformLabels"
    KEY_VALUE_EFFECTIVE_LABELS = "KeyValueEffectiveLabels"
    INVALID = "invalid"

    # --- Parsing helpers --- #

    @classmethod
    def parse(cls, value: str | PropertyKind | None) -> PropertyKind:
        """
        Coerce arbitrary input to a `PropertyKind`.

        - `PropertyKind` instance → returned as-is
        - `None` or unknown strings → `PropertyKind.INVALID`
        - strings are trimmed; a leading "Api::Type::" namespace is dropped

        Examples
        --------
        >>> PropertyKind.parse(" NestedObject ")
        <PropertyKind.NESTED_OBJECT: 'NestedObject'>
        >>> PropertyKind.parse("Api::Type::String")
        <PropertyKind.STRING: 'String'>
        >>> PropertyKind.parse("foo")
        <PropertyKind.INVALID: 'invalid'>
        """
        if isinstance(value, PropertyKind):
            return value
        if value is None:
            return cls.INVALID
        text = str(value).strip()
        text = text.rsplit("::", 1)[-1]
        try:
            return cls(text)
        except ValueError:
            return cls.INVALID

    @classmethod
    def try_parse(cls, value: str | PropertyKind | None) -> PropertyKind | None:
        """
        Like `parse`, but returns `None` for unknowns instead of `PropertyKind.INVALID`.
        """
        kind = cls.parse(value)
        return None if kind is cls.INVALID else kind

    # --- Introspection helpers --- #

    def is_primitive(self) -> bool:
        """True for scalar kinds (string, numeric, boolean, time, enum, fingerprint)."""
        return self in _PRIMITIVES

    def is_container(self) -> bool:
        """True if the kind holds child properties (array, map, nested object)."""
        return self in {PropertyKind.ARRAY, PropertyKind.MAP, PropertyKind.NESTED_OBJECT}

    def is_key_value(self) -> bool:
        """True for the KeyValuePairs family."""
        return self in _KEY_VALUES

    @property
    def schema_type(self) -> str:
        """Schema representation tag used by generated provider code."""
        return _SCHEMA_TYPES.get(self, "schema.TypeString")


_PRIMITIVES = frozenset({
    PropertyKind.STRING,
    PropertyKind.INTEGER,
    PropertyKind.DOUBLE,
    PropertyKind.BOOLEAN,
    PropertyKind.TIME,
    PropertyKind.ENUM,
    PropertyKind.FINGERPRINT,
})

_KEY_VALUES = frozenset({
    PropertyKind.KEY_VALUE_PAIRS,
    PropertyKind.KEY_VALUE_LABELS,
    PropertyKind.KEY_VALUE_ANNOTATIONS,
    PropertyKind.KEY_VALUE_TERRAFORM_LABELS,
    PropertyKind.KEY_VALUE_EFFECTIVE_LABELS,
})

_SCHEMA_TYPES = {
    PropertyKind.BOOLEAN: "schema.TypeBool",
    PropertyKind.DOUBLE: "schema.TypeFloat",
    PropertyKind.INTEGER: "schema.TypeInt",
    PropertyKind.STRING: "schema.TypeString",
    PropertyKind.TIME: "schema.TypeString",
    PropertyKind.ENUM: "schema.TypeString",
    PropertyKind.RESOURCE_REF: "schema.TypeString",
    PropertyKind.FINGERPRINT: "schema.TypeString",
    PropertyKind.NESTED_OBJECT: "schema.TypeList",
    PropertyKind.ARRAY: "schema.TypeList",
    PropertyKind.KEY_VALUE_PAIRS: "schema.TypeMap",
    PropertyKind.KEY_VALUE_LABELS: "schema.TypeMap",
    PropertyKind.KEY_VALUE_ANNOTATIONS: "schema.TypeMap",
    PropertyKind.KEY_VALUE_TERRAFORM_LABELS: "schema.TypeMap",
    PropertyKind.KEY_VALUE_EFFECTIVE_LABELS: "schema.TypeMap",
    PropertyKind.MAP: "schema.TypeSet",
}
