#!/usr/bin/env python3
from resgen.core.schema.paths import resolve_schema_path, resolve_schema_path_list
from resgen.core.schema.property_node import PropertyNode


def _resource(make_resource):
    return make_resource([
        PropertyNode(name="fooBar"),
        PropertyNode(name="nested", type="NestedObject", flatten_object=True, properties=[
            PropertyNode(name="inner"),
        ]),
        PropertyNode(name="parentField", type="NestedObject", properties=[
            PropertyNode(name="childName"),
        ]),
        PropertyNode(name="rules", type="Array", item_type={"type": "NestedObject", "properties": [
            PropertyNode(name="action"),
        ]}),
        PropertyNode(name="legacy_name"),
        PropertyNode(name="hidden", exclude=True),
    ])


def test_flattened_segment_is_dropped(make_resource):
    resource = _resource(make_resource)
    assert resolve_schema_path(resource.user_properties(), "nested.0.inner") == "inner"


def test_missing_segment_is_soft_miss(make_resource):
    resource = _resource(make_resource)
    assert resolve_schema_path(resource.user_properties(), "does_not_exist") == ""
    assert resolve_schema_path(resource.user_properties(), "parent_field.0.nope") == ""


def test_plain_paths(make_resource):
    props = _resource(make_resource).user_properties()
    assert resolve_schema_path(props, "foo_bar") == "foo_bar"
    assert resolve_schema_path(props, "parent_field.0.child_name") == "parent_field.0.child_name"
    assert resolve_schema_path(props, "rules.0.action") == "rules.0.action"


def test_top_level_rename_fallback(make_resource):
    props = _resource(make_resource).user_properties()
    assert resolve_schema_path(props, "legacy_name") == "legacy_name"


def test_excluded_properties_do_not_resolve(make_resource):
    props = _resource(make_resource).user_properties()
    assert resolve_schema_path(props, "hidden") == ""


def test_fully_flattened_path_is_not_representable(make_resource):
    props = _resource(make_resource).user_properties()
    assert resolve_schema_path(props, "nested") == ""
    assert resolve_schema_path(props, "") == ""


def test_path_list_drops_misses(make_resource):
    props = _resource(make_resource).user_properties()
    assert resolve_schema_path_list(props, ["foo_bar", "gone", "nested.0.inner"]) == ["foo_bar", "inner"]


def test_node_accessors_resolve_against_owning_resource(make_resource):
    resource = _resource(make_resource)
    node = resource.properties[0]
    assert node.get_property_schema_path("nested.0.inner") == "inner"
    assert node.get_property_schema_path_list(["parent_field.0.child_name", "x"]) == ["parent_field.0.child_name"]
