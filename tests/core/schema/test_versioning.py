#!/usr/bin/env python3
import pytest

from resgen.core.errors import ConfigurationError
from resgen.core.version import Version
from resgen.core.schema.property_node import PropertyNode
from resgen.core.schema.versioning import (
    exclude_if_not_in_version,
    exclude_resource_if_not_in_version,
)


def _v(name):
    return Version(name=name)


# --- Minimum version --- #

@pytest.mark.parametrize("target,excluded", [
    ("ga", True),
    ("beta", False),
    ("alpha", False),
])
def test_min_version(make_resource, target, excluded):
    node = PropertyNode(name="betaField", min_version="beta")
    make_resource([node])
    exclude_if_not_in_version(node, _v(target))
    assert node.exclude is excluded


@pytest.mark.parametrize("target,excluded", [
    ("ga", True),
    ("beta", False),
    ("alpha", True),
])
def test_exact_version(make_resource, target, excluded):
    node = PropertyNode(name="betaOnly", exact_version="beta")
    make_resource([node])
    exclude_if_not_in_version(node, _v(target))
    assert node.exclude is excluded


def test_min_version_inherited_from_resource(make_resource):
    node = PropertyNode(name="plain")
    make_resource([node], min_version="beta")
    exclude_if_not_in_version(node, _v("ga"))
    assert node.exclude is True


def test_exact_version_checked_before_resource_minimum(make_resource):
    # exact match passes, then the resource minimum still applies
    node = PropertyNode(name="gaOnly", exact_version="ga")
    make_resource([node], min_version="beta")
    exclude_if_not_in_version(node, _v("ga"))
    assert node.exclude is True


def test_never_reincludes(make_resource):
    node = PropertyNode(name="betaField", min_version="beta")
    make_resource([node])
    exclude_if_not_in_version(node, _v("ga"))
    exclude_if_not_in_version(node, _v("beta"))
    assert node.exclude is True


def test_explicitly_excluded_stays_excluded(make_resource):
    node = PropertyNode(name="gone", exclude=True)
    make_resource([node])
    exclude_if_not_in_version(node, _v("alpha"))
    assert node.exclude is True


# --- Recursion --- #

def test_children_filtered_even_when_parent_excluded(make_resource):
    child = PropertyNode(name="child", exact_version="ga")
    parent = PropertyNode(name="parent", type="NestedObject", min_version="alpha", properties=[child])
    make_resource([parent])
    exclude_if_not_in_version(parent, _v("beta"))
    assert parent.exclude is True
    assert child.exclude is True


def test_array_of_nested_objects_recurses(make_resource):
    leaf = PropertyNode(name="leaf", min_version="beta")
    arr = PropertyNode(name="arr", type="Array", item_type={"type": "NestedObject", "properties": [leaf]})
    make_resource([arr])
    exclude_if_not_in_version(arr, _v("ga"))
    assert arr.exclude is False
    assert arr.item_type.exclude is False
    assert leaf.exclude is True


def test_map_value_recurses(make_resource):
    leaf = PropertyNode(name="leaf", min_version="alpha")
    m = PropertyNode(name="m", type="Map", key_name="k", value_type={"type": "NestedObject", "properties": [leaf]})
    make_resource([m])
    exclude_if_not_in_version(m, _v("beta"))
    assert m.exclude is False
    assert leaf.exclude is True


def test_resource_level_filter_counts_exclusions(make_resource):
    resource = make_resource([
        PropertyNode(name="a"),
        PropertyNode(name="b", min_version="beta"),
        PropertyNode(name="c", type="NestedObject", properties=[PropertyNode(name="d", min_version="alpha")]),
    ], parameters=[PropertyNode(name="zone", min_version="beta")])
    assert exclude_resource_if_not_in_version(resource, _v("ga")) == 3
    assert [p.name for p in resource.user_properties()] == ["a", "c"]


def test_unknown_min_version_is_fatal(make_resource):
    node = PropertyNode(name="secret", min_version="private")
    make_resource([node])
    with pytest.raises(ConfigurationError, match="'private' does not exist for product"):
        exclude_if_not_in_version(node, _v("ga"))
