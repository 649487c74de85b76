#!/usr/bin/env python3
from resgen.core.schema.property_node import PropertyNode


def test_client_side_uses_only_own_immutable_flag(make_resource):
    frozen = PropertyNode(name="a", client_side=True, immutable=True)
    loose = PropertyNode(name="b", client_side=True)
    make_resource([frozen, loose], immutable=True)
    assert frozen.is_force_new() is True
    assert loose.is_force_new() is False


def test_client_side_child_ignores_parent_chain(make_resource):
    child = PropertyNode(name="c", client_side=True)
    parent = PropertyNode(name="p", type="NestedObject", immutable=True, properties=[child])
    make_resource([parent])
    assert parent.is_force_new() is True
    assert child.is_force_new() is False


def test_immutable_property(make_resource):
    p = PropertyNode(name="a", immutable=True)
    q = PropertyNode(name="b")
    make_resource([p, q])
    assert p.is_force_new() is True
    assert q.is_force_new() is False


def test_output_is_never_force_new(make_resource):
    p = PropertyNode(name="a", immutable=True, output=True)
    make_resource([p], immutable=True)
    assert p.is_force_new() is False


def test_immutable_resource(make_resource):
    top = PropertyNode(name="a")
    with_url = PropertyNode(name="b", update_url="projects/{{project}}/widgets/{{name}}:setB")
    make_resource([top, with_url], immutable=True)
    assert top.is_force_new() is True
    assert with_url.is_force_new() is False


def test_children_inherit_from_parent_chain(make_resource):
    child = PropertyNode(name="c")
    parent = PropertyNode(name="p", type="NestedObject", properties=[child])
    make_resource([parent], immutable=True)
    assert child.is_force_new() is True


def test_children_of_updatable_parent(make_resource):
    child = PropertyNode(name="c")
    parent = PropertyNode(name="p", type="NestedObject", update_url="x:setP", properties=[child])
    make_resource([parent], immutable=True)
    assert parent.is_force_new() is False
    assert child.is_force_new() is False


def test_effective_labels_output_is_force_new(make_resource):
    p = PropertyNode(name="effective_labels", type="KeyValueEffectiveLabels", output=True)
    make_resource([p], immutable=True)
    assert p.is_force_new() is True


def test_root_labels_never_force_new(make_resource):
    p = PropertyNode(name="labels", type="KeyValueLabels", immutable=True)
    make_resource([p], immutable=True)
    assert p.is_force_new() is False


def test_terraform_labels_on_non_updatable_resource(make_resource):
    p = PropertyNode(name="terraform_labels", type="KeyValueTerraformLabels", output=True)
    make_resource([p], immutable=True)
    assert p.is_force_new() is True


def test_terraform_labels_on_updatable_resource(make_resource):
    p = PropertyNode(name="terraform_labels", type="KeyValueTerraformLabels", output=True)
    make_resource([p])
    assert p.is_force_new() is False


def test_labels_under_flattened_parent_not_force_new(make_resource):
    labels = PropertyNode(name="labels", type="KeyValueLabels")
    metadata = PropertyNode(name="metadata", type="NestedObject", flatten_object=True, properties=[labels])
    make_resource([metadata], immutable=True)
    assert metadata.is_force_new() is True
    assert labels.is_force_new() is False
