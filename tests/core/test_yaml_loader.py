#!/usr/bin/env python3
from pathlib import Path
import pytest

from resgen.core.schema.property_kind import PropertyKind
from resgen.core.yaml_loader import load_product, load_yaml_with_includes


PRODUCT_YAML = """\
name: Compute
versions:
  - name: ga
    base_url: https://compute.googleapis.com/compute/v1/
  - name: beta
    base_url: https://compute.googleapis.com/compute/beta/
objects:
  - !include widget.yaml
  - !includeglob extra/*.yaml
"""

WIDGET_YAML = """\
name: Widget
base_url: "projects/{{project}}/widgets"
immutable: true
properties:
  - name: fooBar
    type: String
    required: true
  - name: tags
    type: Array
    item_type: String
  - name: labels
    type: KeyValueLabels
"""

GADGET_YAML = """\
name: Gadget
min_version: beta
properties:
  - name: spec
    type: NestedObject
    properties:
      - name: size
        type: Integer
"""


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def product_file(tmp_path: Path) -> Path:
    _write(tmp_path / "widget.yaml", WIDGET_YAML)
    _write(tmp_path / "extra" / "gadget.yaml", GADGET_YAML)
    return _write(tmp_path / "product.yaml", PRODUCT_YAML)


def test_load_product_with_includes(product_file: Path):
    product = load_product(product_file)
    assert product.name == "Compute"
    assert [v.name for v in product.versions] == ["ga", "beta"]
    assert [r.name for r in product.objects] == ["Widget", "Gadget"]

    widget = product.find_resource("Widget")
    assert widget.product_metadata is product
    assert widget.immutable is True
    assert widget.base_url == "projects/{{project}}/widgets"
    tags = widget.properties[1]
    assert tags.is_a(PropertyKind.ARRAY)
    assert tags.item_type.kind is PropertyKind.STRING

    gadget = product.find_resource("Gadget")
    assert gadget.min_version == "beta"
    assert gadget.properties[0].properties[0].kind is PropertyKind.INTEGER


def test_include_outside_roots_rejected(tmp_path: Path):
    _write(tmp_path / "outside.yaml", "name: Outside\n")
    product = _write(tmp_path / "inner" / "product.yaml", "name: X\nobjects:\n  - !include ../outside.yaml\n")
    with pytest.raises(ValueError, match="outside allowed roots"):
        load_yaml_with_includes(product)


def test_extra_roots_allow_includes(tmp_path: Path):
    _write(tmp_path / "shared" / "thing.yaml", "name: Thing\n")
    product = _write(tmp_path / "inner" / "product.yaml", "name: X\nobjects:\n  - !include ../shared/thing.yaml\n")
    loaded = load_product(product, allowed_roots=[tmp_path / "shared"])
    assert [r.name for r in loaded.objects] == ["Thing"]


def test_empty_file_loads_as_empty_dict(tmp_path: Path):
    assert load_yaml_with_includes(_write(tmp_path / "empty.yaml", "")) == {}
