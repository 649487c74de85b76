#!/usr/bin/env python3
from pathlib import Path
import pytest
from jinja2 import UndefinedError

from resgen.core.errors import ConfigurationError
from resgen.core.templates import TemplateExecutor
from resgen.core.schema.property_node import PropertyNode


@pytest.fixture
def executor(tmp_path: Path) -> TemplateExecutor:
    (tmp_path / "custom_expand").mkdir()
    (tmp_path / "custom_expand" / "name.go.tmpl").write_text(
        "func expand{{ prefix }}{{ property.titlelize_property() }}(v interface{}) {}\n",
        encoding="utf-8",
    )
    (tmp_path / "snake.tmpl").write_text("{{ property.name | underscore }}", encoding="utf-8")
    (tmp_path / "broken.tmpl").write_text("{{ nothing.here }}", encoding="utf-8")
    return TemplateExecutor([tmp_path])


def test_custom_template_renders_property_and_prefix(make_resource, executor):
    p = PropertyNode(name="fooBar", custom_expand="custom_expand/name.go.tmpl")
    make_resource([p])
    out = p.custom_template(executor, p.custom_expand)
    assert out == "func expandWidgetFooBar(v interface{}) {}"


def test_append_newline_keeps_trailing_newline(make_resource, executor):
    p = PropertyNode(name="fooBar")
    make_resource([p])
    assert executor.execute(p, "custom_expand/name.go.tmpl", append_newline=True).endswith("{}\n")


def test_empty_template_path_renders_nothing(make_resource, executor):
    p = PropertyNode(name="fooBar")
    make_resource([p])
    assert p.custom_template(executor, "") == ""


def test_naming_filters(make_resource, executor):
    p = PropertyNode(name="fooBar")
    make_resource([p])
    assert executor.execute(p, "snake.tmpl") == "foo_bar"


def test_undefined_names_fail(make_resource, executor):
    p = PropertyNode(name="fooBar")
    make_resource([p])
    with pytest.raises(UndefinedError):
        executor.execute(p, "broken.tmpl")


def test_detached_property_cannot_render(executor):
    p = PropertyNode(name="fooBar")
    with pytest.raises(ConfigurationError, match="not attached to a resource"):
        executor.execute(p, "custom_expand/name.go.tmpl")
