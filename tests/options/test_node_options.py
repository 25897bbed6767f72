"""Tests for node style options."""

import pytest
from pydantic import TypeAdapter, ValidationError

from netvis.options.node_options import NodeColor, NodeOption, Shape, Title


class TestNodeOptionRender:
    def test_shape(self):
        assert Shape(shape="hexagon").render() == 'shape: "hexagon",'

    def test_color(self):
        assert NodeColor(color="#ff0000").render() == 'color: "#ff0000",'

    def test_title(self):
        assert Title(title="not slime boy").render() == 'title: "not slime boy",'

    def test_quotes_are_not_escaped(self):
        assert Title(title='say "hi"').render() == 'title: "say "hi"",'


class TestNodeOptionUnion:
    def test_validate_from_mapping(self):
        adapter = TypeAdapter(list[NodeOption])

        options = adapter.validate_python(
            [{"kind": "shape", "shape": "box"}, {"kind": "title", "title": "tip"}]
        )

        assert options == [Shape(shape="box"), Title(title="tip")]

    def test_unknown_kind(self):
        adapter = TypeAdapter(NodeOption)

        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "size", "size": 3})
