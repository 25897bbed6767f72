"""Tests for color values."""

import pytest
from pydantic import TypeAdapter, ValidationError

from netvis.options.color import Color, HexColor, RGBAColor, RGBColor, js_number


class TestColorRender:
    def test_hex(self):
        assert HexColor(hex="#ff0000").render() == 'color: "#ff0000",'

    def test_rgb_keeps_trailing_space(self):
        assert RGBColor(r=255, g=0, b=10).render() == 'color: "rgb(255, 0, 10) ",'

    def test_rgba(self):
        assert RGBAColor(r=1, g=2, b=3, a=0.5).render() == 'color: "rgba(1, 2, 3, 0.5)",'

    def test_hex_is_not_validated(self):
        assert HexColor(hex="not a color").render() == 'color: "not a color",'


class TestColorUnion:
    def test_discriminator_selects_variant(self):
        adapter = TypeAdapter(Color)

        color = adapter.validate_python({"kind": "rgb", "r": 0, "g": 128, "b": 255})

        assert isinstance(color, RGBColor)
        assert color.g == 128

    def test_channel_must_fit_in_a_byte(self):
        with pytest.raises(ValidationError):
            RGBColor(r=256, g=0, b=0)

    def test_alpha_range_is_not_validated(self):
        assert RGBAColor(r=0, g=0, b=0, a=2.5).a == 2.5

    def test_colors_are_frozen(self):
        color = HexColor(hex="#000000")
        with pytest.raises(ValidationError):
            color.hex = "#ffffff"


class TestJsNumber:
    def test_finite_values_keep_python_form(self):
        assert js_number(0.3) == "0.3"
        assert js_number(1.0) == "1.0"

    def test_non_finite_values(self):
        assert js_number(float("nan")) == "NaN"
        assert js_number(float("inf")) == "Infinity"
        assert js_number(float("-inf")) == "-Infinity"

    def test_rgba_alpha_uses_js_form(self):
        assert RGBAColor(r=1, g=2, b=3, a=float("inf")).render() == 'color: "rgba(1, 2, 3, Infinity)",'
