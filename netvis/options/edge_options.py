"""Style options for edges.

Every option renders into the edge's ``color`` object, which is where
vis-network reads ``color``, ``highlight``, ``inherit`` and ``opacity``.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .color import Channel, Color, HexColor, RGBAColor, RGBColor, js_number


class EdgeColor(BaseModel):
    """An explicit color value (hex, RGB or RGBA)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["color"] = "color"
    color: Color

    def render(self) -> str:
        return self.color.render()


class ColorName(BaseModel):
    """A named CSS color such as ``black``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["name"] = "name"
    name: str

    def render(self) -> str:
        return f'color: "{self.name}",'


class Inherit(BaseModel):
    """Inherit the color from an endpoint (``from``, ``to`` or ``both``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["inherit"] = "inherit"
    inherit: str

    def render(self) -> str:
        return f'inherit: "{self.inherit}",'


class Opacity(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["opacity"] = "opacity"
    opacity: float

    def render(self) -> str:
        return f"opacity: {js_number(self.opacity)},"


class Highlight(BaseModel):
    """Highlight color as RGB channels."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["highlight"] = "highlight"
    r: Channel
    g: Channel
    b: Channel

    def render(self) -> str:
        return f'highlight: "rgb({self.r}, {self.g}, {self.b}) ",'


class HighlightAlpha(BaseModel):
    """Highlight color as RGB channels plus alpha."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["highlight_alpha"] = "highlight_alpha"
    r: Channel
    g: Channel
    b: Channel
    a: float

    def render(self) -> str:
        return f'highlight: "rgba({self.r}, {self.g}, {self.b}, {js_number(self.a)}) ",'


class HighlightName(BaseModel):
    """Highlight color as a named CSS color."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["highlight_name"] = "highlight_name"
    name: str

    def render(self) -> str:
        return f'highlight: "{self.name}",'


EdgeOption = Annotated[
    Union[
        EdgeColor,
        ColorName,
        Inherit,
        Opacity,
        Highlight,
        HighlightAlpha,
        HighlightName,
    ],
    Field(discriminator="kind"),
]


def edge_hex(hex: str) -> EdgeColor:
    """Build an edge color option from a hex string."""
    return EdgeColor(color=HexColor(hex=hex))


def edge_rgb(r: int, g: int, b: int) -> EdgeColor:
    """Build an edge color option from RGB channels."""
    return EdgeColor(color=RGBColor(r=r, g=g, b=b))


def edge_rgba(r: int, g: int, b: int, a: float) -> EdgeColor:
    """Build an edge color option from RGB channels and alpha."""
    return EdgeColor(color=RGBAColor(r=r, g=g, b=b, a=a))
