"""Style options for nodes and edges."""

from .color import Color, HexColor, RGBAColor, RGBColor
from .node_options import NodeColor, NodeOption, Shape, Title
from .edge_options import (
    ColorName,
    EdgeColor,
    EdgeOption,
    Highlight,
    HighlightAlpha,
    HighlightName,
    Inherit,
    Opacity,
    edge_hex,
    edge_rgb,
    edge_rgba,
)

__all__ = [
    "Color",
    "HexColor",
    "RGBColor",
    "RGBAColor",
    "NodeOption",
    "NodeColor",
    "Shape",
    "Title",
    "EdgeOption",
    "EdgeColor",
    "ColorName",
    "Inherit",
    "Opacity",
    "Highlight",
    "HighlightAlpha",
    "HighlightName",
    "edge_hex",
    "edge_rgb",
    "edge_rgba",
]
