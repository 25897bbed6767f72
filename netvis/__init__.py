"""netvis: build small graphs in Python and render them with vis-network."""

from .graph import Network, build_network
from .options import (
    ColorName,
    EdgeColor,
    HexColor,
    Highlight,
    HighlightAlpha,
    HighlightName,
    Inherit,
    NodeColor,
    Opacity,
    RGBAColor,
    RGBColor,
    Shape,
    Title,
    edge_hex,
    edge_rgb,
    edge_rgba,
)
from .output import NetworkWriteError, RenderConfig, render_html, write_html

__version__ = "0.1.0"

__all__ = [
    "Network",
    "build_network",
    "ColorName",
    "EdgeColor",
    "HexColor",
    "Highlight",
    "HighlightAlpha",
    "HighlightName",
    "Inherit",
    "NodeColor",
    "Opacity",
    "RGBAColor",
    "RGBColor",
    "Shape",
    "Title",
    "edge_hex",
    "edge_rgb",
    "edge_rgba",
    "NetworkWriteError",
    "RenderConfig",
    "render_html",
    "write_html",
]
