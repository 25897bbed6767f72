"""HTML rendering and report formatting."""

from .config import VIS_NETWORK_CDN_URL, RenderConfig
from .errors import NetworkWriteError
from .renderer import render_edge, render_html, render_node, write_html

__all__ = [
    "VIS_NETWORK_CDN_URL",
    "RenderConfig",
    "NetworkWriteError",
    "render_edge",
    "render_html",
    "render_node",
    "write_html",
]
