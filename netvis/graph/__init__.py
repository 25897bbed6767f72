"""Graph layer: the Network builder and document conversion."""

from .network import Network
from .builder import build_network

__all__ = [
    "Network",
    "build_network",
]
