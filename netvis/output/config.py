"""Render configuration."""

from pydantic import BaseModel, ConfigDict

VIS_NETWORK_CDN_URL = "https://unpkg.com/vis-network/standalone/umd/vis-network.min.js"


class RenderConfig(BaseModel):
    """Settings for the HTML template.

    The defaults produce the stock document: vis-network from unpkg, a
    ``mynetwork`` container, ``dot`` nodes, a green node swatch and black
    edges.
    """

    model_config = ConfigDict(frozen=True)

    cdn_url: str = VIS_NETWORK_CDN_URL
    container_id: str = "mynetwork"
    default_shape: str = "dot"
    default_node_color: str = "#73ef81"
    default_edge_color: str = "black"
