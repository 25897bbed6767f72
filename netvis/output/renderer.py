"""HTML rendering for networks.

The document embeds two ``vis.DataSet`` literals (``nodes`` and ``edges``)
and a fixed script that mounts a ``vis.Network`` on the body element. Text
values are inserted verbatim: labels, titles and color names containing a
double quote or backslash produce a broken literal.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..options.edge_options import ColorName
from ..options.node_options import NodeColor
from ..schema.models import Edge, Node
from .config import RenderConfig
from .errors import NetworkWriteError

if TYPE_CHECKING:
    from ..graph.network import Network

logger = logging.getLogger(__name__)

ARROW_FRAGMENT = 'arrows: { to: { enabled: true, type: "arrow" }}'


def render_node(node: Node, config: RenderConfig | None = None) -> str:
    """Render one entry of the ``nodes`` array, newline included."""
    config = config or RenderConfig()
    style = node.style
    if style is None:
        style = (NodeColor(color=config.default_node_color),)

    fragments = "".join(option.render() for option in style)
    return f'{{ id: {node.id}, label: "{node.label}", {fragments}}},\n'


def render_edge(edge: Edge, config: RenderConfig | None = None) -> str:
    """Render one entry of the ``edges`` array, newline included."""
    config = config or RenderConfig()
    style = edge.style
    if style is None:
        style = (ColorName(name=config.default_edge_color),)

    fragments = "".join(option.render() for option in style)
    arrow = ARROW_FRAGMENT if edge.directed else ""
    return f"{{ from: {edge.source}, to: {edge.target}, color: {{{fragments}}}, {arrow} }},\n"


def render_html(network: "Network", config: RenderConfig | None = None) -> str:
    """Render a network as a standalone HTML document.

    Args:
        network: The network to render. It is not modified.
        config: Template settings; defaults to ``RenderConfig()``.

    Returns:
        The complete HTML document.
    """
    config = config or RenderConfig()
    parts: list[str] = []

    parts.append(
        f'<html><body id="{config.container_id}">'
        f'<script type="text/javascript" src="{config.cdn_url}"></script>\n'
    )
    parts.append('<script type="text/javascript">\n')

    # Nodes
    parts.append("var nodes = new vis.DataSet([")
    parts.extend(render_node(node, config) for node in network.nodes)
    parts.append("]);\n")

    # Edges
    parts.append("var edges = new vis.DataSet([")
    parts.extend(render_edge(edge, config) for edge in network.edges)
    parts.append("]);\n")

    # Network setup
    parts.append(
        f'var container = document.getElementById("{config.container_id}");\n'
        "var data = {\n"
        "    nodes: nodes,\n"
        "    edges: edges\n"
        "};\n"
        f'var options = {{ nodes: {{shape: "{config.default_shape}" }}}};\n'
        "var network = new vis.Network(container, data, options);\n"
    )
    parts.append("\n")
    parts.append("</script></body></html>")

    document = "".join(parts)
    logger.debug(
        "Rendered %d node(s) and %d edge(s) into %d characters",
        network.node_count,
        network.edge_count,
        len(document),
    )
    return document


def write_html(
    network: "Network",
    path: str | Path,
    config: RenderConfig | None = None,
) -> Path:
    """Render a network and write the document to a file.

    Args:
        network: The network to render.
        path: Destination file. Existing files are overwritten.
        config: Template settings.

    Returns:
        The path that was written.

    Raises:
        NetworkWriteError: If the file cannot be created or written.
    """
    path = Path(path)
    document = render_html(network, config)

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(document)
    except OSError as e:
        raise NetworkWriteError(f"Cannot write file: {e}", str(path)) from e

    logger.info("Wrote %s", path)
    return path
