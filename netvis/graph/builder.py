"""Builder for converting a GraphDocument to a Network."""

from ..schema.models import GraphDocument
from .network import Network


def build_network(document: GraphDocument) -> Network:
    """Build a Network from a parsed graph document.

    Nodes and edges are replayed in document order, so repeated ids and
    repeated ``(from, to)`` pairs are dropped the same way as in direct
    ``add_node``/``add_edge`` calls.

    Args:
        document: The parsed graph document.

    Returns:
        A Network holding the document's nodes and edges.
    """
    network = Network()

    for node in document.nodes:
        network.add_node(node.id, node.label, node.style)

    for edge in document.edges:
        network.add_edge(edge.source, edge.target, edge.style, edge.directed)

    return network
