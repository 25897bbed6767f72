"""Checks on how edges reference nodes."""

from ..graph.network import Network
from .base import ValidationResult


def check_dangling_edges(network: Network) -> ValidationResult:
    """Warn about edges whose endpoints are not declared nodes.

    Such edges are still rendered; vis-network decides what to draw.
    """
    result = ValidationResult()

    for edge in network.dangling_edges():
        missing = [
            endpoint
            for endpoint in dict.fromkeys((edge.source, edge.target))
            if not network.has_node(endpoint)
        ]
        names = ", ".join(str(m) for m in missing)
        result.add_warning(
            code="DANGLING_EDGE",
            message=f"Edge references undeclared node(s) {names}",
            edge=edge.key,
            missing=missing,
        )

    return result


def check_isolated_nodes(network: Network) -> ValidationResult:
    """Report nodes that no edge touches.

    Graphs without any edge are skipped, since every node would match.
    """
    result = ValidationResult()

    if network.edge_count == 0:
        return result

    for node in network.isolated_nodes():
        result.add_info(
            code="ISOLATED_NODE",
            message=f"Node '{node.label}' has no edges",
            node=node.id,
        )

    return result
