"""Checks for repeated declarations in graph documents."""

from ..schema.models import GraphDocument
from .base import ValidationResult


def check_duplicates(document: GraphDocument) -> ValidationResult:
    """Warn about node ids and ``(from, to)`` pairs declared more than once.

    The builder keeps the first declaration and drops the rest.
    """
    result = ValidationResult()

    seen_nodes: set[int] = set()
    for node in document.nodes:
        if node.id in seen_nodes:
            result.add_warning(
                code="DUPLICATE_NODE",
                message=f"Node id {node.id} is declared again as '{node.label}' and will be ignored",
                node=node.id,
            )
        seen_nodes.add(node.id)

    seen_edges: set[tuple[int, int]] = set()
    for edge in document.edges:
        if edge.key in seen_edges:
            result.add_warning(
                code="DUPLICATE_EDGE",
                message=f"Edge {edge.source} -> {edge.target} is declared again and will be ignored",
                edge=edge.key,
            )
        seen_edges.add(edge.key)

    return result
