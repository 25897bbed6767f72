"""Check runner that orchestrates all graph checks."""

from pathlib import Path

from ..graph.builder import build_network
from ..graph.network import Network
from ..schema.loader import parse_graph
from ..schema.models import GraphDocument
from .base import ValidationResult
from .duplicates import check_duplicates
from .references import check_dangling_edges, check_isolated_nodes


def run_checks(network: Network, document: GraphDocument | None = None) -> ValidationResult:
    """Run all checks on a network.

    Args:
        network: The built network.
        document: The source document, if any. Duplicate checks need it,
            because the network has already dropped repeated declarations.

    Returns:
        Combined ValidationResult from all checks.
    """
    result = ValidationResult()

    if document is not None:
        result.merge(check_duplicates(document))

    result.merge(check_dangling_edges(network))
    result.merge(check_isolated_nodes(network))

    return result


def check_graph_file(path: str | Path) -> ValidationResult:
    """Load and check a graph file.

    Raises:
        GraphLoadError: If the file cannot be loaded.
        GraphValidationError: If the document fails schema validation.
    """
    document = parse_graph(path)
    network = build_network(document)
    return run_checks(network, document)
