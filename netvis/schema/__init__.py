"""Schema layer for node/edge records and YAML graph documents."""

from .errors import GraphLoadError, GraphValidationError
from .models import MAX_ID, Edge, GraphDocument, Node
from .loader import load_yaml, parse_graph, parse_graph_from_string

__all__ = [
    "GraphLoadError",
    "GraphValidationError",
    "MAX_ID",
    "Edge",
    "GraphDocument",
    "Node",
    "load_yaml",
    "parse_graph",
    "parse_graph_from_string",
]
