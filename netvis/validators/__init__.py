"""Structural checks for networks and graph documents."""

from .base import Severity, ValidationIssue, ValidationResult
from .duplicates import check_duplicates
from .references import check_dangling_edges, check_isolated_nodes
from .runner import check_graph_file, run_checks

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_duplicates",
    "check_dangling_edges",
    "check_isolated_nodes",
    "check_graph_file",
    "run_checks",
]
