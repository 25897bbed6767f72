"""Loading graph documents from YAML files and strings.

Both entry points go through ``_read_mapping``: an empty document is an
empty graph, and anything other than a mapping at the root is rejected.
Null ``nodes``/``edges`` sections are handled by ``GraphDocument``.
"""

from pathlib import Path
from typing import IO

import yaml
from pydantic import ValidationError

from .errors import GraphLoadError, GraphValidationError
from .models import GraphDocument


def _read_mapping(source: str | IO[str], path: str | None = None) -> dict:
    """Parse YAML from text or a stream into the document's root mapping."""
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise GraphLoadError(f"Invalid YAML in graph document: {e}", path) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise GraphLoadError(
            "Graph document must be a mapping with 'nodes' and 'edges' keys, "
            f"got {type(data).__name__}",
            path,
        )

    return data


def load_yaml(path: str | Path) -> dict:
    """Load a graph file and return its root mapping.

    Raises:
        GraphLoadError: If the file is missing, unreadable or not a YAML mapping.
    """
    path = Path(path)

    if not path.is_file():
        reason = "is not a file" if path.exists() else "not found"
        raise GraphLoadError(f"Graph file {reason}: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            return _read_mapping(f, str(path))
    except OSError as e:
        raise GraphLoadError(f"Cannot read graph file: {e}", str(path)) from e


def parse_graph(path: str | Path) -> GraphDocument:
    """Load and validate a graph file.

    Raises:
        GraphLoadError: If the file cannot be read or parsed.
        GraphValidationError: If nodes, edges or style options are malformed.
    """
    return _to_document(load_yaml(path))


def parse_graph_from_string(yaml_string: str) -> GraphDocument:
    """Validate a graph document given as YAML text.

    Raises:
        GraphLoadError: If the YAML cannot be parsed.
        GraphValidationError: If nodes, edges or style options are malformed.
    """
    return _to_document(_read_mapping(yaml_string))


def _to_document(data: dict) -> GraphDocument:
    """Validate a root mapping, flattening pydantic errors into GraphValidationError."""
    try:
        return GraphDocument.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise GraphValidationError(
            f"Graph document has {len(errors)} invalid field(s)", errors
        ) from e
