"""Network builder that accumulates nodes and edges for rendering."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

import networkx as nx

from ..options.edge_options import EdgeOption
from ..options.node_options import NodeOption
from ..schema.models import Edge, Node, check_id

if TYPE_CHECKING:
    from ..output.config import RenderConfig

logger = logging.getLogger(__name__)


class Network:
    """An ordered collection of nodes and edges.

    Nodes are keyed by id and edges by the ordered ``(source, target)`` pair.
    Adding a key that is already present is silently ignored, so the first
    declaration wins. Edge endpoints are not checked against declared nodes.
    """

    def __init__(self):
        """Initialize an empty network."""
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._node_ids: set[int] = set()
        self._edge_keys: set[tuple[int, int]] = set()

    @property
    def nodes(self) -> tuple[Node, ...]:
        """Nodes in insertion order."""
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Edges in insertion order."""
        return tuple(self._edges)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_node(
        self,
        id: int,
        label: str,
        style: Iterable[NodeOption] | None = None,
    ) -> bool:
        """Add a node to the network.

        Args:
            id: Unique node id in ``[0, 2**128)``.
            label: Text shown on the node.
            style: Node options, or None for the default swatch.

        Returns:
            True if the node was added, False if the id was already present.

        Raises:
            ValueError: If the id is out of range.
        """
        check_id(id)
        if id in self._node_ids:
            logger.debug("Ignoring duplicate node %d", id)
            return False

        node = Node(
            id=id,
            label=label,
            style=tuple(style) if style is not None else None,
        )
        self._nodes.append(node)
        self._node_ids.add(id)
        return True

    def add_edge(
        self,
        source: int,
        target: int,
        style: Iterable[EdgeOption] | None = None,
        directed: bool = False,
    ) -> bool:
        """Add an edge to the network.

        Args:
            source: Id of the node the edge starts at.
            target: Id of the node the edge ends at.
            style: Edge options, or None for the default color.
            directed: Draw an arrowhead at the target end.

        Returns:
            True if the edge was added, False if ``(source, target)`` was
            already present.

        Raises:
            ValueError: If either id is out of range.
        """
        check_id(source)
        check_id(target)
        if (source, target) in self._edge_keys:
            logger.debug("Ignoring duplicate edge %d -> %d", source, target)
            return False

        edge = Edge(
            source=source,
            target=target,
            style=tuple(style) if style is not None else None,
            directed=directed,
        )
        self._edges.append(edge)
        self._edge_keys.add(edge.key)
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_node(self, id: int) -> bool:
        return id in self._node_ids

    def has_edge(self, source: int, target: int) -> bool:
        return (source, target) in self._edge_keys

    def node_ids(self) -> list[int]:
        """Get node ids in insertion order."""
        return [node.id for node in self._nodes]

    def dangling_edges(self) -> list[Edge]:
        """Get edges with at least one endpoint that is not a declared node."""
        return [
            edge
            for edge in self._edges
            if edge.source not in self._node_ids or edge.target not in self._node_ids
        ]

    def isolated_nodes(self) -> list[Node]:
        """Get nodes that no edge touches."""
        touched = set()
        for edge in self._edges:
            touched.add(edge.source)
            touched.add(edge.target)
        return [node for node in self._nodes if node.id not in touched]

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def render(self, config: "RenderConfig | None" = None) -> str:
        """Render the network as an HTML document."""
        from ..output.renderer import render_html

        return render_html(self, config)

    def create(self, path: str | Path, config: "RenderConfig | None" = None) -> Path:
        """Render the network and write it to ``path``.

        Raises:
            NetworkWriteError: If the file cannot be written.
        """
        from ..output.renderer import write_html

        return write_html(self, path, config)

    # -------------------------------------------------------------------------
    # networkx interop
    # -------------------------------------------------------------------------

    def to_networkx(self) -> nx.DiGraph:
        """Export to a networkx DiGraph.

        Nodes carry ``label`` and ``style``; edges carry ``style`` and
        ``directed``. Dangling endpoints become nodes without attributes.
        """
        graph = nx.DiGraph()
        for node in self._nodes:
            graph.add_node(node.id, label=node.label, style=node.style)
        for edge in self._edges:
            graph.add_edge(
                edge.source, edge.target, style=edge.style, directed=edge.directed
            )
        return graph

    @classmethod
    def from_networkx(cls, graph: nx.Graph) -> "Network":
        """Build a network from a networkx graph with integer node keys.

        Labels come from the ``label`` node attribute (else the key), styles
        from ``style`` attributes, and edge direction from the ``directed``
        edge attribute (else whether the graph itself is directed).
        """
        network = cls()
        default_directed = graph.is_directed()

        for node_id, data in graph.nodes(data=True):
            label = data.get("label")
            network.add_node(
                node_id,
                str(node_id) if label is None else str(label),
                data.get("style"),
            )

        for source, target, data in graph.edges(data=True):
            directed = data.get("directed", default_directed)
            network.add_edge(source, target, data.get("style"), bool(directed))

        return network
