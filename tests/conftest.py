"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from netvis.graph.network import Network
from netvis.options.edge_options import Opacity, edge_hex
from netvis.options.node_options import NodeColor, Shape, Title


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def cool_graph_yaml() -> str:
    """Return a two-node graph YAML string."""
    return """
nodes:
  - id: 0
    label: Cool
  - id: 1
    label: Cooler
    style:
      - color: "#ff0000"
      - shape: hexagon
      - title: not slime boy

edges:
  - from: 0
    to: 1
    style:
      - hex: "#ff0000"
      - opacity: 0.3
"""


@pytest.fixture
def empty_network() -> Network:
    return Network()


@pytest.fixture
def cool_network() -> Network:
    """Return the two-node network built through the Python API."""
    net = Network()
    net.add_node(0, "Cool")
    net.add_node(
        1,
        "Cooler",
        [NodeColor(color="#ff0000"), Shape(shape="hexagon"), Title(title="not slime boy")],
    )
    net.add_edge(0, 1, [edge_hex("#ff0000"), Opacity(opacity=0.3)], directed=False)
    return net
