"""Tests for the document builder."""

from netvis.graph.builder import build_network
from netvis.options.node_options import Shape
from netvis.schema.loader import parse_graph_from_string


class TestBuildNetwork:
    def test_build_nodes_and_edges(self, cool_graph_yaml):
        network = build_network(parse_graph_from_string(cool_graph_yaml))

        assert network.node_ids() == [0, 1]
        assert network.has_edge(0, 1)

    def test_build_matches_python_api(self, cool_graph_yaml, cool_network):
        network = build_network(parse_graph_from_string(cool_graph_yaml))

        assert network.render() == cool_network.render()

    def test_duplicates_keep_first_declaration(self):
        yaml = """
nodes:
  - id: 0
    label: first
    style:
      - shape: box
  - id: 0
    label: second
edges:
  - {from: 0, to: 0}
  - {from: 0, to: 0, directed: true}
"""
        network = build_network(parse_graph_from_string(yaml))

        assert network.node_count == 1
        assert network.nodes[0].label == "first"
        assert network.nodes[0].style == (Shape(shape="box"),)
        assert network.edge_count == 1
        assert network.edges[0].directed is False

    def test_empty_document(self):
        network = build_network(parse_graph_from_string(""))

        assert network.node_count == 0
        assert network.edge_count == 0
