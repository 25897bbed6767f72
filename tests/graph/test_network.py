"""Tests for the Network builder."""

import networkx as nx
import pytest

from netvis.graph.network import Network
from netvis.options.edge_options import ColorName, Opacity
from netvis.options.node_options import Shape
from netvis.schema.models import MAX_ID


class TestAddNode:
    def test_nodes_keep_insertion_order(self, empty_network):
        for node_id in (5, 1, 3):
            empty_network.add_node(node_id, f"n{node_id}")

        assert empty_network.node_ids() == [5, 1, 3]

    def test_duplicate_id_is_ignored(self, empty_network):
        assert empty_network.add_node(0, "first") is True
        assert empty_network.add_node(0, "second", [Shape(shape="box")]) is False

        assert empty_network.node_count == 1
        assert empty_network.nodes[0].label == "first"
        assert empty_network.nodes[0].style is None

    def test_style_is_stored_as_tuple(self, empty_network):
        empty_network.add_node(0, "n", [Shape(shape="box")])

        assert empty_network.nodes[0].style == (Shape(shape="box"),)

    def test_accepts_128_bit_ids(self, empty_network):
        empty_network.add_node(MAX_ID - 1, "big")

        assert empty_network.has_node(MAX_ID - 1)

    @pytest.mark.parametrize("bad_id", [-1, MAX_ID])
    def test_rejects_out_of_range_ids(self, empty_network, bad_id):
        with pytest.raises(ValueError):
            empty_network.add_node(bad_id, "bad")

        assert empty_network.node_count == 0


class TestAddEdge:
    def test_duplicate_pair_is_ignored(self, empty_network):
        assert empty_network.add_edge(0, 1) is True
        assert empty_network.add_edge(0, 1, [ColorName(name="red")], directed=True) is False

        assert empty_network.edge_count == 1
        assert empty_network.edges[0].directed is False

    def test_reversed_pair_is_a_different_edge(self, empty_network):
        empty_network.add_edge(0, 1)
        empty_network.add_edge(1, 0)

        assert empty_network.edge_count == 2
        assert empty_network.has_edge(1, 0)

    def test_endpoints_need_not_exist(self, empty_network):
        assert empty_network.add_edge(10, 20) is True

        edge = empty_network.edges[0]
        assert (edge.source, edge.target) == (10, 20)
        assert not empty_network.has_node(10)

    def test_rejects_negative_endpoint(self, empty_network):
        with pytest.raises(ValueError):
            empty_network.add_edge(0, -5)


class TestQueries:
    def test_dangling_edges(self, empty_network):
        empty_network.add_node(0, "a")
        empty_network.add_node(1, "b")
        empty_network.add_edge(0, 1)
        empty_network.add_edge(1, 2)

        dangling = empty_network.dangling_edges()

        assert [edge.key for edge in dangling] == [(1, 2)]

    def test_isolated_nodes(self, empty_network):
        empty_network.add_node(0, "a")
        empty_network.add_node(1, "b")
        empty_network.add_node(2, "c")
        empty_network.add_edge(0, 1)

        assert [node.id for node in empty_network.isolated_nodes()] == [2]

    def test_render_does_not_consume(self, cool_network):
        first = cool_network.render()
        second = cool_network.render()

        assert first == second
        assert cool_network.node_count == 2


class TestNetworkx:
    def test_to_networkx(self, cool_network):
        graph = cool_network.to_networkx()

        assert isinstance(graph, nx.DiGraph)
        assert list(graph.nodes) == [0, 1]
        assert graph.nodes[0]["label"] == "Cool"
        assert graph.edges[0, 1]["directed"] is False
        assert Opacity(opacity=0.3) in graph.edges[0, 1]["style"]

    def test_to_networkx_keeps_dangling_endpoints(self, empty_network):
        empty_network.add_edge(3, 4)

        graph = empty_network.to_networkx()

        assert set(graph.nodes) == {3, 4}

    def test_from_undirected_graph(self):
        graph = nx.Graph()
        graph.add_node(1, label="one")
        graph.add_node(2)
        graph.add_edge(1, 2)

        network = Network.from_networkx(graph)

        assert [node.label for node in network.nodes] == ["one", "2"]
        assert network.edges[0].directed is False

    def test_from_directed_graph_with_style_shorthand(self):
        graph = nx.DiGraph()
        graph.add_node(0, label="root", style=[{"shape": "box"}])
        graph.add_node(1, label="leaf")
        graph.add_edge(0, 1, style=[{"name": "red"}])

        network = Network.from_networkx(graph)

        assert network.nodes[0].style == (Shape(shape="box"),)
        assert network.edges[0].style == (ColorName(name="red"),)
        assert network.edges[0].directed is True

    def test_round_trip_preserves_render(self, cool_network):
        rebuilt = Network.from_networkx(cool_network.to_networkx())

        assert rebuilt.render() == cool_network.render()
