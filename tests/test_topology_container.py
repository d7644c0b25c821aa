"""Tests for the RouterGraph container."""

import numpy as np
import pytest

from ba_topology.graph.topology import RouterGraph


class TestRouterGraph:
    def test_nodes_created_with_zero_degree(self) -> None:
        graph = RouterGraph(5)
        assert graph.node_count() == 5
        assert graph.edge_count() == 0
        assert [n.node_id for n in graph.nodes] == [0, 1, 2, 3, 4]
        assert graph.degree_sum() == 0

    def test_rejects_empty_graph(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            RouterGraph(0)

    def test_edge_length_is_euclidean(self) -> None:
        graph = RouterGraph(2)
        graph.node_at(1).x = 3.0
        graph.node_at(1).y = 4.0
        edge = graph.add_edge(0, 1)
        assert edge.length == pytest.approx(5.0)
        assert edge.conf is None

    def test_self_loop_rejected(self) -> None:
        graph = RouterGraph(3)
        with pytest.raises(ValueError, match="Self-loop"):
            graph.add_edge(1, 1)

    def test_adjacency_registration_is_explicit(self) -> None:
        graph = RouterGraph(3)
        graph.add_edge(0, 2)
        assert not graph.adjacency_contains(0, 2)
        graph.register_adjacency(0, 2)
        assert graph.adjacency_contains(0, 2)
        assert not graph.adjacency_contains(2, 0)
        assert graph.neighbors(0) == frozenset({2})

    def test_to_sparse_is_symmetric(self) -> None:
        graph = RouterGraph(4)
        graph.add_edge(0, 1)
        graph.add_edge(2, 1)
        adj = graph.to_sparse()
        assert adj.shape == (4, 4)
        assert adj.nnz == 4
        assert (adj != adj.T).nnz == 0

    def test_to_sparse_without_edges(self) -> None:
        adj = RouterGraph(3).to_sparse()
        assert adj.shape == (3, 3)
        assert adj.nnz == 0

    def test_coordinates_shape(self) -> None:
        graph = RouterGraph(3)
        graph.node_at(2).x = 7.0
        coords = graph.coordinates()
        assert coords.shape == (3, 2)
        assert np.array_equal(coords[2], [7.0, 0.0])
