"""Tests for topology validation."""

import numpy as np

from ba_topology.graph.interconnect import interconnect
from ba_topology.graph.random_source import GeneratorUniformSource
from ba_topology.graph.topology import RouterGraph
from ba_topology.graph.types import RouterEdge
from ba_topology.graph.validation import (
    edges_respect_join_order,
    validate_topology,
)


def _link(graph: RouterGraph, i: int, k: int) -> None:
    graph.add_edge(i, k)
    graph.register_adjacency(i, k)
    graph.register_adjacency(k, i)
    for idx in (i, k):
        graph.node_at(idx).in_degree += 1
        graph.node_at(idx).out_degree += 1


class TestValidateTopology:
    def test_generated_graph_passes(self) -> None:
        graph = RouterGraph(100)
        interconnect(graph, 2, GeneratorUniformSource(np.random.default_rng(3)))
        assert validate_topology(graph, 2) == []

    def test_disconnected_graph_rejected(self) -> None:
        graph = RouterGraph(4)
        _link(graph, 0, 1)
        _link(graph, 2, 3)
        errors = validate_topology(graph, 1)
        assert any("Not connected" in e for e in errors)

    def test_self_loop_rejected(self) -> None:
        graph = RouterGraph(3)
        _link(graph, 0, 1)
        _link(graph, 1, 2)
        graph.edges.append(RouterEdge(src=2, dst=2, length=0.0))
        errors = validate_topology(graph, 1)
        assert any("Self-loops" in e for e in errors)

    def test_duplicate_edge_rejected(self) -> None:
        graph = RouterGraph(3)
        _link(graph, 0, 1)
        _link(graph, 1, 2)
        graph.add_edge(1, 0)
        errors = validate_topology(graph, 1)
        assert any("Duplicate" in e for e in errors)

    def test_degree_sum_mismatch_rejected(self) -> None:
        graph = RouterGraph(3)
        _link(graph, 0, 1)
        _link(graph, 1, 2)
        graph.node_at(0).out_degree += 1
        errors = validate_topology(graph, 1)
        assert any("Degree sum" in e for e in errors)
        assert any("adjacency size" in e for e in errors)

    def test_unregistered_edge_rejected(self) -> None:
        graph = RouterGraph(2)
        graph.add_edge(0, 1)
        errors = validate_topology(graph, 1)
        assert any("missing from adjacency" in e for e in errors)

    def test_minimum_degree(self) -> None:
        graph = RouterGraph(3)
        _link(graph, 0, 1)
        _link(graph, 1, 2)
        errors = validate_topology(graph, 2)
        assert any("Minimum degree" in e for e in errors)


class TestJoinOrder:
    def test_generated_graph_respects_order(self) -> None:
        graph = RouterGraph(60)
        interconnect(graph, 3, GeneratorUniformSource(np.random.default_rng(4)))
        assert edges_respect_join_order(graph, 3)

    def test_forward_edge_detected(self) -> None:
        graph = RouterGraph(4)
        interconnect(graph, 1, GeneratorUniformSource(np.random.default_rng(4)))
        last = graph.edges[-1]
        last.src, last.dst = last.dst, last.src
        assert not edges_respect_join_order(graph, 1)
