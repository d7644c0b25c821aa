"""Tests for random and heavy-tailed node placement."""

import numpy as np
import pytest

from ba_topology.config.topology import PlacementType, TopologyConfig
from ba_topology.graph.placement import (
    place_nodes,
    sample_distinct_points,
    square_node_counts,
)
from ba_topology.graph.topology import RouterGraph


def _placed(config: TopologyConfig, seed: int = 42) -> RouterGraph:
    graph = RouterGraph(config.n)
    place_nodes(graph, config, np.random.default_rng(seed))
    return graph


class TestRandomPlacement:
    def test_coordinates_inside_plane(self) -> None:
        graph = _placed(TopologyConfig(n=500, hs=100, ls=10))
        coords = graph.coordinates()
        assert coords.min() >= 0
        assert coords.max() < 100

    def test_coordinates_distinct(self) -> None:
        graph = _placed(TopologyConfig(n=500, hs=30, ls=10))
        coords = {tuple(c) for c in graph.coordinates()}
        assert len(coords) == 500

    def test_full_plane(self) -> None:
        graph = _placed(TopologyConfig(n=16, hs=4, ls=2))
        coords = {tuple(c) for c in graph.coordinates()}
        assert len(coords) == 16

    def test_same_seed_same_positions(self) -> None:
        cfg = TopologyConfig(n=200, hs=1000, ls=100)
        a = _placed(cfg, seed=3).coordinates()
        b = _placed(cfg, seed=3).coordinates()
        assert np.array_equal(a, b)


class TestHeavyTailedPlacement:
    def test_coordinates_inside_plane_and_distinct(self) -> None:
        cfg = TopologyConfig(
            n=400, hs=100, ls=10, placement=PlacementType.HEAVY_TAILED
        )
        coords = _placed(cfg).coordinates()
        assert coords.min() >= 0
        assert coords.max() < 100
        assert len({tuple(c) for c in coords}) == 400

    def test_nodes_cluster_in_few_squares(self) -> None:
        cfg = TopologyConfig(
            n=1000, hs=1000, ls=100, placement=PlacementType.HEAVY_TAILED
        )
        coords = _placed(cfg).coordinates()
        squares = (coords[:, 0] // 100) * 10 + coords[:, 1] // 100
        _, counts = np.unique(squares, return_counts=True)
        # Pareto weights put far more than the uniform share (10) in the
        # busiest square
        assert counts.max() > 30

    def test_square_counts_sum_and_capacity(self) -> None:
        rng = np.random.default_rng(0)
        counts = square_node_counts(90, 4, 25, rng)
        assert counts.sum() == 90
        assert counts.max() <= 25
        assert counts.min() >= 0

    def test_square_counts_reject_overfull_plane(self) -> None:
        with pytest.raises(ValueError, match="do not fit"):
            square_node_counts(101, 4, 25, np.random.default_rng(0))


class TestDistinctPoints:
    def test_shape_and_range(self) -> None:
        points = sample_distinct_points(10, 5, np.random.default_rng(1))
        assert points.shape == (10, 2)
        assert points.min() >= 0
        assert points.max() < 5

    def test_too_many_points(self) -> None:
        with pytest.raises(ValueError, match="Cannot place"):
            sample_distinct_points(26, 5, np.random.default_rng(1))
