"""Tests for degree distribution statistics."""

import numpy as np
import pytest

from ba_topology.graph.degree_stats import (
    degree_ccdf,
    degree_sequence,
    estimate_power_law_exponent,
)
from ba_topology.graph.interconnect import interconnect
from ba_topology.graph.random_source import GeneratorUniformSource
from ba_topology.graph.topology import RouterGraph


class TestDegreeCcdf:
    def test_small_sequence(self) -> None:
        k, ccdf = degree_ccdf(np.array([1, 1, 2, 3]))
        assert k.tolist() == [1, 2, 3]
        assert ccdf.tolist() == pytest.approx([1.0, 0.5, 0.25])

    def test_ccdf_is_non_increasing(self) -> None:
        graph = RouterGraph(500)
        interconnect(graph, 2, GeneratorUniformSource(np.random.default_rng(0)))
        _, ccdf = degree_ccdf(degree_sequence(graph))
        assert ccdf[0] == pytest.approx(1.0)
        assert np.all(np.diff(ccdf) <= 0)


class TestPowerLawExponent:
    def test_regular_degrees_give_steep_exponent(self) -> None:
        # All mass at k_min: the tail is as steep as the estimator allows
        gamma = estimate_power_law_exponent(np.full(100, 3), 3)
        assert gamma > 5.0

    def test_rejects_bad_k_min(self) -> None:
        with pytest.raises(ValueError, match="k_min"):
            estimate_power_law_exponent(np.array([1, 2, 3]), 0)

    def test_rejects_empty_tail(self) -> None:
        with pytest.raises(ValueError, match="No degrees"):
            estimate_power_law_exponent(np.array([1, 2, 3]), 10)
