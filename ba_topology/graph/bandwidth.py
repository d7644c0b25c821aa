"""Post-hoc bandwidth assignment for router links."""

import numpy as np

from ba_topology.config.topology import BandwidthDistribution, TopologyConfig
from ba_topology.graph.topology import RouterGraph
from ba_topology.graph.types import EdgeConf

HEAVY_TAILED_SHAPE = 1.2


def sample_bandwidths(
    count: int,
    dist: BandwidthDistribution,
    bw_min: float,
    bw_max: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw count link bandwidths.

    - CONST: every link gets bw_min.
    - UNIFORM: uniform on [bw_min, bw_max].
    - EXPONENTIAL: exponential with mean bw_min.
    - HEAVY_TAILED: Pareto with shape 1.2 and scale bw_min, capped at bw_max.

    Raises:
        ValueError: For an unsupported distribution.
    """
    if dist == BandwidthDistribution.CONST:
        return np.full(count, bw_min, dtype=np.float64)
    if dist == BandwidthDistribution.UNIFORM:
        return rng.uniform(bw_min, bw_max, size=count)
    if dist == BandwidthDistribution.EXPONENTIAL:
        return rng.exponential(bw_min, size=count)
    if dist == BandwidthDistribution.HEAVY_TAILED:
        values = (rng.pareto(HEAVY_TAILED_SHAPE, size=count) + 1.0) * bw_min
        return np.minimum(values, bw_max)
    raise ValueError(f"Unsupported bandwidth distribution: {dist}")


def assign_bandwidth(
    graph: RouterGraph, config: TopologyConfig, rng: np.random.Generator
) -> None:
    """Attach an EdgeConf with a sampled bandwidth to every edge of graph."""
    bandwidths = sample_bandwidths(
        graph.edge_count(), config.bw_dist, config.bw_min, config.bw_max, rng
    )
    for edge, bw in zip(graph.edges, bandwidths):
        edge.conf = EdgeConf(bandwidth=float(bw))
