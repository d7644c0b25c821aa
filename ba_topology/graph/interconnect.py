"""Barabasi-Albert preferential attachment over a placed router graph.

Interconnection runs in two phases:

1. Seed clique: the first m+1 nodes are fully connected.
2. Growth: every later node, in index order, attaches m edges to distinct
   nodes that have already joined, each target chosen with probability
   degree(k) / degree_sum. The joining node's own degree is credited in one
   bulk update after its m edges are placed.

The degree-sum accumulator equals the sum of all node out-degrees before and
after every edge addition, and the degree snapshot mirrors each node's
out-degree whenever a target is drawn.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ba_topology.graph.errors import InterconnectionError
from ba_topology.graph.random_source import UniformRandomSource
from ba_topology.graph.topology import RouterGraph
from ba_topology.graph.types import AttachmentStats

log = logging.getLogger(__name__)

PROGRESS_INTERVAL = 1000


@dataclass
class AttachmentState:
    """Mutable state owned by a single interconnection run."""

    degrees: np.ndarray  # float snapshot of every node's out-degree
    degree_sum: int = 0
    seed_edges: int = 0
    growth_edges: int = 0
    draws: int = 0
    self_rejections: int = 0
    duplicate_rejections: int = 0
    fallback_selections: int = 0

    def to_stats(self) -> AttachmentStats:
        return AttachmentStats(
            seed_edges=self.seed_edges,
            growth_edges=self.growth_edges,
            draws=self.draws,
            self_rejections=self.self_rejections,
            duplicate_rejections=self.duplicate_rejections,
            fallback_selections=self.fallback_selections,
            degree_sum=self.degree_sum,
        )


def build_seed_clique(graph: RouterGraph, m: int) -> AttachmentState:
    """Fully connect nodes 0..m and initialise the attachment state.

    Args:
        graph: Placed graph with no edges yet.
        m: Edges per joining node; the clique has m+1 members.

    Returns:
        AttachmentState with degree_sum == m * (m + 1) and a snapshot of
        length graph.node_count().

    Raises:
        ValueError: If m < 1 or the graph has no more than m nodes.
    """
    n = graph.node_count()
    if m < 1:
        raise ValueError(f"m must be >= 1, got {m}")
    if n <= m:
        raise ValueError(f"Graph has {n} nodes, need more than m={m}")

    degree_sum = 0
    seed_edges = 0
    for i in range(m + 1):
        for j in range(i + 1, m + 1):
            src = graph.node_at(i)
            dst = graph.node_at(j)
            graph.add_edge(i, j)
            graph.register_adjacency(i, j)
            graph.register_adjacency(j, i)

            src.in_degree += 1
            src.out_degree += 1
            degree_sum += 1

            dst.in_degree += 1
            dst.out_degree += 1
            degree_sum += 1
            seed_edges += 1

    degrees = np.array(
        [graph.node_at(i).out_degree for i in range(n)], dtype=np.float64
    )
    log.debug("Seed clique: %d nodes, %d edges", m + 1, seed_edges)
    return AttachmentState(
        degrees=degrees, degree_sum=degree_sum, seed_edges=seed_edges
    )


def select_target(
    degrees: np.ndarray, degree_sum: int, p: float
) -> tuple[int, bool]:
    """Pick the first index whose cumulative attachment probability reaches p.

    The cumulative weights are accumulated left to right, matching a scalar
    running sum of degrees[k] / degree_sum. If rounding leaves the total
    below p, the last index with positive weight is chosen instead.

    Args:
        degrees: Degree snapshot of the candidate nodes (index order).
        degree_sum: Normalising total, > 0.
        p: Uniform draw in [0, 1).

    Returns:
        (index, used_fallback).
    """
    cdf = np.cumsum(degrees / degree_sum)
    k = int(np.searchsorted(cdf, p, side="left"))
    if k < cdf.shape[0]:
        return k, False
    positive = np.flatnonzero(degrees)
    return int(positive[-1]), True


def join_node(
    graph: RouterGraph,
    state: AttachmentState,
    i: int,
    m: int,
    source: UniformRandomSource,
) -> None:
    """Attach node i to m distinct nodes among 0..i-1, then fold it in."""
    # Nodes i..n-1 have not joined and carry zero weight
    candidates = state.degrees[:i]
    eligible = int(np.count_nonzero(candidates))
    edges_added = 0

    while edges_added < m:
        if eligible - edges_added <= 0:
            raise InterconnectionError(
                f"Node {i} has no valid attachment targets left after "
                f"{edges_added} of {m} edges"
            )

        p = source.next()
        state.draws += 1
        k, used_fallback = select_target(candidates, state.degree_sum, p)
        if used_fallback:
            state.fallback_selections += 1
            log.debug("Draw %.17g fell past the cumulative total, using node %d", p, k)

        # Never true while candidates stop before i
        if k == i:
            state.self_rejections += 1
            continue

        # No multiple links between two nodes
        if graph.adjacency_contains(i, k):
            state.duplicate_rejections += 1
            continue

        graph.add_edge(i, k)
        graph.register_adjacency(i, k)
        graph.register_adjacency(k, i)

        dst = graph.node_at(k)
        dst.in_degree += 1
        dst.out_degree += 1
        state.degree_sum += 1
        state.degrees[k] += 1

        edges_added += 1
        state.growth_edges += 1

    src = graph.node_at(i)
    src.in_degree += m
    src.out_degree += m
    state.degree_sum += m
    state.degrees[i] += m


def interconnect(
    graph: RouterGraph, m: int, source: UniformRandomSource
) -> AttachmentStats:
    """Wire a placed graph in place with Barabasi-Albert preferential attachment.

    Args:
        graph: Graph whose nodes are placed and which has no edges.
        m: Edges added per joining node (>= 1, < node count).
        source: Uniform [0, 1) draws for target selection.

    Returns:
        AttachmentStats for the run.

    Raises:
        ValueError: If m or the node count is out of range.
        InterconnectionError: If a node runs out of valid targets.
        MemoryError: Propagated unchanged from edge allocation.
    """
    n = graph.node_count()
    log.info("Interconnecting %d nodes (m=%d)", n, m)

    state = build_seed_clique(graph, m)

    for i in range(m + 1, n):
        join_node(graph, state, i, m, source)
        if i % PROGRESS_INTERVAL == 0:
            log.debug("Joined %d/%d nodes", i, n)

    assert state.degree_sum == 2 * graph.edge_count(), (
        f"degree_sum {state.degree_sum} != 2 * edges {graph.edge_count()}"
    )

    log.info(
        "Interconnection done: %d edges, %d draws (%d duplicate rejections)",
        graph.edge_count(),
        state.draws,
        state.duplicate_rejections,
    )
    stats = state.to_stats()
    graph.attachment_stats = stats
    return stats
