"""Structural checks for a generated router topology."""

import logging

import numpy as np
from scipy.sparse.csgraph import connected_components

from ba_topology.graph.topology import RouterGraph

log = logging.getLogger(__name__)


def validate_topology(graph: RouterGraph, m: int) -> list[str]:
    """Validate a generated topology against Barabasi-Albert invariants.

    Checks (cheapest first):
    1. No self-loops
    2. No duplicate edges
    3. Adjacency index matches the edge list
    4. Per-node degree counters match the adjacency index
    5. Degree sum equals twice the edge count
    6. Minimum degree >= m
    7. Connectivity

    Args:
        graph: Generated graph.
        m: Edges per joining node used to build it.

    Returns:
        List of error strings (empty = valid topology).
    """
    errors: list[str] = []
    n = graph.node_count()

    # 1. No self-loops
    loops = [e for e in graph.edges if e.src == e.dst]
    if loops:
        errors.append(f"Self-loops detected: {len(loops)} edges")

    # 2. No duplicate edges (unordered)
    seen: set[tuple[int, int]] = set()
    duplicates = 0
    for e in graph.edges:
        key = (min(e.src, e.dst), max(e.src, e.dst))
        if key in seen:
            duplicates += 1
        seen.add(key)
    if duplicates:
        errors.append(f"Duplicate edges detected: {duplicates}")

    # 3. Adjacency index vs edge list
    for e in graph.edges:
        if not (
            graph.adjacency_contains(e.src, e.dst)
            and graph.adjacency_contains(e.dst, e.src)
        ):
            errors.append(
                f"Edge ({e.src},{e.dst}) missing from adjacency index"
            )
            break
    adjacency_entries = sum(len(graph.neighbors(i)) for i in range(n))
    if adjacency_entries != 2 * len(seen):
        errors.append(
            f"Adjacency index has {adjacency_entries} entries, "
            f"expected {2 * len(seen)}"
        )

    # 4. Degree counters
    for node in graph.nodes:
        adj_degree = len(graph.neighbors(node.node_id))
        if node.out_degree != adj_degree or node.in_degree != adj_degree:
            errors.append(
                f"Node {node.node_id} degree (in={node.in_degree}, "
                f"out={node.out_degree}) != adjacency size {adj_degree}"
            )
            break

    # 5. Degree-sum invariant
    degree_sum = graph.degree_sum()
    if degree_sum != 2 * graph.edge_count():
        errors.append(
            f"Degree sum {degree_sum} != 2 * edges ({2 * graph.edge_count()})"
        )

    # 6. Minimum degree
    degrees = graph.out_degrees()
    if n > 0 and degrees.min() < m:
        errors.append(f"Minimum degree {int(degrees.min())} < m ({m})")

    # 7. Connectivity
    n_components, _ = connected_components(graph.to_sparse(), directed=False)
    if n_components != 1:
        errors.append(f"Not connected: {n_components} components found")

    if errors:
        log.warning("Topology validation failed: %s", "; ".join(errors))
    return errors


def edges_respect_join_order(graph: RouterGraph, m: int) -> bool:
    """True when every growth edge runs from a joining node to an earlier one.

    Edges are stored in insertion order: the seed clique first, then m edges
    per joining node with src set to the joining node.
    """
    seed_edges = m * (m + 1) // 2
    growth = graph.edges[seed_edges:]
    expected_src = np.repeat(np.arange(m + 1, graph.node_count()), m)
    if len(growth) != expected_src.shape[0]:
        return False
    return all(
        e.src == int(src) and e.dst < e.src
        for e, src in zip(growth, expected_src)
    )
