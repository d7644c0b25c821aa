"""Node placement on the hs x hs plane.

Two placement models:

- RANDOM: every node gets distinct integer coordinates drawn uniformly
  from [0, hs) x [0, hs).
- HEAVY_TAILED: the plane is divided into (hs // ls)^2 squares of side ls.
  Each square draws a Pareto weight and receives a share of the nodes
  proportional to it, so a few squares hold most routers. Within a square,
  nodes get distinct uniform integer coordinates.
"""

import logging

import numpy as np

from ba_topology.config.topology import PlacementType, TopologyConfig
from ba_topology.graph.topology import RouterGraph

log = logging.getLogger(__name__)

PARETO_SHAPE = 1.0


def sample_distinct_points(
    count: int, side: int, rng: np.random.Generator
) -> np.ndarray:
    """Draw count distinct integer points on a side x side grid.

    Returns:
        Integer array of shape (count, 2).

    Raises:
        ValueError: If the grid has fewer than count points.
    """
    capacity = side * side
    if count > capacity:
        raise ValueError(
            f"Cannot place {count} distinct points on a {side}x{side} grid"
        )
    flat = rng.choice(capacity, size=count, replace=False)
    return np.column_stack([flat // side, flat % side]).astype(np.int64)


def square_node_counts(
    n: int, num_squares: int, capacity: int, rng: np.random.Generator
) -> np.ndarray:
    """Split n nodes across squares in proportion to Pareto weights.

    Uses largest-remainder rounding so the counts sum to n. A square whose
    share exceeds its capacity keeps capacity nodes and the overflow moves
    on to the following squares (wrapping around).

    Args:
        n: Total nodes to place.
        num_squares: Number of low-level squares.
        capacity: Maximum nodes per square (ls * ls).
        rng: numpy random Generator.

    Returns:
        Integer array of length num_squares summing to n.
    """
    if n > num_squares * capacity:
        raise ValueError(
            f"{n} nodes do not fit in {num_squares} squares of "
            f"capacity {capacity}"
        )
    # numpy's pareto is Lomax; shifting by one gives the classic Pareto
    weights = rng.pareto(PARETO_SHAPE, size=num_squares) + 1.0
    shares = weights / weights.sum() * n
    counts = np.floor(shares).astype(np.int64)
    remainder = n - int(counts.sum())
    if remainder > 0:
        order = np.argsort(-(shares - counts), kind="stable")
        counts[order[:remainder]] += 1

    overflow = 0
    for s in range(num_squares):
        if counts[s] > capacity:
            overflow += int(counts[s]) - capacity
            counts[s] = capacity
    s = 0
    while overflow > 0:
        room = capacity - int(counts[s])
        if room > 0:
            moved = min(room, overflow)
            counts[s] += moved
            overflow -= moved
        s = (s + 1) % num_squares
    return counts


def place_random(graph: RouterGraph, hs: int, rng: np.random.Generator) -> None:
    points = sample_distinct_points(graph.node_count(), hs, rng)
    for node, (x, y) in zip(graph.nodes, points):
        node.x = float(x)
        node.y = float(y)


def place_heavy_tailed(
    graph: RouterGraph, hs: int, ls: int, rng: np.random.Generator
) -> None:
    per_side = hs // ls
    num_squares = per_side * per_side
    counts = square_node_counts(graph.node_count(), num_squares, ls * ls, rng)

    # Growth joins nodes in index order, so shuffle which node lands in
    # which square to keep join order independent of position
    order = rng.permutation(graph.node_count())
    index = 0
    for s in range(num_squares):
        count = int(counts[s])
        if count == 0:
            continue
        origin_x = (s // per_side) * ls
        origin_y = (s % per_side) * ls
        points = sample_distinct_points(count, ls, rng)
        for x, y in points:
            node = graph.node_at(int(order[index]))
            node.x = float(origin_x + x)
            node.y = float(origin_y + y)
            index += 1

    log.debug(
        "Heavy-tailed placement: %d of %d squares occupied, max %d nodes",
        int(np.count_nonzero(counts)),
        num_squares,
        int(counts.max()),
    )


def place_nodes(
    graph: RouterGraph, config: TopologyConfig, rng: np.random.Generator
) -> None:
    """Assign plane coordinates to every node of graph.

    Raises:
        ValueError: For an unsupported placement type.
    """
    if config.placement == PlacementType.RANDOM:
        place_random(graph, config.hs, rng)
    elif config.placement == PlacementType.HEAVY_TAILED:
        place_heavy_tailed(graph, config.hs, config.ls, rng)
    else:
        raise ValueError(f"Unsupported placement type: {config.placement}")
