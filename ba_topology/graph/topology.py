"""In-memory router graph: fixed node set, growing edge list, adjacency index."""

import math

import numpy as np
import scipy.sparse

from ba_topology.graph.types import AttachmentStats, RouterEdge, RouterNode


class RouterGraph:
    """Container for a router-level topology.

    The node set is fixed at construction. Edges are only appended, and the
    adjacency index (one set of neighbour ids per node) answers membership
    queries in O(1). Edge insertion and adjacency registration are separate
    steps; callers register both directions themselves.
    """

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        self.nodes: list[RouterNode] = [RouterNode(node_id=i) for i in range(n)]
        self.edges: list[RouterEdge] = []
        self._adjacency: list[set[int]] = [set() for _ in range(n)]
        self.attachment_stats: AttachmentStats | None = None

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_at(self, index: int) -> RouterNode:
        return self.nodes[index]

    def add_edge(self, src: int, dst: int) -> RouterEdge:
        """Append an edge between two existing nodes and return it.

        Raises:
            ValueError: If src == dst.
        """
        if src == dst:
            raise ValueError(f"Self-loop on node {src}")
        a = self.nodes[src]
        b = self.nodes[dst]
        edge = RouterEdge(
            src=src, dst=dst, length=math.hypot(a.x - b.x, a.y - b.y)
        )
        self.edges.append(edge)
        return edge

    def adjacency_contains(self, i: int, k: int) -> bool:
        return k in self._adjacency[i]

    def register_adjacency(self, i: int, k: int) -> None:
        self._adjacency[i].add(k)

    def neighbors(self, i: int) -> frozenset[int]:
        return frozenset(self._adjacency[i])

    def degree_sum(self) -> int:
        """Sum of out-degrees over all nodes."""
        return sum(node.out_degree for node in self.nodes)

    def out_degrees(self) -> np.ndarray:
        return np.array([node.out_degree for node in self.nodes], dtype=np.int64)

    def coordinates(self) -> np.ndarray:
        """(n, 2) array of node positions."""
        return np.array([(node.x, node.y) for node in self.nodes], dtype=np.float64)

    def to_sparse(self) -> scipy.sparse.csr_matrix:
        """Symmetric 0/1 adjacency matrix built from the edge list."""
        n = self.node_count()
        if not self.edges:
            return scipy.sparse.csr_matrix((n, n), dtype=np.float64)
        src = np.array([e.src for e in self.edges], dtype=np.int64)
        dst = np.array([e.dst for e in self.edges], dtype=np.int64)
        rows = np.concatenate([src, dst])
        cols = np.concatenate([dst, src])
        data = np.ones(rows.shape[0], dtype=np.float64)
        # Duplicate (row, col) pairs are summed, so a duplicated edge shows
        # up as an entry of 2
        return scipy.sparse.csr_matrix((data, (rows, cols)), shape=(n, n))

    def edge_pairs(self) -> list[tuple[int, int]]:
        """Edges as (src, dst) tuples in insertion order."""
        return [(e.src, e.dst) for e in self.edges]

    def __repr__(self) -> str:
        return (
            f"RouterGraph(n={self.node_count()}, edges={self.edge_count()})"
        )
