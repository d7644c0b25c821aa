"""Degree distribution statistics for generated topologies."""

import numpy as np

from ba_topology.graph.topology import RouterGraph


def degree_sequence(graph: RouterGraph) -> np.ndarray:
    """Out-degree of every node, in node order."""
    return graph.out_degrees()


def degree_ccdf(degrees: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Complementary CDF of a degree sequence.

    Returns:
        (k, P(D >= k)) for every distinct degree k, ascending in k.
    """
    values, counts = np.unique(degrees, return_counts=True)
    # Number of nodes with degree >= k, from the top down
    at_least = np.cumsum(counts[::-1])[::-1]
    return values, at_least / degrees.shape[0]


def estimate_power_law_exponent(degrees: np.ndarray, k_min: int) -> float:
    """Maximum-likelihood estimate of the power-law exponent of a degree tail.

    Uses the discrete approximation of Clauset, Shalizi & Newman (2009):
    gamma = 1 + n / sum(ln(k / (k_min - 0.5))) over degrees k >= k_min.
    Preferential attachment graphs give gamma close to 3 for large n.

    Raises:
        ValueError: If k_min < 1 or no degree reaches k_min.
    """
    if k_min < 1:
        raise ValueError(f"k_min must be >= 1, got {k_min}")
    tail = degrees[degrees >= k_min].astype(np.float64)
    if tail.shape[0] == 0:
        raise ValueError(f"No degrees >= k_min ({k_min})")
    return 1.0 + tail.shape[0] / np.log(tail / (k_min - 0.5)).sum()
