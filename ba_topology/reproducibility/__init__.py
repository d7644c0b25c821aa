"""Reproducibility infrastructure: per-phase seed management."""

from ba_topology.reproducibility.seed import (
    BANDWIDTH_OFFSET,
    CONNECT_OFFSET,
    PLACEMENT_OFFSET,
    stream_rngs,
    verify_seed_determinism,
)

__all__ = [
    "BANDWIDTH_OFFSET",
    "CONNECT_OFFSET",
    "PLACEMENT_OFFSET",
    "stream_rngs",
    "verify_seed_determinism",
]
