"""Generation configuration with frozen, hashable, serializable dataclasses."""

from ba_topology.config.topology import (
    BandwidthDistribution,
    GenerationConfig,
    PlacementType,
    TopologyConfig,
)
from ba_topology.config.defaults import DEFAULT_CONFIG
from ba_topology.config.hashing import (
    config_hash,
    full_config_hash,
    topology_config_hash,
)
from ba_topology.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
    model_string,
)

__all__ = [
    "BandwidthDistribution",
    "GenerationConfig",
    "PlacementType",
    "TopologyConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "full_config_hash",
    "topology_config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
    "model_string",
]
