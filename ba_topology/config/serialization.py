"""JSON serialization for generation configs and the one-line model descriptor."""

import json
from dataclasses import asdict
from typing import Any

from dacite import Config as DaciteConfig
from dacite import from_dict

from ba_topology.config.topology import (
    BandwidthDistribution,
    GenerationConfig,
    PlacementType,
    TopologyConfig,
)

# strict=True rejects unknown keys; cast turns JSON arrays back into tuples
# and JSON integers back into floats and enum members.
_DACITE_CONFIG = DaciteConfig(
    cast=[tuple, float, PlacementType, BandwidthDistribution],
    check_types=True,
    strict=True,
)


def config_to_json(config: GenerationConfig) -> str:
    """Serialize a GenerationConfig to a JSON string (sorted keys, 2-space indent)."""
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> GenerationConfig:
    """Deserialize a JSON string to a GenerationConfig.

    Model validation in TopologyConfig.__post_init__ runs during
    construction, so an invalid model raises ValueError here.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: GenerationConfig) -> dict[str, Any]:
    """Convert a GenerationConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> GenerationConfig:
    """Reconstruct a GenerationConfig from a plain dictionary."""
    return from_dict(
        data_class=GenerationConfig,
        data=d,
        config=_DACITE_CONFIG,
    )


def model_string(topology: TopologyConfig) -> str:
    """Describe the model on one line.

    Format: ``Model ( 2 ): n hs ls placement m bw_dist bw_min bw_max``,
    where 2 identifies the router-level Barabasi-Albert model and the enums
    are written as their integer codes.
    """
    return (
        f"Model ( 2 ): {topology.n} {topology.hs} {topology.ls} "
        f"{int(topology.placement)} {topology.m} {int(topology.bw_dist)} "
        f"{topology.bw_min:g} {topology.bw_max:g}"
    )
