"""Identity hashes for generation configs.

The runner prints two hashes per run: the model hash groups topologies
built from the same BA parameters regardless of seed, and the run hash
pins down one exact graph (model plus seed). Labels that never change the
wiring, such as description and tags, are left out of both.
"""

import hashlib
import json
from dataclasses import asdict
from typing import Any, Iterable

from ba_topology.config.topology import GenerationConfig

# Top-level fields that label a run without affecting the generated graph
_LABEL_FIELDS = ("description", "tags")


def config_hash(config: Any, exclude: Iterable[str] = ()) -> str:
    """SHA-256 of a config dataclass, truncated to 16 hex characters.

    Args:
        config: GenerationConfig or TopologyConfig.
        exclude: Top-level field names dropped before hashing.
    """
    fields = {k: v for k, v in asdict(config).items() if k not in set(exclude)}
    # Placement and bandwidth enums are IntEnums and dump as their codes,
    # so the hash matches the integer form stored in JSON configs
    payload = json.dumps(fields, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]


def topology_config_hash(config: GenerationConfig) -> str:
    """Model hash: shared by every seed of the same BA parameters."""
    return config_hash(config.topology)


def full_config_hash(config: GenerationConfig) -> str:
    """Run hash: model parameters plus seed."""
    return config_hash(config, exclude=_LABEL_FIELDS)
