"""Default configuration: single source of truth for model parameters."""

from ba_topology.config.topology import GenerationConfig

# The stock router Barabasi-Albert model: n=1000, hs=1000, ls=100,
# random placement, m=2, constant bandwidth in [10, 1024], seed=42.
DEFAULT_CONFIG = GenerationConfig()
