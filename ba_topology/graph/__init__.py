"""Router-level topology generation with Barabasi-Albert preferential attachment."""

from ba_topology.graph.bandwidth import assign_bandwidth, sample_bandwidths
from ba_topology.graph.degree_stats import (
    degree_ccdf,
    degree_sequence,
    estimate_power_law_exponent,
)
from ba_topology.graph.errors import GraphGenerationError, InterconnectionError
from ba_topology.graph.generator import generate_topology
from ba_topology.graph.interconnect import (
    AttachmentState,
    build_seed_clique,
    interconnect,
    join_node,
    select_target,
)
from ba_topology.graph.placement import place_nodes
from ba_topology.graph.random_source import (
    GeneratorUniformSource,
    RecordingUniformSource,
    ReplayUniformSource,
    UniformRandomSource,
)
from ba_topology.graph.topology import RouterGraph
from ba_topology.graph.types import (
    AttachmentStats,
    EdgeConf,
    RouterEdge,
    RouterNode,
)
from ba_topology.graph.validation import (
    edges_respect_join_order,
    validate_topology,
)

__all__ = [
    "AttachmentState",
    "AttachmentStats",
    "EdgeConf",
    "GeneratorUniformSource",
    "GraphGenerationError",
    "InterconnectionError",
    "RecordingUniformSource",
    "ReplayUniformSource",
    "RouterEdge",
    "RouterGraph",
    "RouterNode",
    "UniformRandomSource",
    "assign_bandwidth",
    "build_seed_clique",
    "degree_ccdf",
    "degree_sequence",
    "edges_respect_join_order",
    "estimate_power_law_exponent",
    "generate_topology",
    "interconnect",
    "join_node",
    "place_nodes",
    "sample_bandwidths",
    "select_target",
    "validate_topology",
]
