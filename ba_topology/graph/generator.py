"""Router-level Barabasi-Albert topology generator.

Chains the generation phases on a fresh graph:
placement -> interconnection -> bandwidth assignment.
"""

import logging

from ba_topology.config.topology import GenerationConfig
from ba_topology.graph.bandwidth import assign_bandwidth
from ba_topology.graph.errors import GraphGenerationError
from ba_topology.graph.interconnect import interconnect
from ba_topology.graph.placement import place_nodes
from ba_topology.graph.random_source import (
    GeneratorUniformSource,
    UniformRandomSource,
)
from ba_topology.graph.topology import RouterGraph
from ba_topology.reproducibility.seed import stream_rngs

log = logging.getLogger(__name__)


def generate_topology(
    config: GenerationConfig,
    connect_source: UniformRandomSource | None = None,
) -> RouterGraph:
    """Generate a router topology for config.

    Pipeline:
    1. Allocate the graph (node set fixed at config.topology.n)
    2. Place nodes on the plane
    3. Interconnect with preferential attachment
    4. Assign link bandwidths

    Args:
        config: Generation configuration. The model was validated when the
            config was constructed.
        connect_source: Optional uniform source for target selection. By
            default draws come from the "connect" stream of config.seed.

    Returns:
        The fully wired RouterGraph.

    Raises:
        GraphGenerationError: If memory runs out at any stage, or a node
            runs out of attachment targets. No partial graph is returned.
    """
    topo = config.topology
    rngs = stream_rngs(config.seed)
    if connect_source is None:
        connect_source = GeneratorUniformSource(rngs["connect"])

    try:
        graph = RouterGraph(topo.n)

        log.info("Placing nodes...")
        place_nodes(graph, topo, rngs["placement"])

        interconnect(graph, topo.m, connect_source)

        log.info("Assigning bandwidth...")
        assign_bandwidth(graph, topo, rngs["bandwidth"])
    except MemoryError as exc:
        log.error("Out of memory while generating %d-node topology", topo.n)
        raise GraphGenerationError(
            f"Ran out of memory generating topology (n={topo.n}, m={topo.m})"
        ) from exc

    log.info(
        "Topology generated (n=%d, m=%d, edges=%d)",
        graph.node_count(),
        topo.m,
        graph.edge_count(),
    )
    return graph
