"""Node, edge and run-statistics records for router-level topologies."""

from dataclasses import dataclass


@dataclass(slots=True)
class RouterNode:
    """A router on the plane.

    Degrees start at zero and are only ever incremented by interconnection.
    In an undirected router topology in_degree and out_degree move together;
    out_degree is the quantity that drives preferential attachment.
    """

    node_id: int
    x: float = 0.0
    y: float = 0.0
    in_degree: int = 0
    out_degree: int = 0


@dataclass(frozen=True, slots=True)
class EdgeConf:
    """Link payload attached after interconnection."""

    bandwidth: float
    edge_type: str = "RT_EDGE"


@dataclass(slots=True)
class RouterEdge:
    """Undirected link between two routers.

    length is the Euclidean distance between the endpoints and is fixed at
    creation; conf is filled in by bandwidth assignment.
    """

    src: int
    dst: int
    length: float
    conf: EdgeConf | None = None


@dataclass(frozen=True, slots=True)
class AttachmentStats:
    """Bookkeeping from one interconnection run."""

    seed_edges: int  # edges in the initial clique
    growth_edges: int  # edges added by joining nodes
    draws: int  # uniform draws consumed by target selection
    # Draws that selected the joining node itself. The node has zero weight
    # until it joins, so this guard count stays 0 in a valid run.
    self_rejections: int
    duplicate_rejections: int  # draws that selected an existing neighbour
    fallback_selections: int  # draws resolved by the rounding fallback
    degree_sum: int  # final degree-sum accumulator
