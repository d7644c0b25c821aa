"""Topology configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field
from enum import IntEnum


class PlacementType(IntEnum):
    """How nodes are placed on the plane before interconnection."""

    RANDOM = 1
    HEAVY_TAILED = 2


class BandwidthDistribution(IntEnum):
    """Distribution used to assign bandwidth to edges after interconnection."""

    CONST = 1
    UNIFORM = 2
    EXPONENTIAL = 3
    HEAVY_TAILED = 4


@dataclass(frozen=True, slots=True)
class TopologyConfig:
    """Router-level Barabasi-Albert model parameters.

    Validation runs in __post_init__ so an invalid model is rejected before
    any placement or interconnection work starts.
    """

    n: int = 1000  # number of routers
    hs: int = 1000  # side of the plane
    ls: int = 100  # side of a low-level square (heavy-tailed placement)
    placement: PlacementType = PlacementType.RANDOM
    m: int = 2  # edges added per joining node
    bw_dist: BandwidthDistribution = BandwidthDistribution.CONST
    bw_min: float = 10.0
    bw_max: float = 1024.0

    def __post_init__(self) -> None:
        if self.m <= 0:
            raise ValueError(f"m must be >= 1, got {self.m}")
        if self.n <= self.m:
            raise ValueError(
                f"n ({self.n}) must be greater than m ({self.m})"
            )
        if self.placement not in set(PlacementType):
            raise ValueError(f"Unsupported placement type: {self.placement}")
        if self.bw_dist not in set(BandwidthDistribution):
            raise ValueError(
                f"Unsupported bandwidth distribution: {self.bw_dist}"
            )
        if self.ls <= 0 or self.hs <= 0:
            raise ValueError(
                f"Plane scales must be positive, got hs={self.hs}, ls={self.ls}"
            )
        if self.n > self.hs * self.hs:
            raise ValueError(
                f"n ({self.n}) exceeds the {self.hs * self.hs} distinct "
                f"points of a {self.hs}x{self.hs} plane"
            )
        # ls only shapes the squares of heavy-tailed placement
        if self.placement == PlacementType.HEAVY_TAILED:
            if self.ls > self.hs:
                raise ValueError(
                    f"ls ({self.ls}) must be <= hs ({self.hs})"
                )
            side = (self.hs // self.ls) * self.ls
            if self.n > side * side:
                raise ValueError(
                    f"n ({self.n}) exceeds the {side * side} points covered "
                    f"by {self.hs // self.ls}x{self.hs // self.ls} squares "
                    f"of side {self.ls}"
                )
        if self.bw_min < 0:
            raise ValueError(f"bw_min must be >= 0, got {self.bw_min}")
        if self.bw_min > self.bw_max:
            raise ValueError(
                f"bw_min ({self.bw_min}) must be <= bw_max ({self.bw_max})"
            )


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Top-level configuration for one topology generation run."""

    topology: TopologyConfig = field(default_factory=TopologyConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()
