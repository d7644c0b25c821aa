"""Uniform random sources for target selection.

Interconnection only needs draws in [0, 1). Wrapping the source behind a
one-method protocol lets tests record a run's draws and replay them.
"""

from typing import Protocol, Sequence

import numpy as np


class UniformRandomSource(Protocol):
    def next(self) -> float:
        """Return a value uniformly distributed in [0, 1)."""
        ...


class GeneratorUniformSource:
    """Draws from a numpy Generator."""

    def __init__(self, rng: np.random.Generator) -> None:
        self.rng = rng

    def next(self) -> float:
        return float(self.rng.random())


class RecordingUniformSource:
    """Passes draws through from another source and keeps a copy of each."""

    def __init__(self, source: UniformRandomSource) -> None:
        self.source = source
        self.draws: list[float] = []

    def next(self) -> float:
        p = self.source.next()
        self.draws.append(p)
        return p


class ReplayUniformSource:
    """Replays a fixed sequence of draws.

    Raises:
        IndexError: When asked for more draws than were supplied.
    """

    def __init__(self, draws: Sequence[float]) -> None:
        for p in draws:
            if not 0.0 <= p < 1.0:
                raise ValueError(f"Draw {p} outside [0, 1)")
        self.draws = list(draws)
        self.position = 0

    def next(self) -> float:
        if self.position >= len(self.draws):
            raise IndexError(
                f"Replay sequence exhausted after {len(self.draws)} draws"
            )
        p = self.draws[self.position]
        self.position += 1
        return p
