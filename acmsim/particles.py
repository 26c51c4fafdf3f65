"""Particles of the active clock model and their spatial bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from .rng import RandomSource


class InitialCondition(IntEnum):
    """How particles are placed and oriented at the start of a run."""

    RANDOM = 0  # random positions, random states
    ORDERED = 1  # random positions, all in state 0
    BAND = 2  # transverse band, state 0
    LANE = 3  # longitudinal lane, state q/4


@dataclass(slots=True)
class Particle:
    """A particle with a position, a proposed position and a clock state."""

    x: float
    y: float
    sigma: int
    xnew: float = 0.0
    ynew: float = 0.0

    @classmethod
    def spawn(cls, init: int, q: int, lx: int, ly: int, rng: RandomSource) -> "Particle":
        """Create a particle according to the initial condition ``init``."""
        try:
            condition = InitialCondition(init)
        except ValueError:
            raise ValueError(f"bad init value: {init}") from None
        if condition is InitialCondition.RANDOM:
            x = rng.uniform() * lx
            y = rng.uniform() * ly
            sigma = int(q * rng.uniform())
        elif condition is InitialCondition.ORDERED:
            x = rng.uniform() * lx
            y = rng.uniform() * ly
            sigma = 0
        elif condition is InitialCondition.BAND:
            x = (2 + rng.uniform()) * 0.2 * lx
            y = rng.uniform() * ly
            sigma = 0
        else:
            x = (2 + rng.uniform()) * 0.2 * lx
            y = rng.uniform() * ly
            sigma = q // 4
        return cls(x, y, sigma)

    def hop_guess(
        self,
        r: float,
        epsilon: float,
        q: int,
        lx: int,
        ly: int,
        cos: Sequence[float],
        sin: Sequence[float],
        rng: RandomSource,
    ) -> None:
        """Propose a unit hop, along the own state unless ``r > epsilon``."""
        d = self.sigma
        if r > epsilon:
            d = int(q * rng.uniform())
        xnew = self.x + cos[d]
        ynew = self.y + sin[d]
        if xnew < 0:
            xnew += lx
        if xnew >= lx:
            xnew -= lx
        if ynew < 0:
            ynew += ly
        if ynew >= ly:
            ynew -= ly
        self.xnew = xnew
        self.ynew = ynew

    def hop_apply(self) -> None:
        """Move the particle to its proposed position."""
        self.x = self.xnew
        self.y = self.ynew

    def flip(self, sigma_new: int) -> None:
        self.sigma = sigma_new

    def cell(self, ly: int) -> int:
        """Index of the unit cell holding the particle."""
        return int(self.x) * ly + int(self.y)


class Sectors:
    """Indices of the particles found in each unit cell."""

    def __init__(self, ngrid: int) -> None:
        self._sectors: list[list[int]] = [[] for _ in range(ngrid)]

    def get(self, k: int) -> list[int]:
        return self._sectors[k]

    def add(self, k: int, index: int) -> None:
        self._sectors[k].append(index)

    def remove(self, k: int, index: int) -> None:
        try:
            self._sectors[k].remove(index)
        except ValueError:
            raise ValueError(f"particle {index} not found in sector {k}") from None


def distance2(part1: Particle, part2: Particle, lx: int, ly: int) -> float:
    """Squared distance between two particles in the periodic box."""
    dx = abs(part1.x - part2.x)
    dy = abs(part1.y - part2.y)
    return min(dx, lx - dx) ** 2 + min(dy, ly - dy) ** 2