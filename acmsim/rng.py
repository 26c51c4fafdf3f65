"""Random number source used throughout the simulation."""

from __future__ import annotations

import math
import random


class RandomSource:
    """Mersenne-Twister based generator of uniform and Gaussian variates.

    Uniform numbers are strictly positive and strictly below one, so they can
    safely be fed into logarithms. Gaussian numbers are produced in pairs by
    the Box-Muller transform; the second value of each pair is cached.
    """

    def __init__(self, seed: int | None = 0) -> None:
        self._rng = random.Random()
        self._cached_gaussian: float | None = None
        self.seed(seed)

    def seed(self, seed: int | None) -> None:
        """Reset the generator to the state given by ``seed``."""
        self._rng.seed(seed)
        self._cached_gaussian = None

    def uniform(self) -> float:
        """Return a uniform number in the open interval (0, 1)."""
        while True:
            r = self._rng.random()
            if r != 0.0:
                return r

    def gaussian(self) -> float:
        """Return a standard normal number."""
        if self._cached_gaussian is not None:
            value = self._cached_gaussian
            self._cached_gaussian = None
            return value
        phi = 2.0 * math.pi * self.uniform()
        psi = self.uniform()
        rad = math.sqrt(-2.0 * math.log(psi))
        self._cached_gaussian = rad * math.sin(phi)
        return rad * math.cos(phi)