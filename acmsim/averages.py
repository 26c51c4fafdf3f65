"""Number and magnetisation fluctuations in random sub-boxes."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterator

import numpy as np

from .rng import RandomSource

_BOXES_PER_SIZE = 10


def grid_average(values) -> float:
    """Mean of a field over the whole lattice."""
    return float(np.mean(np.asarray(values, dtype=float)))


def _fmt(value: float) -> str:
    return f"{value:.6g}"


class Averages:
    """Accumulates density and magnetisation statistics over box sizes.

    Fields are indexed ``[x, y]`` on an ``lx`` by ``ly`` lattice (a flat
    array in ``x * ly + y`` order is accepted too). Boxes of size
    ``rx*l`` by ``ry*l`` are sampled for every ``l`` in ``1 .. l0-1``.
    """

    def __init__(self, lx: int, ly: int) -> None:
        self.lx = lx
        self.ly = ly
        self.l0 = min(lx, ly)
        self.rx = max(1, lx // ly)
        self.ry = max(1, ly // lx)
        self.n = [0.0] * self.l0
        self.n2 = [0.0] * self.l0
        self.m = [0.0] * self.l0
        self.m2 = [0.0] * self.l0
        self.nav = 0

    def _grid(self, values, dtype) -> np.ndarray:
        array = np.asarray(values, dtype=dtype)
        if array.size != self.lx * self.ly:
            raise ValueError(
                f"field has {array.size} cells, expected {self.lx * self.ly}"
            )
        return array.reshape(self.lx, self.ly)

    def update(self, rho, mx, my, rng: RandomSource) -> None:
        """Add one sample of every box size to the accumulated statistics."""
        rho_grid = self._grid(rho, np.int64)
        mx_grid = self._grid(mx, float)
        my_grid = self._grid(my, float)
        for size in range(1, self.l0):
            wx, wy = self.rx * size, self.ry * size
            for _ in range(_BOXES_PER_SIZE):
                x0 = int((self.lx - wx) * rng.uniform())
                y0 = int((self.ly - wy) * rng.uniform())
                box = (slice(x0, x0 + wx), slice(y0, y0 + wy))
                count = int(rho_grid[box].sum())
                bx = float(mx_grid[box].sum())
                by = float(my_grid[box].sum())
                mag2 = bx * bx + by * by
                self.n[size] += count / _BOXES_PER_SIZE
                self.n2[size] += count * count / _BOXES_PER_SIZE
                self.m[size] += math.sqrt(mag2) / _BOXES_PER_SIZE
                self.m2[size] += mag2 / _BOXES_PER_SIZE
        self.nav += 1

    def rows(self) -> Iterator[tuple[int, float, float, float, float]]:
        """Yield ``(l, <n>, var n, <m>, var m)`` for every box size."""
        if self.nav == 0:
            raise ValueError("no averages accumulated")
        for size in range(1, self.l0):
            n = self.n[size] / self.nav
            m = self.m[size] / self.nav
            yield (
                size,
                n,
                self.n2[size] / self.nav - n * n,
                m,
                self.m2[size] / self.nav - m * m,
            )

    def write(self, path) -> None:
        """Write the accumulated statistics to a text file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = [f"#The number of averages are: {self.nav}"]
        lines.extend(
            " ".join([str(size)] + [_fmt(v) for v in values])
            for size, *values in self.rows()
        )
        path.write_text("\n".join(lines) + "\n")