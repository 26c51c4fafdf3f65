"""Kinetic Monte Carlo dynamics of the q-state active clock model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import numpy as np

from .averages import Averages, grid_average
from .output import RunNaming, export_dynamics, export_particles, format_number
from .particles import InitialCondition, Particle, Sectors, distance2
from .rng import RandomSource
from .timing import RunTimer

_EXPORT_EVERY = 500
_T_EQUILIBRIUM = 5000


class SimulationError(RuntimeError):
    """Raised when the dynamics cannot proceed with the chosen parameters."""


@dataclass(frozen=True)
class Parameters:
    """Physical and numerical parameters of a run."""

    q: int = 4
    beta: float = 2.0
    rho0: float = 1.5
    epsilon: float = 0.2
    lx: int = 400
    ly: int = 50
    tmax: int = 1_000_000
    init: int = 0
    ran: int = 0
    threads: int = 4
    d0: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.epsilon <= 1.0:
            raise ValueError(f"epsilon must lie in [0, 1], got {self.epsilon}")
        if self.q < 2:
            raise ValueError(f"q must be at least 2, got {self.q}")
        if self.lx < 1 or self.ly < 1:
            raise ValueError(f"box size must be positive, got {self.lx}x{self.ly}")
        if self.threads < 1:
            raise ValueError(f"threads must be positive, got {self.threads}")
        if self.rho0 < 0:
            raise ValueError(f"rho0 must not be negative, got {self.rho0}")
        if self.init not in {c.value for c in InitialCondition}:
            raise ValueError(f"bad init value: {self.init}")

    @property
    def npart(self) -> int:
        """Total number of particles."""
        return int(self.lx * self.ly * self.rho0)

    @property
    def naming(self) -> RunNaming:
        return RunNaming(
            q=self.q,
            beta=self.beta,
            epsilon=self.epsilon,
            rho0=self.rho0,
            lx=self.lx,
            ly=self.ly,
            init=self.init,
            ran=self.ran,
        )


class Simulation:
    """State of the particle system and its time evolution."""

    def __init__(self, params: Parameters, rng: RandomSource | None = None) -> None:
        self.params = params
        self.rng = rng if rng is not None else RandomSource(params.threads * params.ran)
        q, lx, ly = params.q, params.lx, params.ly

        angles = [2 * math.pi * s / q for s in range(q)]
        self.cos = [math.cos(a) for a in angles]
        self.sin = [math.sin(a) for a in angles]
        self.cos_diff = [
            [c1 * c2 + s1 * s2 for c2, s2 in zip(self.cos, self.sin)]
            for c1, s1 in zip(self.cos, self.sin)
        ]

        ncells = lx * ly
        self.sectors = Sectors(ncells)
        self.rho = [0] * ncells
        self.mx = [0.0] * ncells
        self.my = [0.0] * ncells
        self.particles: list[Particle] = []
        for index in range(params.npart):
            part = Particle.spawn(params.init, q, lx, ly, self.rng)
            k0 = part.cell(ly)
            self.sectors.add(k0, index)
            self.rho[k0] += 1
            self.mx[k0] += self.cos[part.sigma]
            self.my[k0] += self.sin[part.sigma]
            self.particles.append(part)

        self.delta_t = 1.0 / (params.d0 + math.exp(2 * params.beta))
        self.proba_hop = params.d0 * self.delta_t

        per_chunk, extra = divmod(len(self.particles), params.threads)
        self._chunks: list[tuple[int, int]] = []
        start = 0
        for k in range(params.threads):
            size = per_chunk + (k < extra)
            self._chunks.append((start, size))
            start += size

    def _neighbour_cells(self, x0: int, y0: int) -> list[int]:
        lx, ly = self.params.lx, self.params.ly
        xs = ((x0 - 1) % lx, x0, (x0 + 1) % lx)
        ys = ((y0 - 1) % ly, y0, (y0 + 1) % ly)
        return [x * ly + y for x in xs for y in ys]

    def _update(self, j: int) -> None:
        params = self.params
        q, lx, ly, beta = params.q, params.lx, params.ly, params.beta
        rng = self.rng
        part = self.particles[j]
        x0, y0, sigma0 = int(part.x), int(part.y), part.sigma
        k0 = x0 * ly + y0

        sigma = int((q - 1) * rng.uniform())
        if sigma >= sigma0:
            sigma += 1

        rhoj = 1
        delta_h = 0.0
        row_new, row_old = self.cos_diff[sigma], self.cos_diff[sigma0]
        for kn in self._neighbour_cells(x0, y0):
            for k in self.sectors.get(kn):
                other = self.particles[k]
                if k != j and distance2(part, other, lx, ly) < 1:
                    delta_h += row_new[other.sigma] - row_old[other.sigma]
                    rhoj += 1

        proba_flip = math.exp(beta * delta_h / rhoj) * self.delta_t
        if self.proba_hop + proba_flip > 1:
            raise SimulationError(
                "the probability to wait is negative: "
                f"proba_hop={self.proba_hop} proba_flip={proba_flip}"
            )

        r = rng.uniform()
        if r < self.proba_hop:
            part.hop_guess(
                r / self.proba_hop, params.epsilon, q, lx, ly, self.cos, self.sin, rng
            )
            k_new = int(part.xnew) * ly + int(part.ynew)
            part.hop_apply()
            if k_new != k0:
                self.sectors.remove(k0, j)
                self.rho[k0] -= 1
                self.mx[k0] -= self.cos[sigma0]
                self.my[k0] -= self.sin[sigma0]
                self.sectors.add(k_new, j)
                self.rho[k_new] += 1
                self.mx[k_new] += self.cos[sigma0]
                self.my[k_new] += self.sin[sigma0]
        elif r < self.proba_hop + proba_flip:
            part.flip(sigma)
            self.mx[k0] += self.cos[sigma] - self.cos[sigma0]
            self.my[k0] += self.sin[sigma] - self.sin[sigma0]

    def step(self) -> None:
        """Advance by one time step: one update attempt per particle."""
        for start, size in self._chunks:
            for _ in range(size):
                self._update(start + int(size * self.rng.uniform()))

    def observables(self) -> tuple[float, float, float, float, float]:
        """Return mean density, magnetisation, its angle and its components."""
        rho = grid_average(self.rho)
        mx = grid_average(self.mx)
        my = grid_average(self.my)
        return rho, math.hypot(mx, my), math.atan2(my, mx), mx, my

    def _grids(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        shape = (self.params.lx, self.params.ly)
        return (
            np.asarray(self.rho).reshape(shape),
            np.asarray(self.mx).reshape(shape),
            np.asarray(self.my).reshape(shape),
        )

    def run(self, root=".", log: Callable[[str], object] = print) -> None:
        """Evolve up to ``tmax``, writing averages and snapshots under ``root``."""
        params = self.params
        root = Path(root)
        naming = params.naming
        timer = RunTimer()
        averages = Averages(params.lx, params.ly)
        interval = max(1, params.tmax // 100)

        path = naming.averages_path(root)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w") as handle:
            for t in range(params.tmax + 1):
                if t % _EXPORT_EVERY == 0 or t == params.tmax:
                    rho, mag, phi, mx, my = self.observables()
                    handle.write(
                        " ".join(format_number(v) for v in (t, rho, mag, phi, mx, my))
                        + "\n"
                    )
                    handle.flush()
                    log(
                        f"time={t} -rho={format_number(rho)} -mag={format_number(mag)}"
                        f" -phi={format_number(phi)}" + timer.format(" ")
                    )
                    rho_grid, mx_grid, my_grid = self._grids()
                    export_dynamics(
                        rho_grid,
                        mx_grid,
                        my_grid,
                        naming.rho_path(root, t),
                        naming.theta_path(root, t),
                    )
                    export_particles(self.particles, params.q, naming.particles_path(root, t))
                if t > _T_EQUILIBRIUM:
                    averages.update(self.rho, self.mx, self.my, self.rng)
                if averages.nav > 0 and (t % interval == 0 or t == params.tmax):
                    averages.write(naming.fluctuations_path(root))
                self.step()