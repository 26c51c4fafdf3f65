"""File naming and binary snapshots of a simulation run."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import numpy as np

from .particles import Particle

_AVERAGES_DIR = "data_ACM_averages"
_DYNAMICS_DIR = "data_ACM_dynamics2d"
_PARTICLES_DIR = "data_ACM_particles"


def format_number(value) -> str:
    """Format a number the way a default six-digit stream does."""
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return str(int(value))
    return f"{float(value):.6g}"


@dataclass(frozen=True)
class RunNaming:
    """Parameters that identify a run in the names of its output files."""

    q: int
    beta: float
    epsilon: float
    rho0: float
    lx: int
    ly: int
    init: int
    ran: int

    def stem(self) -> str:
        """Common part of every output file name."""
        fields = (
            ("q", self.q),
            ("beta", self.beta),
            ("epsilon", self.epsilon),
            ("rho0", self.rho0),
            ("LX", self.lx),
            ("LY", self.ly),
            ("init", self.init),
            ("ran", self.ran),
        )
        return "_".join(f"{name}={format_number(value)}" for name, value in fields)

    def averages_path(self, root) -> Path:
        return Path(root) / _AVERAGES_DIR / f"ACM_AVERAGES_{self.stem()}.txt"

    def fluctuations_path(self, root) -> Path:
        return Path(root) / _AVERAGES_DIR / f"ACM_fluctuations_{self.stem()}.txt"

    def rho_path(self, root, t: int) -> Path:
        return Path(root) / _DYNAMICS_DIR / f"ACM_RHO_{self.stem()}_t={t}.bin"

    def theta_path(self, root, t: int) -> Path:
        return Path(root) / _DYNAMICS_DIR / f"ACM_THETA_{self.stem()}_t={t}.bin"

    def particles_path(self, root, t: int) -> Path:
        return Path(root) / _PARTICLES_DIR / f"ACM_particles_{self.stem()}_t={t}.bin"


def export_dynamics(rho, mx, my, rho_path, theta_path) -> None:
    """Write density (int16) and mean orientation (float32) fields.

    The fields are ``lx`` by ``ly`` arrays indexed ``[x, y]``; the files hold
    them row by row in ``y`` (index ``y * lx + x``).
    """
    rho = np.asarray(rho)
    mx = np.asarray(mx, dtype=float)
    my = np.asarray(my, dtype=float)
    if rho.ndim != 2 or rho.shape != mx.shape or rho.shape != my.shape:
        raise ValueError("fields must be two-dimensional arrays of equal shape")
    density = np.ascontiguousarray(rho.T, dtype=np.int16)
    theta = np.ascontiguousarray(np.arctan2(my, mx).T, dtype=np.float32)
    for path, data in ((Path(rho_path), density), (Path(theta_path), theta)):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data.tobytes())


def export_particles(particles: Iterable[Particle], q: int, path) -> None:
    """Write ``x, y, phi`` of every particle as three float32 values."""
    dphi = np.float32(2.0 * math.pi / q)
    records = [
        (np.float32(p.x), np.float32(p.y), np.float32(dphi * np.float32(p.sigma)))
        for p in particles
    ]
    data = np.array(records, dtype=np.float32).reshape(-1, 3)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data.tobytes())