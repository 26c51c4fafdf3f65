import math

import numpy as np
import pytest

from acmsim.output import (
    RunNaming,
    export_dynamics,
    export_particles,
    format_number,
)
from acmsim.particles import Particle


@pytest.fixture
def naming():
    return RunNaming(q=4, beta=2.0, epsilon=0.2, rho0=1.5, lx=400, ly=50, init=0, ran=0)


@pytest.mark.parametrize(
    "value, text",
    [(2.0, "2"), (1.5, "1.5"), (0.2, "0.2"), (4, "4"), (1000000, "1000000")],
)
def test_format_number(value, text):
    assert format_number(value) == text


def test_stem(naming):
    assert naming.stem() == "q=4_beta=2_epsilon=0.2_rho0=1.5_LX=400_LY=50_init=0_ran=0"


def test_paths(naming, tmp_path):
    stem = naming.stem()
    assert naming.averages_path(tmp_path) == (
        tmp_path / "data_ACM_averages" / f"ACM_AVERAGES_{stem}.txt"
    )
    assert naming.fluctuations_path(tmp_path) == (
        tmp_path / "data_ACM_averages" / f"ACM_fluctuations_{stem}.txt"
    )
    assert naming.rho_path(tmp_path, 500).name == f"ACM_RHO_{stem}_t=500.bin"
    assert naming.theta_path(tmp_path, 500).name == f"ACM_THETA_{stem}_t=500.bin"
    assert naming.rho_path(tmp_path, 500).parent.name == "data_ACM_dynamics2d"
    particles = naming.particles_path(tmp_path, 7)
    assert particles.parent.name == "data_ACM_particles"
    assert particles.name == f"ACM_particles_{stem}_t=7.bin"


def test_export_dynamics_round_trip(tmp_path):
    rho = np.arange(6).reshape(2, 3)
    mx = np.linspace(-1.0, 1.0, 6).reshape(2, 3)
    my = np.linspace(0.5, -0.5, 6).reshape(2, 3)
    rho_path = tmp_path / "a" / "rho.bin"
    theta_path = tmp_path / "b" / "theta.bin"
    export_dynamics(rho, mx, my, rho_path, theta_path)

    density = np.fromfile(rho_path, dtype=np.int16).reshape(3, 2)
    theta = np.fromfile(theta_path, dtype=np.float32).reshape(3, 2)
    assert np.array_equal(density, rho.T)
    assert np.allclose(theta, np.arctan2(my, mx).T, atol=1e-6)


def test_export_dynamics_rejects_flat_fields(tmp_path):
    with pytest.raises(ValueError):
        export_dynamics([1, 2], [0.0, 0.0], [0.0, 0.0], tmp_path / "r", tmp_path / "t")


def test_export_particles_round_trip(tmp_path):
    particles = [Particle(1.25, 3.5, 0), Particle(0.5, 2.0, 1), Particle(9.75, 0.0, 3)]
    path = tmp_path / "out" / "particles.bin"
    export_particles(particles, 4, path)

    data = np.fromfile(path, dtype=np.float32).reshape(-1, 3)
    assert data.shape == (3, 3)
    assert np.allclose(data[:, 0], [p.x for p in particles])
    assert np.allclose(data[:, 1], [p.y for p in particles])
    assert np.allclose(data[:, 2], [2 * math.pi * p.sigma / 4 for p in particles], atol=1e-6)


def test_export_particles_empty(tmp_path):
    path = tmp_path / "empty.bin"
    export_particles([], 4, path)
    assert path.read_bytes() == b""