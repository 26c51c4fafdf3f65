from pathlib import Path

import pytest

from acmsim.cli import main, parse_args
from acmsim.simulation import Parameters


def test_no_arguments_gives_defaults():
    assert parse_args([]) == Parameters()


def test_all_options():
    params = parse_args(
        [
            "-q=6",
            "-beta=1.5",
            "-rho0=0.5",
            "-epsilon=0.3",
            "-LX=20",
            "-LY=10",
            "-tmax=7",
            "-init=1",
            "-ran=3",
            "-threads=2",
        ]
    )
    assert params == Parameters(
        q=6, beta=1.5, rho0=0.5, epsilon=0.3, lx=20, ly=10, tmax=7, init=1, ran=3, threads=2
    )


def test_lenient_numbers():
    params = parse_args(["-LX=12abc", "-beta=0.75x"])
    assert params.lx == 12
    assert params.beta == 0.75


def test_bad_argument():
    with pytest.raises(ValueError, match="BAD ARGUMENT"):
        parse_args(["-foo=1"])


def test_bad_epsilon():
    with pytest.raises(ValueError):
        parse_args(["-epsilon=2"])


def test_main_runs(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-LX=4", "-LY=4", "-tmax=2", "-rho0=1", "-threads=2"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Parameters: -q=4 -beta=2")
    assert "time=2 -rho=1" in out
    files = list(Path("data_ACM_averages").glob("ACM_AVERAGES_*.txt"))
    assert len(files) == 1
    assert len(files[0].read_text().splitlines()) == 2


def test_main_bad_argument(capsys):
    assert main(["-foo"]) == 1
    assert "BAD ARGUMENT : -foo" in capsys.readouterr().err