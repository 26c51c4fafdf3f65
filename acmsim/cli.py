"""Command line entry point of the active clock model simulation."""

from __future__ import annotations

import os
import re
import sys

from .output import format_number
from .simulation import Parameters, Simulation, SimulationError

_INT = re.compile(r"\s*[+-]?\d+")
_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_OPTIONS = (
    ("-q=", "q", int),
    ("-beta=", "beta", float),
    ("-rho0=", "rho0", float),
    ("-epsilon=", "epsilon", float),
    ("-LX=", "lx", int),
    ("-LY=", "ly", int),
    ("-tmax=", "tmax", int),
    ("-init=", "init", int),
    ("-ran=", "ran", int),
    ("-threads=", "threads", int),
)


def _leading_number(text: str, kind: type):
    """Read the leading number of ``text``, or zero when there is none."""
    match = (_INT if kind is int else _FLOAT).match(text)
    return kind(match.group()) if match else kind(0)


def parse_args(argv) -> Parameters:
    """Build the run parameters from ``-name=value`` arguments."""
    values = {}
    for arg in argv:
        for marker, field, kind in _OPTIONS:
            if marker in arg:
                values[field] = _leading_number(arg[len(marker):], kind)
                break
        else:
            raise ValueError(f"BAD ARGUMENT : {arg}")
    return Parameters(**values)


def _describe(params: Parameters) -> str:
    fields = (
        ("q", params.q),
        ("beta", params.beta),
        ("rho0", params.rho0),
        ("epsilon", params.epsilon),
        ("LX", params.lx),
        ("LY", params.ly),
        ("tmax", params.tmax),
        ("init", params.init),
        ("ran", params.ran),
        ("threads", params.threads),
    )
    return "Parameters: " + " ".join(f"-{k}={format_number(v)}" for k, v in fields)


def main(argv=None) -> int:
    """Run a simulation in the current directory."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        params = parse_args(argv)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(_describe(params))
    print(
        f"{os.cpu_count()} maximum threads on this node. "
        f"{params.threads} threads will be used."
    )
    try:
        Simulation(params).run(".", print)
    except SimulationError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())