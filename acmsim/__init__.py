"""Simulation of the q-state active clock model of self-propelled particles."""

__version__ = "0.1.0"
__all__ = ["__version__"]