"""Config package exports."""

from .schema import SolverConfig, load_config

__all__ = ["SolverConfig", "load_config"]
