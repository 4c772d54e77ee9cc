"""Public package exports for :mod:`crossroads`."""

from __future__ import annotations

from .exceptions import (
    AlgorithmError,
    CapacityError,
    ConfigError,
    CrossroadsError,
    GraphFormatError,
    InputError,
    MissingInputError,
)
from .generator import random_road_network
from .graph import EMPTY, SLOTS, RoadNetwork
from .io import format_network, parse_network, read_network, write_network
from .logger import BoundLogger, Logger, NoopLogger, StdLogger
from .path import reconstruct_path
from .solver import (
    LEGACY_UNREACHABLE,
    FordBellmanSolver,
    HopResult,
    SolverConfig,
    crossings,
    shortest_hops,
)

__version__ = "0.1.0"

__all__ = [
    "RoadNetwork",
    "SLOTS",
    "EMPTY",
    "FordBellmanSolver",
    "HopResult",
    "SolverConfig",
    "shortest_hops",
    "crossings",
    "LEGACY_UNREACHABLE",
    "reconstruct_path",
    "random_road_network",
    "parse_network",
    "read_network",
    "format_network",
    "write_network",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "BoundLogger",
    "CrossroadsError",
    "InputError",
    "GraphFormatError",
    "CapacityError",
    "MissingInputError",
    "ConfigError",
    "AlgorithmError",
]
