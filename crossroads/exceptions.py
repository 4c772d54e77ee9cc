"""Custom exception types used across :mod:`crossroads`."""

from __future__ import annotations


class CrossroadsError(Exception):
    """Base class for all package-specific errors."""


class InputError(CrossroadsError, ValueError):
    """Raised for invalid user input such as out-of-range crossroads."""


class GraphFormatError(InputError):
    """Raised when parsing a road network fails."""


class CapacityError(InputError):
    """Raised when a road would give a crossroad more than four neighbours."""


class MissingInputError(InputError):
    """Raised when the road network file does not exist."""


class ConfigError(CrossroadsError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(CrossroadsError, RuntimeError):
    """Raised when relaxation invariants are violated at runtime."""


__all__ = [
    "CrossroadsError",
    "InputError",
    "GraphFormatError",
    "CapacityError",
    "MissingInputError",
    "ConfigError",
    "AlgorithmError",
]
