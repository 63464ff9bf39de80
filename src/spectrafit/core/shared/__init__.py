"""Shared foundational utilities for spectrafit."""

from spectrafit.core.shared import typing
from spectrafit.core.shared.exceptions import (
    ConfigError,
    DataError,
    DataIOError,
    OptimizationError,
    SpectraFitError,
)

__all__ = [
    "ConfigError",
    "DataError",
    "DataIOError",
    "OptimizationError",
    "SpectraFitError",
    "typing",
]
