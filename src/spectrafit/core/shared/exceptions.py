"""Exception taxonomy for spectrafit.

This module defines a small hierarchy of exceptions so that callers can
tell configuration mistakes apart from malformed input and solver failures.
"""

from __future__ import annotations


class SpectraFitError(Exception):
    """Base class for all spectrafit-specific exceptions."""


class ConfigError(SpectraFitError):
    """Configuration-related errors (unknown shape or method, invalid options)."""


class DataError(SpectraFitError):
    """Structurally invalid spectrum or peak list."""


class DataIOError(SpectraFitError):
    """Data loading errors (files, formats, permissions)."""


class OptimizationError(SpectraFitError):
    """Errors raised by the underlying least-squares solver."""


__all__ = [
    "ConfigError",
    "DataError",
    "DataIOError",
    "OptimizationError",
    "SpectraFitError",
]
