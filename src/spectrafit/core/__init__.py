"""Core module for spectrafit - contains data models and fitting logic."""

from spectrafit.core.domain import FitOptions, Peak, Spectrum
from spectrafit.core.fitting import FitResult, optimize, simulate_spectrum

__all__ = ["FitOptions", "FitResult", "Peak", "Spectrum", "optimize", "simulate_spectrum"]
