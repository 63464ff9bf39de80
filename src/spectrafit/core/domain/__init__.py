"""Domain models: spectra, peaks and fit configuration."""

from spectrafit.core.domain.config import (
    FitOptions,
    OptimizationConfig,
    ParameterOverrides,
    ParameterPolicy,
    ShapeConfig,
)
from spectrafit.core.domain.peaks import Peak, create_peaks
from spectrafit.core.domain.spectrum import Spectrum

__all__ = [
    "FitOptions",
    "OptimizationConfig",
    "ParameterOverrides",
    "ParameterPolicy",
    "Peak",
    "ShapeConfig",
    "Spectrum",
    "create_peaks",
]
