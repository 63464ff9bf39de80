"""spectrafit - Fit spectra to sums of Gaussian, Lorentzian and pseudo-Voigt peaks.

Public API:
    - optimize: Fit a spectrum from initial peak guesses
    - simulate_spectrum: Evaluate a peak list on an abscissa

Configuration:
    - FitOptions: Root configuration object

Domain Objects:
    - Spectrum, Peak, FitResult
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from spectrafit.core.domain.config import FitOptions
from spectrafit.core.domain.peaks import Peak
from spectrafit.core.domain.spectrum import Spectrum
from spectrafit.core.fitting.optimize import FitResult, optimize
from spectrafit.core.fitting.simulation import simulate_spectrum
from spectrafit.core.shared.exceptions import (
    ConfigError,
    DataError,
    DataIOError,
    OptimizationError,
    SpectraFitError,
)

__all__ = [
    # Version
    "__version__",
    # Fitting
    "optimize",
    "simulate_spectrum",
    "FitResult",
    # Configuration
    "FitOptions",
    # Domain
    "Peak",
    "Spectrum",
    # Errors
    "ConfigError",
    "DataError",
    "DataIOError",
    "OptimizationError",
    "SpectraFitError",
]
