"""Pure NumPy lineshape functions for spectral peak fitting.

All lineshapes here are:
- Real-valued
- Height-normalized to 1.0 at center
- Parameterized by FWHM (full width at half maximum)

Two layers are provided:

1. **Evaluators** (``GaussianEvaluator``, ``LorentzianEvaluator``,
   ``PseudoVoigtEvaluator``) compute the unit-height profile for an array of
   offsets from the peak center.
2. **Peak factories** (``gaussian``, ``lorentzian``, ``pseudovoigt``) bind a
   position, a height and a width (and a mixing fraction) and return a
   closure ``f(t)`` evaluating that single peak at abscissa ``t``.

Evaluation is vectorized with NumPy broadcasting; scalars are accepted too.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from spectrafit.core.shared.typing import FloatArray, ModelFunction

# =============================================================================
# Module-Level Constants
# =============================================================================

_LN2 = np.log(2.0)


# =============================================================================
# FWHM-Based Lineshapes (Real-valued, height-normalized)
# =============================================================================


class FWHMLineshapeEvaluator(ABC):
    """Abstract base for FWHM-based lineshapes (Lorentzian, Gaussian)."""

    @abstractmethod
    def evaluate(self, dx: FloatArray, fwhm: float) -> FloatArray:
        """Evaluate the unit-height lineshape at offsets ``dx`` from center."""
        ...


class LorentzianEvaluator(FWHMLineshapeEvaluator):
    """Lorentzian lineshape evaluator.

    L(dx) = γ² / (γ² + dx²)  where γ = fwhm/2
    """

    def evaluate(self, dx: FloatArray, fwhm: float) -> FloatArray:
        gamma = 0.5 * fwhm
        gamma2 = gamma * gamma
        return gamma2 / (gamma2 + dx * dx)


class GaussianEvaluator(FWHMLineshapeEvaluator):
    """Gaussian lineshape evaluator.

    G(dx) = exp(-c * dx²)  where c = 4*ln(2) / fwhm²
    """

    def evaluate(self, dx: FloatArray, fwhm: float) -> FloatArray:
        c = 4.0 * _LN2 / (fwhm * fwhm)
        return np.exp(-c * dx * dx)


class PseudoVoigtEvaluator:
    """Pseudo-Voigt lineshape evaluator.

    V(dx) = μ * G(dx) + (1-μ) * L(dx)

    Linear combination of Gaussian and Lorentzian; μ ∈ [0,1] is the Gaussian fraction.

    Note: Does not inherit from FWHMLineshapeEvaluator due to extra mu parameter.
    """

    def __init__(self) -> None:
        self._lorentzian = LorentzianEvaluator()
        self._gaussian = GaussianEvaluator()

    def evaluate(self, dx: FloatArray, fwhm: float, mu: float) -> FloatArray:
        lorentz = self._lorentzian.evaluate(dx, fwhm)
        gauss = self._gaussian.evaluate(dx, fwhm)
        return mu * gauss + (1.0 - mu) * lorentz


# =============================================================================
# Peak factories
# =============================================================================

_GAUSSIAN = GaussianEvaluator()
_LORENTZIAN = LorentzianEvaluator()
_PSEUDOVOIGT = PseudoVoigtEvaluator()


def gaussian(x: float, y: float, width: float) -> ModelFunction:
    """Gaussian peak centered at ``x`` with height ``y`` and FWHM ``width``.

    Args:
        x: Peak position
        y: Peak height
        width: Full width at half maximum

    Returns
    -------
        Function of the abscissa returning the peak ordinate
    """

    def evaluate(t):
        return y * _GAUSSIAN.evaluate(np.asarray(t, dtype=float) - x, width)

    return evaluate


def lorentzian(x: float, y: float, width: float) -> ModelFunction:
    """Lorentzian peak centered at ``x`` with height ``y`` and FWHM ``width``."""

    def evaluate(t):
        return y * _LORENTZIAN.evaluate(np.asarray(t, dtype=float) - x, width)

    return evaluate


def pseudovoigt(x: float, y: float, width: float, mu: float) -> ModelFunction:
    """Pseudo-Voigt peak; ``mu`` is the Gaussian fraction (1 = pure Gaussian)."""

    def evaluate(t):
        return y * _PSEUDOVOIGT.evaluate(np.asarray(t, dtype=float) - x, width, mu)

    return evaluate


__all__ = [
    "FWHMLineshapeEvaluator",
    "GaussianEvaluator",
    "LorentzianEvaluator",
    "PseudoVoigtEvaluator",
    "gaussian",
    "lorentzian",
    "pseudovoigt",
]
