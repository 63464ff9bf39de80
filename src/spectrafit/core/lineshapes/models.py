"""Composite spectrum models built from flat parameter vectors.

Parameters are laid out in batches by kind, not interleaved by peak. For
``n`` peaks the vector holds all positions first, then all heights, then all
widths and, for pseudo-Voigt, all mixing fractions::

    [x0 .. xn-1, y0 .. yn-1, w0 .. wn-1, (mu0 .. mun-1)]

Each builder returns a closure over a private copy of the vector, so the
returned model carries no state shared with the caller or between calls.
Vectors whose length is not a multiple of the batch count are a caller
error and are not checked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from spectrafit.core.lineshapes.functions import gaussian, lorentzian, pseudovoigt

if TYPE_CHECKING:
    from collections.abc import Sequence

    from spectrafit.core.shared.typing import FloatArray, ModelFunction


def _batches(p: Sequence[float] | FloatArray, n_params: int) -> tuple[FloatArray, int]:
    params = np.array(p, dtype=float, copy=True)
    return params, len(params) // n_params


def sum_of_gaussians(p: Sequence[float] | FloatArray) -> ModelFunction:
    """Sum of Gaussian peaks (batches: centers, heights, widths)."""
    params, n = _batches(p, 3)

    def evaluate(t):
        result = 0.0
        for i in range(n):
            result = result + gaussian(params[i], params[i + n], params[i + 2 * n])(t)
        return result

    return evaluate


def sum_of_lorentzians(p: Sequence[float] | FloatArray) -> ModelFunction:
    """Sum of Lorentzian peaks (batches: centers, heights, widths)."""
    params, n = _batches(p, 3)

    def evaluate(t):
        result = 0.0
        for i in range(n):
            result = result + lorentzian(params[i], params[i + n], params[i + 2 * n])(t)
        return result

    return evaluate


def sum_of_pseudovoigts(p: Sequence[float] | FloatArray) -> ModelFunction:
    """Sum of pseudo-Voigt peaks (batches: centers, heights, widths, mu's)."""
    params, n = _batches(p, 4)

    def evaluate(t):
        result = 0.0
        for i in range(n):
            peak = pseudovoigt(params[i], params[i + n], params[i + 2 * n], params[i + 3 * n])
            result = result + peak(t)
        return result

    return evaluate


__all__ = ["sum_of_gaussians", "sum_of_lorentzians", "sum_of_pseudovoigts"]
