"""Simulate spectra from peak lists."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from spectrafit.core.domain.peaks import create_peaks
from spectrafit.core.fitting.constraints import DEFAULT_MU
from spectrafit.core.fitting.parameters import ParameterKind, flat_index
from spectrafit.core.lineshapes.registry import get_shape

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from spectrafit.core.domain.peaks import Peak
    from spectrafit.core.shared.typing import FloatArray


def peaks_to_vector(peaks: Iterable[Peak | Mapping[str, Any]], n_params: int) -> FloatArray:
    """Pack peaks into a flat, kind-batched vector in data units."""
    peak_list = create_peaks(peaks)
    n_peaks = len(peak_list)
    vector = np.zeros(n_peaks * n_params)
    for i, peak in enumerate(peak_list):
        for s in range(n_params):
            kind = ParameterKind.from_index(s)
            value = getattr(peak, kind.field)
            if value is None:
                value = DEFAULT_MU
            vector[flat_index(kind, i, n_peaks)] = value
    return vector


def simulate_spectrum(
    x: Iterable[float] | FloatArray,
    peaks: Iterable[Peak | Mapping[str, Any]],
    shape: str = "gaussian",
) -> FloatArray:
    """Evaluate the sum of ``peaks`` on the abscissa ``x``.

    Args:
        x: Abscissa values
        peaks: Peaks ``{x, y, width[, mu]}``; missing ``mu`` defaults to 0.5
        shape: Shape family name

    Returns
    -------
        Ordinate values, same length as ``x``
    """
    kind = get_shape(shape)
    abscissa = np.asarray(x, dtype=float)
    model = kind.model(peaks_to_vector(peaks, kind.n_params))
    return np.broadcast_to(np.asarray(model(abscissa), dtype=float), abscissa.shape).copy()


__all__ = ["peaks_to_vector", "simulate_spectrum"]
