"""Flat parameter vectors for peak fitting.

The solver works on one contiguous buffer per quantity (initial values,
lower bounds, upper bounds, finite-difference steps). Buffers are batched by
parameter kind: all positions, then all heights, then all widths, then (for
pseudo-Voigt) all mixing fractions. ``flat_index`` is the single place where
this layout is encoded; encoding and decoding both go through it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

import numpy as np

from spectrafit.core.shared.exceptions import ConfigError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from spectrafit.core.domain.peaks import Peak
    from spectrafit.core.shared.typing import FloatArray


class ParameterKind(IntEnum):
    """Kinds of peak parameters, in batch order."""

    X = 0  # Position
    Y = 1  # Height
    WIDTH = 2  # Full width at half maximum
    MU = 3  # Pseudo-Voigt mixing fraction

    @property
    def field(self) -> str:
        """Name of the corresponding ``Peak`` field."""
        return _FIELDS[self]

    @classmethod
    def from_index(cls, index: int) -> ParameterKind:
        """Return the kind for a batch index.

        Raises
        ------
            ConfigError: If the index does not name a supported kind
        """
        try:
            return cls(index)
        except ValueError:
            msg = f"Unsupported parameter kind index: {index!r}"
            raise ConfigError(msg) from None


_FIELDS: dict[ParameterKind, str] = {
    ParameterKind.X: "x",
    ParameterKind.Y: "y",
    ParameterKind.WIDTH: "width",
    ParameterKind.MU: "mu",
}


class Quantity(str, Enum):
    """Per-parameter quantities handed to the solver."""

    INIT = "init"
    MIN = "min"
    MAX = "max"
    GRADIENT_DIFFERENCE = "gradient_difference"


def flat_index(kind: int, peak_index: int, n_peaks: int) -> int:
    """Position of parameter ``kind`` of peak ``peak_index`` in a flat vector."""
    return peak_index + int(kind) * n_peaks


@dataclass
class ParameterSpace:
    """The four flat buffers describing the optimization problem."""

    n_peaks: int
    n_params: int
    initial_values: FloatArray
    min_values: FloatArray
    max_values: FloatArray
    gradient_difference: FloatArray

    @classmethod
    def encode(
        cls,
        peaks: Sequence[Peak],
        n_params: int,
        get_value: Callable[[ParameterKind, Peak, Quantity], float],
    ) -> ParameterSpace:
        """Fill the buffers peak by peak, kind by kind.

        Args:
            peaks: Peaks in fitting order
            n_params: Parameters per peak (3 or 4)
            get_value: Resolver returning the value of one quantity
        """
        n_peaks = len(peaks)
        buffers = {quantity: np.zeros(n_peaks * n_params) for quantity in Quantity}

        for i, peak in enumerate(peaks):
            for s in range(n_params):
                kind = ParameterKind.from_index(s)
                index = flat_index(kind, i, n_peaks)
                for quantity, buffer in buffers.items():
                    buffer[index] = get_value(kind, peak, quantity)

        return cls(
            n_peaks=n_peaks,
            n_params=n_params,
            initial_values=buffers[Quantity.INIT],
            min_values=buffers[Quantity.MIN],
            max_values=buffers[Quantity.MAX],
            gradient_difference=buffers[Quantity.GRADIENT_DIFFERENCE],
        )

    @property
    def size(self) -> int:
        return self.n_peaks * self.n_params

    def decode(self, values: FloatArray, peaks: Sequence[Peak], max_y: float = 1.0) -> None:
        """Write fitted values back into ``peaks`` in place.

        The height batch is multiplied by ``max_y`` to undo normalization.
        """
        values = np.asarray(values, dtype=float)
        for i, peak in enumerate(peaks):
            for s in range(self.n_params):
                kind = ParameterKind.from_index(s)
                value = float(values[flat_index(kind, i, self.n_peaks)])
                if kind is ParameterKind.Y:
                    value *= max_y
                setattr(peak, kind.field, value)


__all__ = ["ParameterKind", "ParameterSpace", "Quantity", "flat_index"]
