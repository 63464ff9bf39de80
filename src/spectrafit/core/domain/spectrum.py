"""Spectrum domain model."""

from __future__ import annotations

from collections.abc import Mapping
from functools import cached_property
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from spectrafit.core.shared.exceptions import DataError


class Spectrum(BaseModel):
    """A 1D spectrum: abscissa ``x`` and ordinate ``y`` of equal length.

    Arrays are stored as private float64 copies; the caller's sequences are
    never modified.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    x: np.ndarray
    y: np.ndarray

    @field_validator("x", "y", mode="before")
    @classmethod
    def _as_array(cls, value: Any) -> np.ndarray:
        array = np.array(value, dtype=float, copy=True)
        if array.ndim != 1:
            msg = f"expected a 1D sequence, got shape {array.shape}"
            raise ValueError(msg)
        return array

    @model_validator(mode="after")
    def _check_lengths(self) -> Spectrum:
        if self.x.size != self.y.size:
            msg = f"x and y must have the same length ({self.x.size} != {self.y.size})"
            raise ValueError(msg)
        if self.x.size == 0:
            msg = "spectrum is empty"
            raise ValueError(msg)
        return self

    @classmethod
    def from_data(cls, data: Spectrum | Mapping[str, Any]) -> Spectrum:
        """Build a spectrum from a ``{"x": ..., "y": ...}`` mapping.

        Raises
        ------
            DataError: If the data is structurally invalid
        """
        if isinstance(data, Spectrum):
            return data
        try:
            return cls(x=data["x"], y=data["y"])
        except (KeyError, TypeError) as exc:
            msg = f"Spectrum data must provide 'x' and 'y': {exc}"
            raise DataError(msg) from exc
        except ValidationError as exc:
            msg = f"Invalid spectrum data: {exc}"
            raise DataError(msg) from exc

    @cached_property
    def max_y(self) -> float:
        """Maximum ordinate value."""
        return float(np.max(self.y))

    @property
    def size(self) -> int:
        return int(self.x.size)

    def normalized(self) -> Spectrum:
        """Return a copy with ``y`` divided by its maximum.

        Raises
        ------
            DataError: If the maximum is zero
        """
        if self.max_y == 0.0:
            msg = "Cannot normalize a spectrum whose maximum is zero"
            raise DataError(msg)
        return Spectrum(x=self.x, y=self.y / self.max_y)
