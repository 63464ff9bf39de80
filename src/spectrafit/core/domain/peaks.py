"""Peak domain model."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from spectrafit.core.shared.exceptions import DataError

PEAK_FIELDS = ("x", "y", "width", "mu")
OVERRIDE_QUANTITIES = ("init", "min", "max", "gradient_difference")


class Peak(BaseModel):
    """Initial guess (or fitted result) for one peak.

    Besides the shape parameters, a peak may carry literal per-peak overrides
    named ``{field}_{quantity}``, e.g. ``x_max`` or ``width_gradient_difference``.
    Height overrides (``y_*``) are given in data units. Unknown fields are
    kept as-is so that caller metadata (names, assignments) survives a fit.
    """

    model_config = ConfigDict(extra="allow")

    x: float
    y: float
    width: float
    mu: float | None = None

    x_init: float | None = None
    x_min: float | None = None
    x_max: float | None = None
    x_gradient_difference: float | None = None

    y_init: float | None = None
    y_min: float | None = None
    y_max: float | None = None
    y_gradient_difference: float | None = None

    width_init: float | None = None
    width_min: float | None = None
    width_max: float | None = None
    width_gradient_difference: float | None = None

    mu_init: float | None = None
    mu_min: float | None = None
    mu_max: float | None = None
    mu_gradient_difference: float | None = None

    def override(self, field: str, quantity: str) -> float | None:
        """Return the per-peak override for a parameter, if any."""
        return getattr(self, f"{field}_{quantity}", None)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with unset overrides dropped."""
        return self.model_dump(exclude_none=True)


def create_peaks(peaks: Iterable[Peak | Mapping[str, Any]]) -> list[Peak]:
    """Validate a peak list into fresh ``Peak`` objects.

    The returned peaks never alias the caller's objects: existing ``Peak``
    instances and mappings (extra fields included) are deep-copied.

    Raises
    ------
        DataError: If the list is empty or a peak is malformed
    """
    result: list[Peak] = []
    for index, peak in enumerate(peaks):
        try:
            if isinstance(peak, Peak):
                result.append(peak.model_copy(deep=True))
            else:
                result.append(Peak.model_validate(copy.deepcopy(dict(peak))))
        except (ValidationError, TypeError, ValueError) as exc:
            msg = f"Invalid peak at index {index}: {exc}"
            raise DataError(msg) from exc

    if not result:
        msg = "Peak list is empty"
        raise DataError(msg)
    return result
