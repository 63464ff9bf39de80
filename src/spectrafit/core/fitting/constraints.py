"""Layered parameter policies for peak fitting.

Every (parameter kind, quantity) pair resolves to a number for a given
peak. Values come from three layers; the first one that is set wins:

1. Per-peak literal fields (``peak.x_max``, ``peak.width_gradient_difference``, ...)
2. Options (``optimization.parameters.<kind>.<quantity>``, then
   ``optimization.<kind>_gradient_difference`` for steps)
3. Built-in defaults, relative to the peak's own width

The option and default layers are merged key by key into a policy table
(``dict[ParameterKind, dict[Quantity, Resolvable]]``) where each entry is a
number or a callable of the peak. ``resolve`` is the only interpreter of
those entries. Height values supplied by the caller are in data units and
are scaled by ``1 / max_y``; built-in height defaults are already normalized.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from spectrafit.core.fitting.parameters import ParameterKind, Quantity
from spectrafit.core.shared.exceptions import ConfigError

if TYPE_CHECKING:
    from spectrafit.core.domain.config import OptimizationConfig, Resolvable
    from spectrafit.core.domain.peaks import Peak

logger = logging.getLogger(__name__)

PolicyTable = dict[ParameterKind, dict[Quantity, "Resolvable"]]

# Finite-difference step for position and width, as a fraction of the width
WIDTH_STEP_FRACTION = 1.0 / 2000.0
DEFAULT_HEIGHT_STEP = 1e-3
DEFAULT_MU_STEP = 0.01
DEFAULT_MU = 0.5


def resolve(value: Resolvable, peak: Peak) -> float:
    """Evaluate one policy entry for ``peak``."""
    if callable(value):
        return float(value(peak))
    return float(value)


def _scaled(value: Resolvable, factor: float) -> Resolvable:
    if callable(value):
        return lambda peak: resolve(value, peak) * factor
    return float(value) * factor


def default_policy(config: OptimizationConfig, max_y: float) -> PolicyTable:
    """Built-in policy table for the given factors and spectrum maximum."""
    min_fx, max_fx = config.min_factor_x, config.max_factor_x
    min_fy, max_fy = config.min_factor_y, config.max_factor_y
    min_fw, max_fw = config.min_factor_width, config.max_factor_width

    return {
        ParameterKind.X: {
            Quantity.INIT: lambda peak: peak.x,
            Quantity.MIN: lambda peak: peak.x - peak.width * min_fx,
            Quantity.MAX: lambda peak: peak.x + peak.width * max_fx,
            Quantity.GRADIENT_DIFFERENCE: lambda peak: peak.width * WIDTH_STEP_FRACTION,
        },
        ParameterKind.Y: {
            Quantity.INIT: lambda peak: peak.y / max_y,
            Quantity.MIN: lambda peak: peak.y / max_y * min_fy,
            Quantity.MAX: lambda peak: peak.y / max_y * max_fy,
            Quantity.GRADIENT_DIFFERENCE: DEFAULT_HEIGHT_STEP,
        },
        ParameterKind.WIDTH: {
            Quantity.INIT: lambda peak: peak.width,
            Quantity.MIN: lambda peak: peak.width * min_fw,
            Quantity.MAX: lambda peak: peak.width * max_fw,
            Quantity.GRADIENT_DIFFERENCE: lambda peak: peak.width * WIDTH_STEP_FRACTION,
        },
        ParameterKind.MU: {
            Quantity.INIT: lambda peak: peak.mu or DEFAULT_MU,
            Quantity.MIN: config.min_mu_value,
            Quantity.MAX: config.max_mu_value,
            Quantity.GRADIENT_DIFFERENCE: DEFAULT_MU_STEP,
        },
    }


def build_policy(config: OptimizationConfig, max_y: float) -> PolicyTable:
    """Merge option overrides into the default policy table, key by key."""
    policy = default_policy(config, max_y)

    for kind, entries in policy.items():
        overrides = config.parameters.get(kind.field)
        for quantity in Quantity:
            value = overrides.get(quantity.value)
            if value is None and quantity is Quantity.GRADIENT_DIFFERENCE:
                value = config.gradient_difference(kind.field)
            if value is None:
                continue
            logger.debug("Option override for %s.%s", kind.field, quantity.value)
            entries[quantity] = _scaled(value, 1.0 / max_y) if kind is ParameterKind.Y else value

    return policy


@dataclass
class ParameterResolver:
    """Resolve per-parameter numbers for peaks from a policy table."""

    policy: PolicyTable
    max_y: float = 1.0

    def get_value(self, kind: int, peak: Peak, quantity: Quantity | str) -> float:
        """Value of ``quantity`` for parameter ``kind`` of ``peak``.

        Raises
        ------
            ConfigError: For an unsupported kind index or quantity
        """
        kind = ParameterKind.from_index(kind)
        try:
            quantity = Quantity(quantity)
        except ValueError:
            msg = f"Unsupported parameter quantity: {quantity!r}"
            raise ConfigError(msg) from None

        local = peak.override(kind.field, quantity.value)
        if local is not None:
            return float(local) / self.max_y if kind is ParameterKind.Y else float(local)
        return resolve(self.policy[kind][quantity], peak)


__all__ = [
    "ParameterResolver",
    "PolicyTable",
    "build_policy",
    "default_policy",
    "resolve",
]
