"""Configuration models for spectrafit.

Options are grouped the way callers think about them::

    FitOptions
    ├── shape.kind                         gaussian | lorentzian | pseudovoigt
    └── optimization
        ├── kind                           lm | trf | dogbox
        ├── parameters.{x,y,width,mu}      per-kind overrides of init/min/max/gradient_difference
        ├── {x,y,width,mu}_gradient_difference
        ├── {min,max}_factor_{x,y,width}   factors of the built-in bound formulas
        ├── {min,max}_mu_value
        └── options                        solver-specific settings

Any bound or step may be a number or a one-argument callable receiving the
``Peak`` and returning a number. Callables cannot be written to TOML.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from spectrafit.core.domain.peaks import Peak  # noqa: TC001

Resolvable = float | Callable[[Peak], float]


class ParameterPolicy(BaseModel):
    """Overrides for one parameter kind.

    Attributes
    ----------
        init: Starting value
        min: Lower bound
        max: Upper bound
        gradient_difference: Finite-difference step used by the solver
    """

    model_config = ConfigDict(extra="forbid")

    init: Resolvable | None = None
    min: Resolvable | None = None
    max: Resolvable | None = None
    gradient_difference: Resolvable | None = None

    def get(self, quantity: str) -> Resolvable | None:
        return getattr(self, quantity)


class ParameterOverrides(BaseModel):
    """Per-kind overrides: position, height, width and mixing fraction."""

    model_config = ConfigDict(extra="forbid")

    x: ParameterPolicy = Field(default_factory=ParameterPolicy)
    y: ParameterPolicy = Field(default_factory=ParameterPolicy)
    width: ParameterPolicy = Field(default_factory=ParameterPolicy)
    mu: ParameterPolicy = Field(default_factory=ParameterPolicy)

    def get(self, field: str) -> ParameterPolicy:
        return getattr(self, field)


class ShapeConfig(BaseModel):
    """Shape family used to build the composite model."""

    model_config = ConfigDict(extra="forbid")

    kind: str = Field(
        default="gaussian",
        description="Kind of shape: gaussian, lorentzian or pseudovoigt.",
    )


class OptimizationConfig(BaseModel):
    """Optimization method, parameter policies and solver options."""

    model_config = ConfigDict(extra="forbid")

    kind: str = Field(default="lm", description="Optimization method (lm, trf, dogbox).")
    parameters: ParameterOverrides = Field(default_factory=ParameterOverrides)

    x_gradient_difference: Resolvable | None = None
    y_gradient_difference: Resolvable | None = None
    width_gradient_difference: Resolvable | None = None
    mu_gradient_difference: Resolvable | None = None

    min_factor_x: float = 2.0
    max_factor_x: float = 2.0
    min_factor_y: float = 0.0
    max_factor_y: float = 1.5
    min_factor_width: float = 0.25
    max_factor_width: float = 4.0

    min_mu_value: float = 0.0
    max_mu_value: float = 1.0

    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Solver-specific settings (max_iterations, error_tolerance, timeout, ...).",
    )

    def gradient_difference(self, field: str) -> Resolvable | None:
        return getattr(self, f"{field}_gradient_difference")


class FitOptions(BaseModel):
    """Root configuration object passed to ``optimize``."""

    model_config = ConfigDict(extra="forbid")

    shape: ShapeConfig = Field(default_factory=ShapeConfig)
    optimization: OptimizationConfig = Field(default_factory=OptimizationConfig)


__all__ = [
    "FitOptions",
    "OptimizationConfig",
    "ParameterOverrides",
    "ParameterPolicy",
    "Resolvable",
    "ShapeConfig",
]
