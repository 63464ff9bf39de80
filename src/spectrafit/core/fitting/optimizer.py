"""Least-squares solvers for peak fitting.

This module provides thin adapters around scipy.optimize.least_squares.
Each adapter has the signature::

    solve(spectrum, model_builder, options) -> SolverResult

where ``model_builder`` turns a flat parameter vector into a model of the
abscissa and ``options`` carries the flat initial values, bounds and
finite-difference steps next to the solver settings.

The Jacobian is estimated by finite differences with the absolute,
per-parameter steps of ``options.gradient_difference``. A forward step that
would leave the bounds is taken backwards instead.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

import numpy as np
from pydantic import BaseModel, ConfigDict, Field
from scipy.optimize import least_squares

from spectrafit.core.shared.exceptions import OptimizationError

if TYPE_CHECKING:
    from spectrafit.core.domain.spectrum import Spectrum
    from spectrafit.core.shared.typing import FloatArray, ModelBuilder

logger = logging.getLogger(__name__)

LossName = Literal["linear", "soft_l1", "huber", "cauchy", "arctan"]

TIMEOUT_MESSAGE = "Timeout reached."


class SolverOptions(BaseModel):
    """Settings shared by all solvers.

    The four flat buffers are attached by the caller before solving.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    max_iterations: int = Field(default=100, gt=0, description="Maximum function evaluations.")
    error_tolerance: float = Field(default=1e-8, gt=0, description="Convergence tolerance.")
    timeout: float | None = Field(default=None, gt=0, description="Time limit in seconds.")
    central_difference: bool = Field(
        default=False, description="Use central instead of forward differences."
    )
    x_scale: float | Literal["jac"] = Field(
        default=1.0, description="Characteristic scale of the parameters."
    )

    initial_values: np.ndarray | None = Field(default=None, repr=False)
    min_values: np.ndarray | None = Field(default=None, repr=False)
    max_values: np.ndarray | None = Field(default=None, repr=False)
    gradient_difference: np.ndarray | None = Field(default=None, repr=False)


class LevenbergMarquardtOptions(SolverOptions):
    """Options for the Levenberg-Marquardt solver (MINPACK)."""


class TrustRegionOptions(SolverOptions):
    """Options for the bounded trust-region solvers (trf, dogbox)."""

    loss: LossName = "linear"


@dataclass
class SolverResult:
    """Outcome of a solver run."""

    parameter_values: FloatArray
    parameter_error: float
    iterations: int
    message: str = ""


class _SolverTimeout(Exception):
    """Raised from inside the objective when the time limit is reached."""


@dataclass
class _Objective:
    """Residuals and finite-difference Jacobian for one problem."""

    spectrum: Spectrum
    model_builder: ModelBuilder
    lower: FloatArray
    upper: FloatArray
    steps: FloatArray
    central: bool = False
    project: bool = False
    deadline: float | None = None

    n_jac: int = field(default=0, init=False)
    best_x: FloatArray | None = field(default=None, init=False, repr=False)
    best_cost: float = field(default=np.inf, init=False)

    def clip(self, p: FloatArray) -> FloatArray:
        if self.project:
            return np.clip(p, self.lower, self.upper)
        return p

    def model_residuals(self, p: FloatArray) -> FloatArray:
        model = self.model_builder(p)
        predicted = np.asarray(model(self.spectrum.x), dtype=float)
        return np.broadcast_to(predicted, self.spectrum.y.shape) - self.spectrum.y

    def residuals(self, p: FloatArray) -> FloatArray:
        if self.deadline is not None and time.monotonic() > self.deadline:
            raise _SolverTimeout

        p = self.clip(p)
        r = self.model_residuals(p)
        cost = float(r @ r)
        if cost < self.best_cost:
            self.best_cost = cost
            self.best_x = p.copy()
        return r

    def jacobian(self, p: FloatArray) -> FloatArray:
        self.n_jac += 1
        p = self.clip(np.asarray(p, dtype=float))
        jac = np.empty((self.spectrum.size, p.size))

        if self.central:
            for j, h in enumerate(self.steps):
                forward = p.copy()
                backward = p.copy()
                forward[j] = min(p[j] + h, self.upper[j])
                backward[j] = max(p[j] - h, self.lower[j])
                delta = forward[j] - backward[j]
                if delta == 0.0:
                    jac[:, j] = 0.0
                    continue
                diff = self.model_residuals(forward) - self.model_residuals(backward)
                jac[:, j] = diff / delta
            return jac

        r0 = self.model_residuals(p)
        for j, h in enumerate(self.steps):
            step = h if p[j] + h <= self.upper[j] else -h
            shifted = p.copy()
            shifted[j] += step
            jac[:, j] = (self.model_residuals(shifted) - r0) / step
        return jac


def _buffers(options: SolverOptions) -> tuple[FloatArray, FloatArray, FloatArray, FloatArray]:
    if options.initial_values is None:
        msg = "Solver options are missing initial values"
        raise OptimizationError(msg)

    x0 = np.asarray(options.initial_values, dtype=float)
    n = x0.size
    lower = np.full(n, -np.inf) if options.min_values is None else np.asarray(options.min_values)
    upper = np.full(n, np.inf) if options.max_values is None else np.asarray(options.max_values)
    if options.gradient_difference is None:
        steps = np.full(n, 1e-3)
    else:
        steps = np.asarray(options.gradient_difference, dtype=float)
    return x0, lower.astype(float), upper.astype(float), steps


def _solve(
    method: Literal["lm", "trf", "dogbox"],
    spectrum: Spectrum,
    model_builder: ModelBuilder,
    options: SolverOptions,
) -> SolverResult:
    x0, lower, upper, steps = _buffers(options)
    project = method == "lm"
    deadline = None if options.timeout is None else time.monotonic() + options.timeout

    objective = _Objective(
        spectrum=spectrum,
        model_builder=model_builder,
        lower=lower,
        upper=upper,
        steps=steps,
        central=options.central_difference,
        project=project,
        deadline=deadline,
    )

    kwargs: dict = {
        "method": method,
        "jac": objective.jacobian,
        "ftol": options.error_tolerance,
        "xtol": options.error_tolerance,
        "max_nfev": options.max_iterations,
        "x_scale": options.x_scale,
    }
    if not project:
        kwargs["bounds"] = (lower, upper)
        kwargs["loss"] = getattr(options, "loss", "linear")
        x0 = np.clip(x0, lower, upper)

    logger.debug("Running least_squares (%s) on %d parameters", method, x0.size)
    try:
        result = least_squares(objective.residuals, x0, **kwargs)
    except _SolverTimeout:
        logger.warning("Solver timed out after %.3g s; returning best parameters", options.timeout)
        values = objective.best_x if objective.best_x is not None else objective.clip(x0)
        message = TIMEOUT_MESSAGE
    except ValueError as exc:
        msg = f"Solver '{method}' failed: {exc}"
        raise OptimizationError(msg) from exc
    else:
        values = objective.clip(result.x)
        message = result.message

    residuals = objective.model_residuals(values)
    return SolverResult(
        parameter_values=np.array(values, dtype=float),
        parameter_error=float(residuals @ residuals),
        iterations=objective.n_jac,
        message=message,
    )


def levenberg_marquardt(
    spectrum: Spectrum, model_builder: ModelBuilder, options: SolverOptions
) -> SolverResult:
    """Levenberg-Marquardt (MINPACK); bounds are enforced by projection."""
    return _solve("lm", spectrum, model_builder, options)


def trust_region_reflective(
    spectrum: Spectrum, model_builder: ModelBuilder, options: SolverOptions
) -> SolverResult:
    """Trust Region Reflective with native bounds."""
    return _solve("trf", spectrum, model_builder, options)


def dogbox(spectrum: Spectrum, model_builder: ModelBuilder, options: SolverOptions) -> SolverResult:
    """Dogleg with rectangular trust regions and native bounds."""
    return _solve("dogbox", spectrum, model_builder, options)


__all__ = [
    "TIMEOUT_MESSAGE",
    "LevenbergMarquardtOptions",
    "SolverOptions",
    "SolverResult",
    "TrustRegionOptions",
    "dogbox",
    "levenberg_marquardt",
    "trust_region_reflective",
]
