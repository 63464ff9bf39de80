"""Fit a spectrum to a sum of peak shapes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from spectrafit.core.fitting.builder import check_input
from spectrafit.core.fitting.parameters import ParameterSpace

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from spectrafit.core.domain.peaks import Peak
    from spectrafit.core.domain.spectrum import Spectrum
    from spectrafit.core.fitting.builder import OptionsLike

logger = logging.getLogger(__name__)


@dataclass
class FitResult:
    """Result of a fit.

    Attributes
    ----------
        error: Sum of squared residuals on the normalized spectrum
        iterations: Number of solver iterations (Jacobian evaluations)
        peaks: Fitted peaks, in input order, heights in data units
        message: Termination message from the solver
    """

    error: float
    iterations: int
    peaks: list[Peak] = field(default_factory=list)
    message: str = ""

    def as_dict(self) -> dict[str, Any]:
        return {
            "error": self.error,
            "iterations": self.iterations,
            "peaks": [peak.to_dict() for peak in self.peaks],
        }


def optimize(
    data: Spectrum | Mapping[str, Any],
    peaks: Iterable[Peak | Mapping[str, Any]],
    options: OptionsLike = None,
) -> FitResult:
    """Fit ``data`` to the sum of the shapes described by ``peaks``.

    Args:
        data: ``{"x": ..., "y": ...}`` or a ``Spectrum``
        peaks: Initial guesses ``{x, y, width[, mu]}`` (plus optional overrides)
        options: ``FitOptions`` or an equivalent mapping; see
            ``spectrafit.core.domain.config`` for the recognized keys

    Returns
    -------
        FitResult with new peak objects; the input peaks are not modified

    Raises
    ------
        ConfigError: Unknown shape or method, or invalid (solver) options
        DataError: Structurally invalid spectrum or peak list
        OptimizationError: The solver rejected the problem
    """
    problem = check_input(data, peaks, options)

    space = ParameterSpace.encode(problem.peaks, problem.n_params, problem.resolver.get_value)

    solver_options = problem.solver_options
    solver_options.initial_values = space.initial_values
    solver_options.min_values = space.min_values
    solver_options.max_values = space.max_values
    solver_options.gradient_difference = space.gradient_difference

    result = problem.solve(problem.spectrum, problem.model, solver_options)

    space.decode(result.parameter_values, problem.peaks, problem.max_y)

    logger.info(
        "Fitted %d %s peak(s) with '%s': error=%.4g, iterations=%d",
        space.n_peaks,
        problem.shape.name,
        problem.method.name,
        result.parameter_error,
        result.iterations,
    )

    return FitResult(
        error=result.parameter_error,
        iterations=result.iterations,
        peaks=problem.peaks,
        message=result.message,
    )


__all__ = ["FitResult", "optimize"]
