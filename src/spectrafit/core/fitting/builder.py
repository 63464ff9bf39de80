"""Input normalization and parameter-space construction."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from spectrafit.core.domain.config import FitOptions
from spectrafit.core.domain.peaks import Peak, create_peaks
from spectrafit.core.domain.spectrum import Spectrum
from spectrafit.core.fitting.constraints import ParameterResolver, build_policy
from spectrafit.core.fitting.methods import Solver, SolverMethod, get_method, select_method
from spectrafit.core.lineshapes.registry import ShapeKind, get_shape
from spectrafit.core.shared.exceptions import ConfigError

if TYPE_CHECKING:
    from spectrafit.core.fitting.optimizer import SolverOptions
    from spectrafit.core.shared.typing import ModelBuilder

logger = logging.getLogger(__name__)

OptionsLike = FitOptions | Mapping[str, Any] | None


@dataclass
class FitProblem:
    """Everything needed to assemble and solve one fit.

    Attributes
    ----------
        spectrum: Normalized spectrum (``y / max_y``)
        max_y: Maximum of the original ordinate
        peaks: Validated private copies of the input peaks
        shape: Resolved shape family
        method: Resolved optimization method
        solve: Solver entry point of ``method``
        solver_options: Validated solver settings, fresh for this problem
        options: Resolved configuration
        resolver: Per-parameter value resolver
    """

    spectrum: Spectrum
    max_y: float
    peaks: list[Peak]
    shape: ShapeKind
    method: SolverMethod
    solve: Solver
    solver_options: SolverOptions
    options: FitOptions
    resolver: ParameterResolver

    @property
    def n_params(self) -> int:
        return self.shape.n_params

    @property
    def model(self) -> ModelBuilder:
        return self.shape.model


def load_options(options: OptionsLike = None) -> FitOptions:
    """Validate user options into a ``FitOptions`` object.

    Raises
    ------
        ConfigError: If the options do not validate
    """
    if options is None:
        return FitOptions()
    if isinstance(options, FitOptions):
        return options
    try:
        return FitOptions.model_validate(dict(options))
    except (ValidationError, TypeError, ValueError) as exc:
        msg = f"Invalid fit options: {exc}"
        raise ConfigError(msg) from exc


def check_input(
    data: Spectrum | Mapping[str, Any],
    peaks: Iterable[Peak | Mapping[str, Any]],
    options: OptionsLike = None,
) -> FitProblem:
    """Validate inputs and resolve the layered configuration.

    Shape and method names and the solver options are checked first so
    that configuration mistakes surface before any data is touched.

    Args:
        data: ``{"x": ..., "y": ...}`` or a ``Spectrum``
        peaks: Initial guesses, as ``Peak`` objects or mappings
        options: ``FitOptions`` or an equivalent mapping

    Returns
    -------
        FitProblem with normalized data and private peak copies

    Raises
    ------
        ConfigError: Unknown shape/method, invalid options or solver options
        DataError: Structurally invalid spectrum or peak list
    """
    fit_options = load_options(options)
    shape = get_shape(fit_options.shape.kind)
    method = get_method(fit_options.optimization.kind)
    solve, solver_options = select_method(method.name, fit_options.optimization.options)

    spectrum = Spectrum.from_data(data)
    normalized = spectrum.normalized()
    peak_list = create_peaks(peaks)

    policy = build_policy(fit_options.optimization, spectrum.max_y)
    resolver = ParameterResolver(policy=policy, max_y=spectrum.max_y)

    logger.debug(
        "Fit problem: %d peaks, shape=%s, method=%s, %d points",
        len(peak_list),
        shape.name,
        method.name,
        spectrum.size,
    )

    return FitProblem(
        spectrum=normalized,
        max_y=spectrum.max_y,
        peaks=peak_list,
        shape=shape,
        method=method,
        solve=solve,
        solver_options=solver_options,
        options=fit_options,
        resolver=resolver,
    )


__all__ = ["FitProblem", "check_input", "load_options"]
