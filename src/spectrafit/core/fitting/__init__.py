"""Parameter-space construction, solver selection and fit orchestration."""

from spectrafit.core.fitting.builder import FitProblem, check_input, load_options
from spectrafit.core.fitting.constraints import ParameterResolver, build_policy, resolve
from spectrafit.core.fitting.methods import get_method, list_methods, select_method
from spectrafit.core.fitting.optimize import FitResult, optimize
from spectrafit.core.fitting.optimizer import SolverOptions, SolverResult
from spectrafit.core.fitting.parameters import ParameterKind, ParameterSpace, Quantity, flat_index
from spectrafit.core.fitting.simulation import simulate_spectrum

__all__ = [
    "FitProblem",
    "FitResult",
    "ParameterKind",
    "ParameterResolver",
    "ParameterSpace",
    "Quantity",
    "SolverOptions",
    "SolverResult",
    "build_policy",
    "check_input",
    "flat_index",
    "get_method",
    "list_methods",
    "load_options",
    "optimize",
    "resolve",
    "select_method",
    "simulate_spectrum",
]
