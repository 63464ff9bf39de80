"""Lineshape evaluators, composite models and the shape registry."""

from spectrafit.core.lineshapes.functions import (
    GaussianEvaluator,
    LorentzianEvaluator,
    PseudoVoigtEvaluator,
    gaussian,
    lorentzian,
    pseudovoigt,
)
from spectrafit.core.lineshapes.models import (
    sum_of_gaussians,
    sum_of_lorentzians,
    sum_of_pseudovoigts,
)
from spectrafit.core.lineshapes.registry import (
    SHAPES,
    ShapeKind,
    get_shape,
    list_shapes,
    register_shape,
)

__all__ = [
    "SHAPES",
    "GaussianEvaluator",
    "LorentzianEvaluator",
    "PseudoVoigtEvaluator",
    "ShapeKind",
    "gaussian",
    "get_shape",
    "list_shapes",
    "lorentzian",
    "pseudovoigt",
    "register_shape",
    "sum_of_gaussians",
    "sum_of_lorentzians",
    "sum_of_pseudovoigts",
]
