"""Shape registry mapping shape names to composite model builders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spectrafit.core.lineshapes.functions import gaussian, lorentzian, pseudovoigt
from spectrafit.core.lineshapes.models import (
    sum_of_gaussians,
    sum_of_lorentzians,
    sum_of_pseudovoigts,
)
from spectrafit.core.shared.exceptions import ConfigError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from spectrafit.core.shared.typing import ModelBuilder


@dataclass(frozen=True)
class ShapeKind:
    """Behavior record for one shape family.

    Attributes
    ----------
        name: Canonical shape name
        n_params: Number of parameters per peak (3, or 4 with a mixing fraction)
        model: Builder of the composite model from a flat parameter vector
        peak: Factory evaluating a single peak
    """

    name: str
    n_params: int
    model: ModelBuilder
    peak: Callable[..., Callable]


# Global shape registry
SHAPES: dict[str, ShapeKind] = {}


def register_shape(shape: ShapeKind, aliases: Iterable[str] = ()) -> ShapeKind:
    """Register a shape under its canonical name and any aliases.

    Example:
        register_shape(ShapeKind("gaussian", 3, sum_of_gaussians, gaussian), ["gauss"])
    """
    for name in (shape.name, *aliases):
        SHAPES[name.lower()] = shape
    return shape


def get_shape(name: str) -> ShapeKind:
    """Get a shape by name (case-insensitive).

    Raises
    ------
        ConfigError: If the shape name is not registered
    """
    try:
        return SHAPES[name.strip().lower()]
    except (KeyError, AttributeError):
        msg = f"Kind of shape is not supported: {name!r} (available: {', '.join(list_shapes())})"
        raise ConfigError(msg) from None


def list_shapes() -> list[str]:
    """List canonical names of registered shapes."""
    return sorted({shape.name for shape in SHAPES.values()})


register_shape(ShapeKind("gaussian", 3, sum_of_gaussians, gaussian), ["gauss"])
register_shape(ShapeKind("lorentzian", 3, sum_of_lorentzians, lorentzian), ["lorentz"])
register_shape(
    ShapeKind("pseudovoigt", 4, sum_of_pseudovoigts, pseudovoigt),
    ["pvoigt", "pseudo-voigt", "pseudo_voigt"],
)
