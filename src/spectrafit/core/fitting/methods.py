"""Optimization method registry."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from spectrafit.core.fitting.optimizer import (
    LevenbergMarquardtOptions,
    SolverOptions,
    SolverResult,
    TrustRegionOptions,
    dogbox,
    levenberg_marquardt,
    trust_region_reflective,
)
from spectrafit.core.shared.exceptions import ConfigError

Solver = Callable[..., SolverResult]

DEFAULT_METHOD = "lm"


@dataclass(frozen=True)
class SolverMethod:
    """Behavior record for one optimization method."""

    name: str
    solve: Solver
    options_model: type[SolverOptions]
    description: str = ""


METHODS: dict[str, SolverMethod] = {}


def register_method(method: SolverMethod) -> SolverMethod:
    """Register an optimization method under its name."""
    METHODS[method.name] = method
    return method


def get_method(kind: str) -> SolverMethod:
    """Get a registered method by name.

    Raises
    ------
        ConfigError: If the method is not registered
    """
    try:
        return METHODS[kind.strip().lower()]
    except (KeyError, AttributeError):
        msg = f"Unsupported optimization kind: {kind!r} (available: {', '.join(list_methods())})"
        raise ConfigError(msg) from None


def list_methods() -> list[str]:
    return sorted(METHODS)


def select_method(
    kind: str = DEFAULT_METHOD, options: Mapping[str, Any] | None = None
) -> tuple[Solver, SolverOptions]:
    """Resolve a method name to its solver and a fresh options object.

    Args:
        kind: Method name ("lm", "trf" or "dogbox")
        options: Solver-specific overrides of the defaults

    Returns
    -------
        (solver, options) where ``options`` is a new instance on every call

    Raises
    ------
        ConfigError: For an unknown method or invalid solver options
    """
    method = get_method(kind)
    try:
        solver_options = method.options_model.model_validate(dict(options or {}))
    except ValidationError as exc:
        msg = f"Invalid options for optimization kind '{method.name}': {exc}"
        raise ConfigError(msg) from exc
    return method.solve, solver_options


register_method(
    SolverMethod(
        "lm",
        levenberg_marquardt,
        LevenbergMarquardtOptions,
        "Levenberg-Marquardt (MINPACK), bounds enforced by projection",
    )
)
register_method(
    SolverMethod("trf", trust_region_reflective, TrustRegionOptions, "Trust Region Reflective")
)
register_method(SolverMethod("dogbox", dogbox, TrustRegionOptions, "Dogleg with box constraints"))


__all__ = [
    "DEFAULT_METHOD",
    "METHODS",
    "Solver",
    "SolverMethod",
    "get_method",
    "list_methods",
    "register_method",
    "select_method",
]
