"""Configuration file loading and saving."""

import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from spectrafit.core.domain.config import FitOptions
from spectrafit.core.fitting.methods import get_method
from spectrafit.core.lineshapes.registry import get_shape
from spectrafit.core.shared.exceptions import ConfigError


def load_config(path: Path) -> FitOptions:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        FitOptions: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the configuration is invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    try:
        return FitOptions.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid configuration in {path}: {exc}"
        raise ConfigError(msg) from exc


def _check_serializable(obj: Any, where: str = "") -> None:
    if isinstance(obj, dict):
        for key, value in obj.items():
            _check_serializable(value, f"{where}.{key}" if where else str(key))
    elif callable(obj):
        msg = f"Cannot save callable option '{where}' to TOML"
        raise ConfigError(msg)


def save_config(config: FitOptions, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: Configuration object to save.
        path: Path where to save the TOML file.

    Raises:
        ConfigError: If an option holds a callable.
    """
    data = config.model_dump(mode="python", exclude_none=True)
    _check_serializable(data)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config(shape: str = "gaussian", method: str = "lm") -> str:
    """Generate a default configuration file as a string.

    Args:
        shape: Shape kind written to ``[shape]``.
        method: Optimization kind written to ``[optimization]``.

    Returns:
        str: TOML-formatted default configuration.

    Raises:
        ConfigError: If the shape or method is not registered.
    """
    shape = get_shape(shape).name
    method = get_method(method).name
    return f"""# spectrafit configuration file
# Generated automatically - edit as needed

[shape]
kind = "{shape}"  # gaussian, lorentzian, pseudovoigt

[optimization]
kind = "{method}"  # lm, trf, dogbox

# Bounds relative to each peak's width (position, width) or height (y)
min_factor_x = 2.0
max_factor_x = 2.0
min_factor_y = 0.0
max_factor_y = 1.5
min_factor_width = 0.25
max_factor_width = 4.0
min_mu_value = 0.0
max_mu_value = 1.0

# Finite-difference steps (defaults: width / 2000 for x and width, 1e-3 for y, 0.01 for mu)
# x_gradient_difference = 0.001

[optimization.options]
max_iterations = 100
error_tolerance = 1e-8
# timeout = 10.0  # seconds

# Per-kind overrides (literal values)
# [optimization.parameters.mu]
# min = 0.0
# max = 1.0
"""
