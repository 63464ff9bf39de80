"""Shared typing aliases used across spectrafit."""

from collections.abc import Callable
from typing import Any

import numpy as np
import numpy.typing as npt

FloatArray = npt.NDArray[np.float64]

# A model evaluated at one abscissa value or at an array of them
ModelFunction = Callable[[Any], Any]

# Builds a model from a flat, kind-batched parameter vector
ModelBuilder = Callable[[FloatArray], ModelFunction]
