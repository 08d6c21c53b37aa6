"""
Numeric helpers shared by the processing pipeline.

All statistics are guarded so that degenerate (empty or overflowing) inputs
produce 0.0 instead of a division fault or a non-finite value.
"""

import logging
import math
from typing import Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]


def as_array(values: ArrayLike) -> np.ndarray:
    """Convert a numeric sequence to a flat float64 array."""
    return np.asarray(values, dtype=np.float64).reshape(-1)


def safe_mean(values: ArrayLike) -> float:
    """
    Arithmetic mean with an empty-input guard.

    Args:
        values: Numeric sequence

    Returns:
        float: Mean of values, or 0.0 when empty or not finite
    """
    arr = as_array(values)
    if arr.size == 0:
        return 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        return finite_or_zero(float(np.mean(arr)))


def population_std(values: ArrayLike) -> float:
    """
    Population standard deviation (ddof=0) with an empty-input guard.

    Args:
        values: Numeric sequence

    Returns:
        float: Standard deviation, or 0.0 when empty or not finite
    """
    arr = as_array(values)
    if arr.size == 0:
        return 0.0
    with np.errstate(over="ignore", invalid="ignore"):
        return finite_or_zero(float(np.std(arr)))


def finite_or_zero(value: float) -> float:
    """Map inf and NaN to 0.0."""
    return value if math.isfinite(value) else 0.0


def zero_non_finite(values: np.ndarray) -> np.ndarray:
    """Replace inf and NaN entries with 0.0."""
    return np.where(np.isfinite(values), values, 0.0)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a scalar into [low, high]; NaN maps to low."""
    if math.isnan(value):
        return float(low)
    return float(min(max(value, low), high))


def configure_logging(level: Union[int, str] = logging.INFO):
    """
    Install a basic stream handler for scripts and experiments.

    The library itself never installs handlers.

    Args:
        level: Logging level name or number
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
