"""Scalar/array helpers shared by the distribution variants."""

from __future__ import annotations

from typing import Callable

import numpy as np


def as_output(values):
    """Return a Python float for 0-d results, the array otherwise."""
    if np.ndim(values) == 0:
        return float(values)
    return values


def apply_scalar(fn: Callable[[float], float], x):
    """Apply a scalar-only function elementwise, preserving the input shape."""
    arr = np.asarray(x, dtype=float)
    if arr.ndim == 0:
        return float(fn(float(arr)))
    flat = np.fromiter((fn(float(v)) for v in arr.ravel()), dtype=float, count=arr.size)
    return flat.reshape(arr.shape)


def tail_of(sorted_data: np.ndarray, x_min: float) -> np.ndarray:
    """Values ``>= x_min`` of an ascending array."""
    start = int(np.searchsorted(sorted_data, x_min, side="left"))
    return sorted_data[start:]


__all__ = ["apply_scalar", "as_output", "tail_of"]
