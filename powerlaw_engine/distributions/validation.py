"""Input checks applied before any threshold search."""

from __future__ import annotations

import numpy as np

from powerlaw_engine.exceptions import DataValidationError, InsufficientDataError


def validate_sample(sample, variant: str) -> np.ndarray:
    """Return ``sample`` as a 1-D array suitable for ``variant``.

    Continuous samples come back as float64 and must be strictly positive.
    Discrete samples come back as int64 and must hold integers ``>= 1``.
    """
    try:
        arr = np.asarray(sample, dtype=float).ravel()
    except (TypeError, ValueError) as exc:
        raise DataValidationError(f"Sample must be numeric: {exc}") from exc

    if arr.size == 0:
        raise InsufficientDataError("Cannot fit a power law to an empty sample")
    if not np.isfinite(arr).all():
        raise DataValidationError("Sample contains NaN or infinite values")

    if variant == "continuous":
        if (arr <= 0).any():
            raise DataValidationError(f"Continuous samples must be > 0 (minimum is {arr.min()})")
        return arr

    if (arr != np.floor(arr)).any():
        raise DataValidationError(f"{variant} samples must be integer-valued")
    if (arr < 1).any():
        raise DataValidationError(f"{variant} samples must be >= 1 (minimum is {int(arr.min())})")
    return arr.astype(np.int64)


__all__ = ["validate_sample"]
