"""Nonparametric bootstrap spread of the fitted parameters."""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.random import Generator

from powerlaw_engine.distributions.models import Uncertainties, normalize_variant
from powerlaw_engine.distributions.validation import validate_sample
from powerlaw_engine.exceptions import ConfigValidationError
from powerlaw_engine.fitting.fitter import fit
from powerlaw_engine.utils.logging import get_logger
from powerlaw_engine.utils.profiling import track_time
from powerlaw_engine.utils.rng import resolve_rng

log = get_logger(__name__, component="uncertainty")


def _std(values) -> float:
    values = np.asarray(values, dtype=float)
    if values.size < 2:
        return 0.0
    return float(np.std(values, ddof=1))


def uncertainty(data, bootstrap_size: int, *, variant: str = "continuous", rng: Optional[Generator] = None) -> Uncertainties:
    """Standard deviations of exponent, x_min and tail size over bootstrap refits.

    Each replicate resamples ``len(data)`` points with replacement and fits
    from scratch; tail size is counted on the original data at the
    replicate's x_min. Replicates whose fit is degenerate are counted and
    left out of the exponent spread.
    """
    if not isinstance(bootstrap_size, (int, np.integer)) or bootstrap_size < 1:
        raise ConfigValidationError(f"bootstrap_size must be a positive integer, got {bootstrap_size}")

    variant = normalize_variant(variant)
    sample = validate_sample(data, variant)
    ordered = np.sort(sample)
    rng = resolve_rng(rng)

    exponents: list[float] = []
    x_mins: list[float] = []
    tail_sizes: list[int] = []
    degenerate = 0
    with track_time("uncertainty", variant=variant, bootstrap_size=int(bootstrap_size), n_samples=int(sample.size)):
        for _ in range(int(bootstrap_size)):
            resample = sample[rng.integers(0, sample.size, size=sample.size)]
            result = fit(resample, variant)
            x_mins.append(float(result.x_min))
            tail_sizes.append(int(ordered.size - np.searchsorted(ordered, result.x_min, side="left")))
            if result.degenerate:
                degenerate += 1
                continue
            exponents.append(result.exponent)

    if degenerate:
        log.warning(
            "Degenerate fits among bootstrap replicates",
            extra={"variant": variant, "bootstrap_size": int(bootstrap_size), "degenerate_resamples": degenerate},
        )

    return Uncertainties(
        exponent_std_dev=_std(exponents),
        x_min_std_dev=_std(x_mins),
        tail_size_std_dev=_std(tail_sizes),
        bootstrap_size=int(bootstrap_size),
        degenerate_resamples=degenerate,
    )


__all__ = ["uncertainty"]
