"""Threshold search: pick the x_min whose MLE model is closest to the data in KS distance."""

from __future__ import annotations

import math

import numpy as np

from powerlaw_engine.distributions.factory import get_variant_ops
from powerlaw_engine.distributions.models import FitResult, PowerLaw, normalize_variant
from powerlaw_engine.distributions.validation import validate_sample
from powerlaw_engine.exceptions import DistributionFitError
from powerlaw_engine.utils.arrays import tail_of
from powerlaw_engine.utils.logging import get_logger

log = get_logger(__name__, component="fitter")


def candidate_thresholds(sample) -> np.ndarray:
    """Sorted unique values of ``sample``; the only x_min values ever considered."""
    return np.unique(np.asarray(sample))


def fit_at(sample, x_min, variant: str = "continuous") -> PowerLaw:
    """MLE model for a fixed ``x_min``, discarding data below it."""
    variant = normalize_variant(variant)
    data = np.sort(validate_sample(sample, variant))
    return get_variant_ops(variant).fit_at(data, x_min)


def fit(sample, variant: str = "continuous") -> FitResult:
    """Fit a power law to ``sample``, choosing x_min by minimum KS distance.

    Every unique value is tried as x_min in ascending order; a later candidate
    replaces the current best only on a strictly smaller distance. Candidates
    with a non-finite exponent (e.g. a tail of identical values) are only
    returned when no finite candidate exists, flagged as degenerate.
    """
    variant = normalize_variant(variant)
    ops = get_variant_ops(variant)
    data = np.sort(validate_sample(sample, variant))

    best: PowerLaw | None = None
    best_distance = math.inf
    fallback: tuple[PowerLaw, float] | None = None

    for threshold in candidate_thresholds(data):
        candidate = ops.fit_at(data, threshold)
        distance = ops.ks_distance(candidate, data, presorted=True)
        if math.isnan(distance):
            raise DistributionFitError(
                f"KS distance is undefined for {variant} candidate x_min={candidate.x_min}, exponent={candidate.exponent}"
            )
        if candidate.degenerate:
            if fallback is None:
                fallback = (candidate, distance)
            continue
        if distance < best_distance:
            best, best_distance = candidate, distance

    warnings: tuple[str, ...] = ()
    if best is None:
        if fallback is None:
            raise DistributionFitError(f"No candidate threshold for {variant} sample of size {data.size}")
        best, best_distance = fallback
        message = f"degenerate fit: exponent {best.exponent} at x_min={best.x_min}"
        warnings = (message,)
        log.warning("Degenerate power-law fit", extra={"variant": variant, "n_samples": int(data.size), "x_min": best.x_min})

    n_tail = int(tail_of(data, best.x_min).size)
    result = FitResult(
        model=best,
        ks_distance=best_distance,
        n=int(data.size),
        n_tail=n_tail,
        log_likelihood=ops.log_likelihood(best, data),
        degenerate=best.degenerate,
        warnings=warnings,
    )
    log.debug(
        "Power law fitted",
        extra={"variant": variant, "n_samples": result.n, "x_min": best.x_min, "exponent": best.exponent},
    )
    return result


__all__ = ["candidate_thresholds", "fit", "fit_at"]
