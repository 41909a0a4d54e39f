"""Exact discrete (zeta) power law.

The KS statistic here walks every integer between ``x_min`` and the largest
observation and compares the cumulative histogram with the running sum of
the probability mass. That running sum is not the same computation as
:func:`cdf` (which goes through the Hurwitz zeta), and the two can differ in
the last digits; both are kept as they are.
"""

from __future__ import annotations

import math
from functools import lru_cache

import numpy as np
from numpy.random import Generator

from powerlaw_engine.config.settings import get_settings
from powerlaw_engine.distributions.models import PowerLaw
from powerlaw_engine.exceptions import DistributionFitError, InvalidParameterError
from powerlaw_engine.special.zeta import cached_hurwitz_zeta, hurwitz_zeta
from powerlaw_engine.utils.arrays import apply_scalar, as_output, tail_of

name = "discrete"


def normalizer(model: PowerLaw) -> float:
    return cached_hurwitz_zeta(model.exponent, float(model.x_min))


def density(model: PowerLaw, x):
    x = np.asarray(x, dtype=float)
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        return as_output(x ** -model.exponent / normalizer(model))


def cdf_complement(model: PowerLaw, x):
    norm = normalizer(model)
    return apply_scalar(lambda v: hurwitz_zeta(model.exponent, v) / norm, x)


def cdf(model: PowerLaw, x):
    return as_output(1.0 - np.asarray(cdf_complement(model, x)))


def cdf_inverse(model: PowerLaw, q: float) -> int:
    """Integer ``x`` with ``P(X >= x) >= q > P(X >= x + 1)``.

    Doubles an upper bound from ``x_min`` until the tail probability drops
    below ``q``, then bisects on real arguments until the bracket sits inside
    a single integer.
    """
    if not q > 0.0:
        raise InvalidParameterError(f"q must be > 0, got {q}")
    norm = normalizer(model)

    def tail_probability(x: float) -> float:
        value = hurwitz_zeta(model.exponent, x) / norm
        if math.isnan(value):
            raise InvalidParameterError(f"Tail probability undefined for exponent {model.exponent}")
        return value

    upper = model.x_min
    while True:
        lower = upper
        upper = 2 * lower
        if tail_probability(upper) < q:
            break

    lower, upper = float(lower), float(upper)
    while math.floor(lower) != math.floor(upper):
        midpoint = (upper - lower) / 2.0 + lower
        if midpoint <= lower or midpoint >= upper:
            break
        if tail_probability(midpoint) < q:
            upper = midpoint
        else:
            lower = midpoint
    # the bracket can stall around an integer whose tail probability is exactly q
    candidate = math.floor(upper)
    if candidate > math.floor(lower) and tail_probability(candidate) >= q:
        return int(candidate)
    return int(math.floor(lower))


def sample_many(model: PowerLaw, n: int, rng: Generator) -> np.ndarray:
    if not model.exponent > 1.0:
        raise InvalidParameterError(f"Sampling needs exponent > 1, got {model.exponent}")
    u = rng.random(n)
    return np.fromiter((cdf_inverse(model, 1.0 - v) for v in u), dtype=np.int64, count=n)


def cumulative_counts(lower: int, upper: int, sorted_data) -> np.ndarray:
    """For each integer in ``[lower, upper]``, the number of data points ``<=`` it."""
    support = np.arange(int(lower), int(upper) + 1)
    return np.searchsorted(np.asarray(sorted_data), support, side="right")


def tail_statistics(sorted_data: np.ndarray, x_min: int) -> tuple[int, float]:
    """Size of the tail ``>= x_min`` and the sum of its logs."""
    tail = tail_of(sorted_data, x_min)
    return int(tail.size), float(np.sum(np.log(tail.astype(float))))


@lru_cache(maxsize=32)
def exponent_grid(alpha_min: float, alpha_max: float, alpha_step: float) -> np.ndarray:
    """Candidate exponents ``alpha_min, alpha_min + step, ..., alpha_max``."""
    count = int(math.floor((alpha_max - alpha_min) / alpha_step + 1e-9)) + 1
    grid = np.round(alpha_min + alpha_step * np.arange(count), 12)
    grid.setflags(write=False)
    return grid


def log_likelihood_at(alpha, x_min: int, n: int, log_sum: float):
    """``-n log zeta(alpha, x_min) - alpha sum(log x)``; accepts an array of alphas."""
    alphas = np.asarray(alpha, dtype=float)
    zetas = apply_scalar(lambda a: cached_hurwitz_zeta(a, float(x_min)), alphas)
    with np.errstate(divide="ignore", invalid="ignore"):
        return as_output(-n * np.log(zetas) - alphas * log_sum)


def fit_exponent(sorted_data: np.ndarray, x_min: int) -> float:
    """Grid-search MLE of the exponent for the tail ``>= x_min`` (Clauset et al. eq. 3.5).

    The first grid point with the highest log-likelihood wins.
    """
    settings = get_settings()
    grid = exponent_grid(settings.alpha_min, settings.alpha_max, settings.alpha_step)
    n, log_sum = tail_statistics(sorted_data, x_min)
    scores = np.asarray(log_likelihood_at(grid, x_min, n, log_sum), dtype=float)
    scores = np.where(np.isnan(scores), -np.inf, scores)
    best = int(np.argmax(scores))
    if scores[best] == -np.inf:
        raise DistributionFitError(f"Log-likelihood undefined on the whole exponent grid at x_min={x_min}")
    return float(grid[best])


def fit_at(sorted_data: np.ndarray, x_min) -> PowerLaw:
    x_min = int(x_min)
    return PowerLaw(x_min, fit_exponent(sorted_data, x_min), name)


def log_likelihood(model: PowerLaw, data) -> float:
    n, log_sum = tail_statistics(np.sort(np.asarray(data)), model.x_min)
    return float(log_likelihood_at(model.exponent, model.x_min, n, log_sum))


def ks_distance(model: PowerLaw, data, *, presorted: bool = False) -> float:
    arr = np.asarray(data)
    if not presorted:
        arr = np.sort(arr)
    tail = tail_of(arr, model.x_min)
    if tail.size == 0:
        return 0.0
    x_max = int(tail[-1])
    support = np.arange(model.x_min, x_max + 1, dtype=float)
    empirical = cumulative_counts(model.x_min, x_max, tail) / tail.size
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        model_cdf = np.cumsum(support ** -model.exponent) / normalizer(model)
    return float(np.max(np.abs(empirical - model_cdf)))


__all__ = [
    "cdf",
    "cdf_complement",
    "cdf_inverse",
    "cumulative_counts",
    "density",
    "exponent_grid",
    "fit_at",
    "fit_exponent",
    "ks_distance",
    "log_likelihood",
    "log_likelihood_at",
    "normalizer",
    "sample_many",
    "tail_statistics",
]
