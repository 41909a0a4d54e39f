"""Continuous (Pareto) power law."""

from __future__ import annotations

import math

import numpy as np
from numpy.random import Generator

from powerlaw_engine.config.settings import get_settings
from powerlaw_engine.distributions.models import PowerLaw
from powerlaw_engine.exceptions import InvalidParameterError
from powerlaw_engine.utils.arrays import as_output, tail_of

name = "continuous"


def density(model: PowerLaw, x):
    x = np.asarray(x, dtype=float)
    a, x_min = model.exponent, model.x_min
    with np.errstate(over="ignore", invalid="ignore"):
        return as_output((a / x_min) * (x / x_min) ** -a)


def cdf_complement(model: PowerLaw, x):
    x = np.asarray(x, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        return as_output((x / model.x_min) ** (1.0 - model.exponent))


def cdf(model: PowerLaw, x):
    return as_output(1.0 - np.asarray(cdf_complement(model, x)))


def sample_many(model: PowerLaw, n: int, rng: Generator) -> np.ndarray:
    """Inverse-CDF draws ``x_min * (1 - u)^(-1 / (alpha - 1))``."""
    if not model.exponent > 1.0:
        raise InvalidParameterError(f"Sampling needs exponent > 1, got {model.exponent}")
    u = rng.random(n)
    return model.x_min * (1.0 - u) ** (-1.0 / (model.exponent - 1.0))


def mle_exponent(tail: np.ndarray, x_min: float) -> float:
    """Closed-form estimate ``1 + n / sum(log(x / x_min))`` (Clauset et al. eq. 3.1).

    A tail whose values all equal ``x_min`` has a zero log-sum and an infinite
    exponent; an empty tail yields NaN.
    """
    n = tail.size
    if n == 0:
        return math.nan
    total = float(np.sum(np.log(tail / x_min)))
    if total == 0.0:
        return math.inf
    return 1.0 + n / total


def fit_at(sorted_data: np.ndarray, x_min: float) -> PowerLaw:
    x_min = float(x_min)
    return PowerLaw(x_min, mle_exponent(tail_of(sorted_data, x_min), x_min), name)


def log_likelihood(model: PowerLaw, data) -> float:
    """Normalised log-likelihood of the tail; ``-inf`` for a degenerate (infinite) exponent."""
    tail = tail_of(np.sort(np.asarray(data, dtype=float)), model.x_min)
    n = tail.size
    if n == 0:
        return 0.0
    if model.degenerate:
        return -math.inf
    a, x_min = model.exponent, model.x_min
    with np.errstate(divide="ignore", invalid="ignore"):
        value = n * np.log(a - 1.0) - n * np.log(x_min) - a * np.sum(np.log(tail / x_min))
    return float(value)


def ks_distance(model: PowerLaw, data, *, presorted: bool = False) -> float:
    """Largest gap between the empirical and model CDF over the tail.

    The empirical CDF at 0-based rank ``i`` is ``(i + 1) / n`` when the
    ``ks_correct`` setting is on and ``i / n`` otherwise.
    """
    arr = np.asarray(data, dtype=float)
    if not presorted:
        arr = np.sort(arr)
    tail = tail_of(arr, model.x_min)
    n = tail.size
    if n == 0:
        return 0.0
    correction = 1.0 if get_settings().ks_correct else 0.0
    empirical = (np.arange(n) + correction) / n
    return float(np.max(np.abs(empirical - cdf(model, tail))))


__all__ = [
    "cdf",
    "cdf_complement",
    "density",
    "fit_at",
    "ks_distance",
    "log_likelihood",
    "mle_exponent",
    "sample_many",
]
