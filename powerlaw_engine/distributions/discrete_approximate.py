"""Discrete power law approximated by a continuous one.

Integer ``x`` stands for the interval ``[x - 0.5, x + 0.5)`` of a continuous
power law whose cutoff is ``x_min - 0.5``. Fitting reduces to the closed-form
continuous estimator, which makes this variant a cheap stand-in for the exact
discrete model on large samples.
"""

from __future__ import annotations

import numpy as np
from numpy.random import Generator

from powerlaw_engine.distributions import continuous
from powerlaw_engine.distributions.models import PowerLaw
from powerlaw_engine.utils.arrays import as_output, tail_of

name = "discrete_approximate"


def approximation(model: PowerLaw) -> PowerLaw:
    return PowerLaw(model.x_min - 0.5, model.exponent, continuous.name)


def density(model: PowerLaw, x):
    x = np.asarray(x, dtype=float)
    approx = approximation(model)
    return as_output(np.asarray(continuous.cdf(approx, x + 0.5)) - np.asarray(continuous.cdf(approx, x - 0.5)))


def cdf(model: PowerLaw, x):
    return continuous.cdf(approximation(model), np.asarray(x, dtype=float) + 0.5)


def cdf_complement(model: PowerLaw, x):
    return continuous.cdf_complement(approximation(model), np.asarray(x, dtype=float) - 0.5)


def sample_many(model: PowerLaw, n: int, rng: Generator) -> np.ndarray:
    """Continuous draws rounded half-up to the nearest integer."""
    draws = continuous.sample_many(approximation(model), n, rng)
    return np.floor(draws + 0.5).astype(np.int64)


def fit_at(sorted_data: np.ndarray, x_min) -> PowerLaw:
    x_min = int(x_min)
    shifted = x_min - 0.5
    tail = tail_of(np.asarray(sorted_data, dtype=float), shifted)
    return PowerLaw(x_min, continuous.mle_exponent(tail, shifted), name)


def log_likelihood(model: PowerLaw, data) -> float:
    return continuous.log_likelihood(approximation(model), np.asarray(data, dtype=float))


def ks_distance(model: PowerLaw, data, *, presorted: bool = False) -> float:
    return continuous.ks_distance(approximation(model), np.asarray(data, dtype=float), presorted=presorted)


__all__ = [
    "approximation",
    "cdf",
    "cdf_complement",
    "density",
    "fit_at",
    "ks_distance",
    "log_likelihood",
    "sample_many",
]
