"""Semiparametric bootstrap goodness-of-fit test.

The p-value is the fraction of synthetic samples, drawn from the fitted
model above x_min and from the observed data below it, whose own best fit
is at least as far (in KS distance) from them as the original fit is from
the original data.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numpy.random import Generator

from powerlaw_engine.config.settings import get_settings
from powerlaw_engine.distributions.models import PowerLaw, normalize_variant
from powerlaw_engine.distributions.validation import validate_sample
from powerlaw_engine.exceptions import ConfigValidationError
from powerlaw_engine.fitting.fitter import fit
from powerlaw_engine.utils.logging import get_logger
from powerlaw_engine.utils.profiling import track_time
from powerlaw_engine.utils.progress import ProgressCallback, ProgressReporter
from powerlaw_engine.utils.rng import resolve_rng

log = get_logger(__name__, component="significance")


def trials_for_epsilon(epsilon: float) -> int:
    """Trials needed to estimate a p-value to within ``epsilon``: ``ceil(eps^-2 / 4)``."""
    if not (isinstance(epsilon, (int, float)) and 0.0 < epsilon < 1.0):
        raise ConfigValidationError(f"epsilon must lie in (0, 1), got {epsilon}")
    return max(1, math.ceil(round(0.25 * epsilon ** -2.0, 9)))


def semiparametric_sample(model: PowerLaw, observed, size: int, rng: Optional[Generator] = None) -> np.ndarray:
    """Draw ``size`` points mixing the observed head with model tail draws.

    Each point comes, with probability ``#(observed < x_min) / #observed``,
    uniformly from the observed values below ``x_min``; otherwise from
    ``model.sample_many``.
    """
    rng = resolve_rng(rng)
    observed = np.asarray(observed)
    head = observed[observed < model.x_min]
    p_head = head.size / observed.size if observed.size else 0.0

    from_head = rng.random(size) < p_head
    n_head = int(from_head.sum())
    dtype = float if model.variant == "continuous" else np.int64
    result = np.empty(size, dtype=dtype)
    if n_head:
        result[from_head] = head[rng.integers(0, head.size, size=n_head)]
    result[~from_head] = model.sample_many(size - n_head, rng)
    return result


def significance(
    data,
    trials: Optional[int] = None,
    *,
    epsilon: Optional[float] = None,
    variant: str = "continuous",
    model: Optional[PowerLaw] = None,
    rng: Optional[Generator] = None,
    progress: Optional[ProgressCallback] = None,
) -> float:
    """p-value of the power-law hypothesis for ``data``.

    Give either ``trials`` or ``epsilon`` (the desired precision of the
    p-value). Without ``model`` the data is fitted first; with one, that
    model and its KS distance on ``data`` are used as the reference.
    """
    if (trials is None) == (epsilon is None):
        raise ConfigValidationError("Pass exactly one of trials or epsilon")
    if epsilon is not None:
        trials = trials_for_epsilon(epsilon)
    if not isinstance(trials, (int, np.integer)) or trials < 1:
        raise ConfigValidationError(f"trials must be a positive integer, got {trials}")

    variant = normalize_variant(model.variant if model is not None else variant)
    sample = validate_sample(data, variant)
    if model is None:
        reference = fit(sample, variant)
        model, threshold = reference.model, reference.ks_distance
    else:
        threshold = model.ks_distance(sample)

    rng = resolve_rng(rng)
    reporter = ProgressReporter(int(trials), get_settings().progress_interval, progress)
    above = 0
    with track_time("significance", variant=variant, trials=int(trials), n_samples=int(sample.size)):
        for trial in range(int(trials)):
            reporter.update(trial)
            synthetic = semiparametric_sample(model, sample, sample.size, rng)
            if fit(synthetic, variant).ks_distance >= threshold:
                above += 1

    p_value = above / trials
    log.info(
        "Significance test finished",
        extra={"variant": variant, "trials": int(trials), "n_samples": int(sample.size), "p_value": p_value},
    )
    return p_value


__all__ = ["semiparametric_sample", "significance", "trials_for_epsilon"]
