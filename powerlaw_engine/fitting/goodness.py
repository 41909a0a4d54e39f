"""Kolmogorov-Smirnov distance between a power law and data."""

from __future__ import annotations

from powerlaw_engine.distributions.factory import get_variant_ops
from powerlaw_engine.distributions.models import PowerLaw


def ks_distance(model: PowerLaw, data) -> float:
    """Maximum gap between the empirical and model CDF over ``data >= model.x_min``.

    The algorithm depends on the variant: continuous models compare at the
    data points, discrete models at every integer up to the largest point.
    Data below ``x_min`` is ignored; an empty tail gives ``0.0``.
    """
    return get_variant_ops(model.variant).ks_distance(model, data)


__all__ = ["ks_distance"]
