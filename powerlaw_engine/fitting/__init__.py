"""Maximum-likelihood fitting and goodness of fit."""

from __future__ import annotations

from .fitter import candidate_thresholds, fit, fit_at
from .goodness import ks_distance

__all__ = ["candidate_thresholds", "fit", "fit_at", "ks_distance"]
