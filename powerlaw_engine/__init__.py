"""Power-law fitting and goodness-of-fit testing (Clauset, Shalizi & Newman 2009)."""

from __future__ import annotations

from powerlaw_engine.bootstrap import semiparametric_sample, significance, trials_for_epsilon, uncertainty
from powerlaw_engine.config import EngineSettings, configure, get_settings, override_settings
from powerlaw_engine.distributions import FitResult, PowerLaw, Uncertainties
from powerlaw_engine.fitting import fit, fit_at, ks_distance
from powerlaw_engine.special import hurwitz_zeta, riemann_zeta
from powerlaw_engine.utils.rng import make_rng, reseed

__version__ = "0.1.0"

__all__ = [
    "EngineSettings",
    "FitResult",
    "PowerLaw",
    "Uncertainties",
    "configure",
    "fit",
    "fit_at",
    "get_settings",
    "hurwitz_zeta",
    "ks_distance",
    "make_rng",
    "override_settings",
    "reseed",
    "riemann_zeta",
    "semiparametric_sample",
    "significance",
    "trials_for_epsilon",
    "uncertainty",
]
