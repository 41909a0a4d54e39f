"""Value types for power-law models and fit results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional

import numpy as np
from numpy.random import Generator

from powerlaw_engine.exceptions import InvalidParameterError
from powerlaw_engine.utils.rng import resolve_rng

Variant = Literal["continuous", "discrete", "discrete_approximate"]

VARIANT_ALIASES: dict[str, Variant] = {
    "continuous": "continuous",
    "pareto": "continuous",
    "discrete": "discrete",
    "zeta": "discrete",
    "discrete_approximate": "discrete_approximate",
    "discrete-approximate": "discrete_approximate",
    "approximate": "discrete_approximate",
}


def normalize_variant(name: str) -> Variant:
    try:
        return VARIANT_ALIASES[str(name).strip().lower()]
    except KeyError:
        available = ", ".join(sorted(set(VARIANT_ALIASES.values())))
        raise InvalidParameterError(f"Unknown power-law variant '{name}'. Available: {available}") from None


def _ops(variant: Variant):
    from powerlaw_engine.distributions.factory import get_variant_ops

    return get_variant_ops(variant)


@dataclass(frozen=True)
class PowerLaw:
    """A power law ``p(x) ~ x^-exponent`` for ``x >= x_min``.

    ``variant`` selects the continuous (Pareto), exact discrete (zeta) or
    discrete-via-continuous approximation. Discrete variants keep an integer
    ``x_min``.
    """

    x_min: float
    exponent: float
    variant: Variant = "continuous"

    def __post_init__(self) -> None:
        variant = normalize_variant(self.variant)
        object.__setattr__(self, "variant", variant)
        x_min = float(self.x_min)
        if not math.isfinite(x_min) or x_min <= 0:
            raise InvalidParameterError(f"x_min must be finite and > 0, got {self.x_min}")
        if variant != "continuous":
            if x_min != math.floor(x_min) or x_min < 1:
                raise InvalidParameterError(f"{variant} power laws need an integer x_min >= 1, got {self.x_min}")
            object.__setattr__(self, "x_min", int(x_min))
        else:
            object.__setattr__(self, "x_min", x_min)
        object.__setattr__(self, "exponent", float(self.exponent))

    @property
    def degenerate(self) -> bool:
        return not math.isfinite(self.exponent)

    def density(self, x):
        return _ops(self.variant).density(self, x)

    def cdf(self, x):
        return _ops(self.variant).cdf(self, x)

    def cdf_complement(self, x):
        """``P(X >= x)``; numerically preferable to ``1 - cdf(x)`` in the tail."""
        return _ops(self.variant).cdf_complement(self, x)

    def sample(self, rng: Optional[Generator] = None):
        value = self.sample_many(1, rng)[0]
        return float(value) if self.variant == "continuous" else int(value)

    def sample_many(self, n: int, rng: Optional[Generator] = None) -> np.ndarray:
        if n < 0:
            raise InvalidParameterError(f"n must be >= 0, got {n}")
        return _ops(self.variant).sample_many(self, int(n), resolve_rng(rng))

    def ks_distance(self, data) -> float:
        return _ops(self.variant).ks_distance(self, data)

    def log_likelihood(self, data) -> float:
        return _ops(self.variant).log_likelihood(self, data)

    def generate(self, observed, size: int, rng: Optional[Generator] = None) -> np.ndarray:
        """Semiparametric draw: observed values below ``x_min`` mixed with model tail draws."""
        from powerlaw_engine.bootstrap.significance import semiparametric_sample

        return semiparametric_sample(self, observed, size, rng)

    def significance(self, data, trials: Optional[int] = None, *, epsilon: Optional[float] = None, rng: Optional[Generator] = None, progress=None) -> float:
        """Goodness-of-fit p-value using this model's KS distance on ``data`` as threshold."""
        from powerlaw_engine.bootstrap.significance import significance

        return significance(data, trials, epsilon=epsilon, variant=self.variant, model=self, rng=rng, progress=progress)

    def to_dict(self) -> dict:
        return {"variant": self.variant, "x_min": self.x_min, "exponent": self.exponent}


@dataclass(frozen=True)
class FitResult:
    model: PowerLaw
    ks_distance: float
    n: int
    n_tail: int
    log_likelihood: float
    degenerate: bool = False
    warnings: tuple[str, ...] = ()

    @property
    def exponent(self) -> float:
        return self.model.exponent

    @property
    def x_min(self) -> float:
        return self.model.x_min

    @property
    def variant(self) -> Variant:
        return self.model.variant

    def to_dict(self) -> dict:
        return {
            **self.model.to_dict(),
            "ks_distance": self.ks_distance,
            "n": self.n,
            "n_tail": self.n_tail,
            "log_likelihood": self.log_likelihood,
            "degenerate": self.degenerate,
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class Uncertainties:
    """Bootstrap standard deviations of the fitted parameters."""

    exponent_std_dev: float
    x_min_std_dev: float
    tail_size_std_dev: float
    bootstrap_size: int
    degenerate_resamples: int = 0

    def to_dict(self) -> dict:
        return {
            "exponent_std_dev": self.exponent_std_dev,
            "x_min_std_dev": self.x_min_std_dev,
            "tail_size_std_dev": self.tail_size_std_dev,
            "bootstrap_size": self.bootstrap_size,
            "degenerate_resamples": self.degenerate_resamples,
        }


__all__ = ["FitResult", "PowerLaw", "Uncertainties", "VARIANT_ALIASES", "Variant", "normalize_variant"]
