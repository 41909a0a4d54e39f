"""Dispatch from variant tag to the variant's operations."""

from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Callable

from powerlaw_engine.distributions import continuous, discrete, discrete_approximate
from powerlaw_engine.distributions.models import Variant, normalize_variant


@dataclass(frozen=True)
class VariantOps:
    name: str
    density: Callable
    cdf: Callable
    cdf_complement: Callable
    sample_many: Callable
    ks_distance: Callable
    log_likelihood: Callable
    fit_at: Callable

    @classmethod
    def from_module(cls, module: ModuleType) -> "VariantOps":
        return cls(
            name=module.name,
            density=module.density,
            cdf=module.cdf,
            cdf_complement=module.cdf_complement,
            sample_many=module.sample_many,
            ks_distance=module.ks_distance,
            log_likelihood=module.log_likelihood,
            fit_at=module.fit_at,
        )


VARIANTS: dict[Variant, VariantOps] = {
    "continuous": VariantOps.from_module(continuous),
    "discrete": VariantOps.from_module(discrete),
    "discrete_approximate": VariantOps.from_module(discrete_approximate),
}


def get_variant_ops(name: str) -> VariantOps:
    return VARIANTS[normalize_variant(name)]


__all__ = ["VARIANTS", "VariantOps", "get_variant_ops"]
