"""Engine-wide settings.

``ks_correct`` selects the empirical-CDF convention of the continuous KS
statistic: ``(i + 1) / n`` when true, ``i / n`` (the convention used for the
results in Clauset et al. 2007) when false. It applies to every KS
computation in the process, so it lives here rather than on each call.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import asdict, dataclass, replace
from typing import Iterator, Mapping, Optional

from powerlaw_engine.config.loader import load_config_with_precedence, parse_bool
from powerlaw_engine.exceptions import ConfigValidationError

ENV_PREFIX = "POWERLAW_"
RANDOM_SEED = 42


@dataclass(frozen=True, slots=True)
class EngineSettings:
    ks_correct: bool = True
    alpha_min: float = 1.5
    alpha_max: float = 3.5
    alpha_step: float = 0.01
    random_seed: int = RANDOM_SEED
    progress_interval: int = 500

    def __post_init__(self) -> None:
        for name in ("alpha_min", "alpha_max", "alpha_step"):
            if not math.isfinite(getattr(self, name)):
                raise ConfigValidationError(f"{name} must be finite")
        if self.alpha_step <= 0:
            raise ConfigValidationError("alpha_step must be > 0")
        if self.alpha_max <= self.alpha_min:
            raise ConfigValidationError("alpha_max must be greater than alpha_min")
        if self.random_seed is None or self.random_seed < 0:
            raise ConfigValidationError("random_seed must be a non-negative integer")
        if self.progress_interval <= 0:
            raise ConfigValidationError("progress_interval must be > 0")

    @classmethod
    def from_dict(cls, data: Mapping) -> "EngineSettings":
        return cls(**data)

    def to_dict(self) -> dict:
        return asdict(self)


CASTERS = {
    "ks_correct": parse_bool,
    "alpha_min": float,
    "alpha_max": float,
    "alpha_step": float,
    "random_seed": int,
    "progress_interval": int,
}


def load_settings(overrides: Optional[Mapping] = None, environ: Optional[Mapping[str, str]] = None) -> EngineSettings:
    """Build settings from defaults, ``POWERLAW_*`` environment variables and overrides."""
    merged = load_config_with_precedence(
        env_prefix=ENV_PREFIX,
        defaults=EngineSettings().to_dict(),
        casters=CASTERS,
        overrides=overrides,
        environ=environ,
    )
    return EngineSettings.from_dict(merged)


_settings: EngineSettings = load_settings()


def get_settings() -> EngineSettings:
    return _settings


def configure(**overrides) -> EngineSettings:
    """Replace the process-wide settings, keeping unspecified fields."""
    global _settings
    unknown = set(overrides) - set(_settings.to_dict())
    if unknown:
        raise ConfigValidationError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
    _settings = replace(_settings, **{k: v for k, v in overrides.items() if v is not None})
    return _settings


@contextmanager
def override_settings(**overrides) -> Iterator[EngineSettings]:
    """Temporarily apply ``overrides`` to the process-wide settings."""
    global _settings
    previous = _settings
    try:
        yield configure(**overrides)
    finally:
        _settings = previous


__all__ = [
    "ENV_PREFIX",
    "RANDOM_SEED",
    "EngineSettings",
    "configure",
    "get_settings",
    "load_settings",
    "override_settings",
]
