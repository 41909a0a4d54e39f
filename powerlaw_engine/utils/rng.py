"""Process-wide random source.

Every sampling and resampling operation takes an optional ``rng``. When it
is omitted the process default is used; that stream is seeded once at import
time from the configured seed and only changes when :func:`reseed` is called.
"""

from __future__ import annotations

from numpy.random import PCG64, Generator

from powerlaw_engine.config.settings import get_settings


def make_rng(seed: int | None = None) -> Generator:
    return Generator(PCG64(seed))


_default = make_rng(get_settings().random_seed)


def default_rng() -> Generator:
    return _default


def reseed(seed: int | None = None) -> Generator:
    """Replace the default stream; ``None`` uses the configured seed."""
    global _default
    _default = make_rng(get_settings().random_seed if seed is None else seed)
    return _default


def resolve_rng(rng: Generator | None = None) -> Generator:
    return _default if rng is None else rng


__all__ = ["default_rng", "make_rng", "reseed", "resolve_rng"]
