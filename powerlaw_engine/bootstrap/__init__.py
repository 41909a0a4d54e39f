"""Bootstrap significance and parameter uncertainty."""

from __future__ import annotations

from .significance import semiparametric_sample, significance, trials_for_epsilon
from .uncertainty import uncertainty

__all__ = ["semiparametric_sample", "significance", "trials_for_epsilon", "uncertainty"]
