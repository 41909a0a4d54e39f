"""Power-law model variants."""

from __future__ import annotations

from .models import FitResult, PowerLaw, Uncertainties, Variant, normalize_variant

__all__ = ["FitResult", "PowerLaw", "Uncertainties", "Variant", "normalize_variant"]
