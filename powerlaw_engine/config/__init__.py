"""Configuration for the fitting engine."""

from __future__ import annotations

from .settings import EngineSettings, configure, get_settings, load_settings, override_settings

__all__ = ["EngineSettings", "configure", "get_settings", "load_settings", "override_settings"]
