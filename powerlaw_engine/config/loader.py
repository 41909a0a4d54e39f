"""Merge configuration from defaults, environment and explicit overrides."""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, Mapping, Optional

from powerlaw_engine.exceptions import ConfigValidationError


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def load_config_with_precedence(
    *,
    env_prefix: str,
    defaults: Mapping[str, Any],
    casters: Mapping[str, Callable[[Any], Any]],
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Return merged settings: defaults < ``{env_prefix}KEY`` variables < overrides.

    Override values of ``None`` are treated as "not given".
    """

    env = os.environ if environ is None else environ
    merged: Dict[str, Any] = dict(defaults)

    for key in defaults:
        raw = env.get(f"{env_prefix}{key.upper()}")
        if raw is None or raw == "":
            continue
        caster = casters.get(key, str)
        try:
            merged[key] = caster(raw)
        except (TypeError, ValueError) as exc:
            raise ConfigValidationError(f"Invalid value for {env_prefix}{key.upper()}: {raw!r}") from exc

    for key, value in (overrides or {}).items():
        if key not in defaults:
            raise ConfigValidationError(f"Unknown setting: {key}")
        if value is not None:
            merged[key] = value

    return merged


__all__ = ["load_config_with_precedence", "parse_bool"]
