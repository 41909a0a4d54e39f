"""Shared analysis pipeline and rendering for CLI commands."""

from __future__ import annotations

import json
from typing import Optional

from numpy.random import Generator
from rich.console import Console
from rich.table import Table

from powerlaw_engine.bootstrap import significance, uncertainty
from powerlaw_engine.fitting import fit
from powerlaw_engine.utils.logging import get_logger

log = get_logger(__name__, component="cli")


def analyse(
    sample,
    *,
    variant: str,
    rng: Generator,
    trials: Optional[int] = None,
    epsilon: Optional[float] = None,
    bootstrap: int = 0,
) -> dict:
    """Fit ``sample`` and optionally run the significance test and bootstrap."""
    result = fit(sample, variant)
    payload: dict = {"fit": result.to_dict()}
    if trials is not None or epsilon is not None:
        payload["p_value"] = significance(
            sample, trials, epsilon=epsilon, variant=variant, model=result.model, rng=rng
        )
    if bootstrap:
        payload["uncertainties"] = uncertainty(sample, bootstrap, variant=variant, rng=rng).to_dict()
    log.info(
        "Analysis complete",
        extra={"variant": result.variant, "n_samples": result.n, "x_min": result.x_min, "exponent": result.exponent},
    )
    return payload


def render(title: str, payload: dict, as_json: bool = False) -> None:
    console = Console()
    if as_json:
        console.print_json(json.dumps(payload))
        return

    fitted = payload["fit"]
    table = Table(title=title)
    table.add_column("Quantity")
    table.add_column("Value", justify="right")
    table.add_row("variant", fitted["variant"])
    table.add_row("x_min", f"{fitted['x_min']:g}")
    table.add_row("exponent", f"{fitted['exponent']:.4f}")
    table.add_row("KS distance", f"{fitted['ks_distance']:.4f}")
    table.add_row("tail size", f"{fitted['n_tail']} / {fitted['n']}")
    table.add_row("log-likelihood", f"{fitted['log_likelihood']:.4f}")
    if "p_value" in payload:
        table.add_row("p-value", f"{payload['p_value']:.4f}")
    if "uncertainties" in payload:
        spread = payload["uncertainties"]
        table.add_row("exponent std", f"{spread['exponent_std_dev']:.4f}")
        table.add_row("x_min std", f"{spread['x_min_std_dev']:.4f}")
        table.add_row("tail size std", f"{spread['tail_size_std_dev']:.4f}")
    console.print(table)
    if fitted["degenerate"]:
        console.print("[yellow]Warning:[/yellow] degenerate fit (non-finite exponent)")


__all__ = ["analyse", "render"]
