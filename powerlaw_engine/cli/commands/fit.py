"""Fit command: analyse observations given on the command line."""

from __future__ import annotations

from typing import List, Optional

import typer

from powerlaw_engine.cli.report import analyse, render
from powerlaw_engine.config.settings import configure
from powerlaw_engine.utils.logging import get_logger
from powerlaw_engine.utils.rng import make_rng, resolve_rng

log = get_logger(__name__, component="cli.fit")


def fit(
    values: List[float] = typer.Argument(..., help="Observations (integers for the discrete variants)"),
    variant: str = typer.Option("continuous", "--variant", "-v", help="continuous | discrete | discrete_approximate"),
    trials: Optional[int] = typer.Option(None, "--trials", help="Significance test with this many bootstrap trials"),
    epsilon: Optional[float] = typer.Option(None, "--epsilon", help="Significance test to this p-value precision"),
    bootstrap: int = typer.Option(0, "--bootstrap", help="Bootstrap replicates for parameter uncertainties (0 disables)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed (defaults to the configured seed)"),
    ks_correct: Optional[bool] = typer.Option(
        None, "--ks-correct/--no-ks-correct", help="Use (i+1)/n (corrected) or i/n for the empirical CDF"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """
    Fit a power law to VALUES and report x_min, exponent and KS distance.

    Example:
        powerlaw-engine fit 1 1 2 3 5 8 13 21 --variant discrete --epsilon 0.1
    """
    if ks_correct is not None:
        configure(ks_correct=ks_correct)
    rng = make_rng(seed) if seed is not None else resolve_rng()
    log.info("Fitting observations", extra={"variant": variant, "n_samples": len(values)})
    payload = analyse(values, variant=variant, rng=rng, trials=trials, epsilon=epsilon, bootstrap=bootstrap)
    render(f"Power-law fit ({len(values)} observations)", payload, as_json=as_json)
