"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from powerlaw_engine.cli.commands.fit import fit
from powerlaw_engine.cli.commands.simulate import simulate
from powerlaw_engine.exceptions import (
    ConfigError,
    DataValidationError,
    DistributionFitError,
    InvalidParameterError,
)
from powerlaw_engine.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Power-law fitting and goodness-of-fit CLI")


app.command()(fit)
app.command()(simulate)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigError as exc:
        log.error(str(exc))
        raise SystemExit(1)
    except (DataValidationError, InvalidParameterError) as exc:
        log.error(f"Data validation failed: {exc}")
        raise SystemExit(2)
    except DistributionFitError as exc:
        log.error(f"Power-law fitting failed: {exc}")
        raise SystemExit(3)
    except KeyboardInterrupt:
        log.info("Interrupted")
        raise SystemExit(130)
    except Exception:
        log.exception("Unhandled exception")
        raise SystemExit(255)


if __name__ == "__main__":
    sys.exit(main())
