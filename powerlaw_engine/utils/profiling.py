"""Timing helpers for fits and bootstrap loops."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from powerlaw_engine.utils.logging import get_logger

log = get_logger(__name__, component="profiling")


@dataclass
class Timing:
    wall: float
    cpu: float


def _now() -> Timing:
    return Timing(wall=time.perf_counter(), cpu=time.process_time())


@contextmanager
def track_time(name: str, **context) -> Iterator[Timing]:
    """Log the wall and CPU time spent inside the block.

    Extra keyword arguments are attached to the log record (e.g. ``variant``).
    """
    start = _now()
    try:
        yield start
    finally:
        end = _now()
        wall_elapsed = end.wall - start.wall
        extra = {
            "segment": name,
            "duration_ms": round(wall_elapsed * 1000.0, 3),
            "cpu_seconds": round(end.cpu - start.cpu, 4),
            **context,
        }
        log.debug("Segment timing", extra=extra)


__all__ = ["Timing", "track_time"]
