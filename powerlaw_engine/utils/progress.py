"""Progress notifications for long bootstrap loops."""

from __future__ import annotations

from typing import Callable, Optional

from powerlaw_engine.utils.logging import get_logger

ProgressCallback = Callable[[int, int], None]

log = get_logger(__name__, component="progress")


class ProgressReporter:
    """Notify an observer every ``interval`` completed steps.

    The observer receives ``(completed, total)``; a log line is emitted at the
    same cadence whether or not an observer is attached.
    """

    def __init__(self, total: int, interval: int, callback: Optional[ProgressCallback] = None, label: str = "trials") -> None:
        self.total = total
        self.interval = interval
        self.callback = callback
        self.label = label

    def update(self, completed: int) -> None:
        if completed == 0 or completed % self.interval != 0:
            return
        log.info(f"finished {completed} {self.label} of {self.total}", extra={"trial": completed, "trials": self.total})
        if self.callback is not None:
            self.callback(completed, self.total)


__all__ = ["ProgressCallback", "ProgressReporter"]
