"""
Deferred callbacks driven by a virtual clock.

The host loop (or a test) advances time with update(dt); callbacks
whose delay has elapsed run in due order. Nothing here touches the wall
clock, so battle flow stays synchronously testable.

Usage:
    scheduler = Scheduler()
    task = scheduler.call_later(1.0, battle.enemy_turn)
    scheduler.update(0.5)   # nothing yet
    scheduler.update(0.5)   # enemy_turn() runs
    task.cancel()           # no-op once fired
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class ScheduledTask:
    """A single pending callback."""
    due: float
    callback: Callable[[], None]
    sequence: int = 0
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> bool:
        """
        Cancel the task.

        Returns:
            True if the task was still pending
        """
        if self.fired or self.cancelled:
            return False
        self.cancelled = True
        return True

    @property
    def pending(self) -> bool:
        """Check if the task is still waiting to run."""
        return not (self.fired or self.cancelled)


class Scheduler:
    """
    Virtual-clock task scheduler.

    Features:
    - call_later with cancellable handles
    - Tasks scheduled during update() wait for the next update()
    - Exceptions in callbacks are logged, not propagated
    """

    def __init__(self):
        self._time: float = 0.0
        self._tasks: list[ScheduledTask] = []
        self._counter = itertools.count()

    @property
    def time(self) -> float:
        """Current virtual time in seconds."""
        return self._time

    @property
    def pending(self) -> list[ScheduledTask]:
        """Tasks that have not run or been cancelled, in due order."""
        return sorted(
            (t for t in self._tasks if t.pending),
            key=lambda t: (t.due, t.sequence),
        )

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        """
        Schedule a callback.

        Args:
            delay: Seconds of virtual time to wait (negative treated as 0)
            callback: Zero-argument callable

        Returns:
            Handle that can cancel the task
        """
        task = ScheduledTask(
            due=self._time + max(0.0, delay),
            callback=callback,
            sequence=next(self._counter),
        )
        self._tasks.append(task)
        return task

    def update(self, dt: float) -> int:
        """
        Advance virtual time and run due tasks.

        Args:
            dt: Delta time in seconds

        Returns:
            Number of callbacks that ran
        """
        self._time += max(0.0, dt)
        due = [t for t in self.pending if t.due <= self._time]
        ran = 0

        for task in due:
            # An earlier callback may have cancelled this one
            if not task.pending:
                continue
            task.fired = True
            ran += 1
            try:
                task.callback()
            except Exception:
                logger.exception("Scheduled callback %r failed", task.callback)

        self._tasks = [t for t in self._tasks if t.pending]
        return ran

    def cancel_all(self) -> int:
        """Cancel every pending task. Returns how many were cancelled."""
        cancelled = sum(1 for t in self._tasks if t.cancel())
        self._tasks.clear()
        return cancelled
