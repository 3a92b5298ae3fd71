"""
Stopping rules evaluated at generation boundaries.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

from gaengine.foundation.cancellation import CancellationToken
from gaengine.foundation.fitness import GoalTest
from gaengine.foundation.individual import Individual


class RunState(str, Enum):
    """Lifecycle of a single run."""

    IDLE = "idle"
    INITIALIZING = "initializing"
    RUNNING = "running"
    TERMINATED = "terminated"

    def __str__(self) -> str:
        return self.value


class TerminationReason(str, Enum):
    """Which check ended the run, in the order they are evaluated."""

    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    GOAL_REACHED = "goal_reached"

    def __str__(self) -> str:
        return self.value


class Stopwatch:
    """Wall-clock milliseconds since ``start``."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start: float | None = None

    def start(self) -> None:
        self._start = self._clock()

    def elapsed_ms(self) -> float:
        if self._start is None:
            return 0.0
        return (self._clock() - self._start) * 1000.0


class TerminationCheck:
    """
    Timeout, cancellation and goal test, checked in that order.

    A ``max_time_ms`` of zero or less disables the timeout.
    """

    def __init__(
        self,
        goal_test: GoalTest,
        max_time_ms: float = 0,
        cancellation: CancellationToken | None = None,
    ) -> None:
        self.goal_test = goal_test
        self.max_time_ms = float(max_time_ms)
        self.cancellation = cancellation

    def timed_out(self, elapsed_ms: float) -> bool:
        return self.max_time_ms > 0 and elapsed_ms > self.max_time_ms

    def cancelled(self) -> bool:
        return self.cancellation is not None and self.cancellation.cancelled

    def __call__(self, best: Individual, elapsed_ms: float) -> TerminationReason | None:
        if self.timed_out(elapsed_ms):
            return TerminationReason.TIMEOUT
        if self.cancelled():
            return TerminationReason.CANCELLED
        if self.goal_test(best):
            return TerminationReason.GOAL_REACHED
        return None


def iterations_reached(iterations: Callable[[], int], max_iterations: int) -> GoalTest:
    """Goal test that ignores the individual and fires once ``iterations() >= max_iterations``."""

    def _goal(_best: Individual) -> bool:
        return iterations() >= max_iterations

    return _goal


__all__ = ["RunState", "TerminationReason", "Stopwatch", "TerminationCheck", "iterations_reached"]
