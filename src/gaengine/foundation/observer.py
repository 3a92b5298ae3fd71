from __future__ import annotations

from typing import Callable, Protocol, Sequence, runtime_checkable

from gaengine.foundation.individual import Individual


@runtime_checkable
class ProgressTracker(Protocol):
    """
    Observer notified once per generation with the freshly built population.

    Implementations must treat ``population`` as read-only: it is the
    committed next generation.
    """

    def track_progress(self, iteration: int, population: Sequence[Individual]) -> None:
        """Called after each generation and once more when the run terminates."""
        ...


class CallbackTracker:
    """Adapts a plain ``(iteration, population)`` callable to ``ProgressTracker``."""

    def __init__(self, callback: Callable[[int, Sequence[Individual]], None]) -> None:
        self.callback = callback

    def track_progress(self, iteration: int, population: Sequence[Individual]) -> None:
        self.callback(iteration, population)


def as_tracker(tracker: ProgressTracker | Callable[[int, Sequence[Individual]], None]) -> ProgressTracker:
    if isinstance(tracker, ProgressTracker):
        return tracker
    if callable(tracker):
        return CallbackTracker(tracker)
    raise TypeError("tracker must implement track_progress(iteration, population) or be callable.")


__all__ = ["ProgressTracker", "CallbackTracker", "as_tracker"]
