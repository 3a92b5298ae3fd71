"""
Cooperative cancellation for long-running runs.
"""

from __future__ import annotations

import threading


class CancellationToken:
    """
    Flag checked by the control loop once per generation boundary.

    ``cancel`` may be called from any thread; the run stops after the
    generation in progress completes.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"


__all__ = ["CancellationToken"]
