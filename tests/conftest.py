from __future__ import annotations

from collections import deque
from typing import Iterable

import pytest


class ScriptedRng:
    """Stand-in random stream replaying fixed draws; fails loudly when a script runs dry."""

    def __init__(self, floats: Iterable[float] = (), ints: Iterable[int] = ()) -> None:
        self.floats = deque(floats)
        self.ints = deque(ints)

    def random(self) -> float:
        if not self.floats:
            raise AssertionError("unexpected random() draw")
        return self.floats.popleft()

    def integers(self, low: int, high: int | None = None) -> int:
        if high is None:
            low, high = 0, low
        if not self.ints:
            raise AssertionError("unexpected integers() draw")
        value = self.ints.popleft()
        assert low <= value < high, f"scripted draw {value} outside [{low}, {high})"
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRng
