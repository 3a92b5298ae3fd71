"""
Run instrumentation counters.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

POPULATION_SIZE = "population_size"
ITERATIONS = "iterations"
ELAPSED_MS = "elapsed_ms"


class Metrics(Mapping[str, float]):
    """
    Named numeric counters, overwritten wholesale after every generation.

    Reads of unknown counters return zero.
    """

    def __init__(self) -> None:
        self._values: dict[str, float] = {}

    def set(self, key: str, value: float) -> None:
        self._values[key] = value

    def get_int(self, key: str) -> int:
        return int(self._values.get(key, 0))

    def get_float(self, key: str) -> float:
        return float(self._values.get(key, 0.0))

    def update_run(self, population_size: int, iterations: int, elapsed_ms: float) -> None:
        self.set(POPULATION_SIZE, int(population_size))
        self.set(ITERATIONS, int(iterations))
        self.set(ELAPSED_MS, float(elapsed_ms))

    def clear(self) -> None:
        self.update_run(0, 0, 0.0)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __getitem__(self, key: str) -> float:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Metrics({self._values!r})"


__all__ = ["Metrics", "POPULATION_SIZE", "ITERATIONS", "ELAPSED_MS"]
