from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from gaengine.foundation.fitness import FitnessFunction, evaluate
from gaengine.foundation.individual import Individual


@dataclass
class ProgressRecord:
    iteration: int
    best_fitness: float
    average_fitness: float
    population_size: int


def summarize(iteration: int, population: Sequence[Individual], fitness_fn: FitnessFunction) -> ProgressRecord:
    values = evaluate(population, fitness_fn)
    if values.size == 0:
        return ProgressRecord(iteration, float("nan"), float("nan"), 0)
    return ProgressRecord(
        iteration=iteration,
        best_fitness=float(values.max()),
        average_fitness=float(values.mean()),
        population_size=int(values.size),
    )


@dataclass
class HistoryProgressTracker:
    """Keeps one ``ProgressRecord`` per notification, in order."""

    fitness_fn: FitnessFunction
    records: List[ProgressRecord] = field(default_factory=list)

    def track_progress(self, iteration: int, population: Sequence[Individual]) -> None:
        self.records.append(summarize(iteration, population, self.fitness_fn))

    def best_fitness_curve(self) -> list[float]:
        return [rec.best_fitness for rec in self.records]

    def clear(self) -> None:
        self.records.clear()


class LoggingProgressTracker:
    """Logs best and average fitness every ``every`` notifications."""

    def __init__(
        self,
        fitness_fn: FitnessFunction,
        *,
        every: int = 1,
        level: int = logging.INFO,
        logger: logging.Logger | None = None,
    ) -> None:
        if every <= 0:
            raise ValueError("every must be a positive integer.")
        self.fitness_fn = fitness_fn
        self.every = int(every)
        self.level = level
        self.logger = logger or logging.getLogger(__name__)
        self._calls = 0

    def track_progress(self, iteration: int, population: Sequence[Individual]) -> None:
        self._calls += 1
        if (self._calls - 1) % self.every != 0 or not self.logger.isEnabledFor(self.level):
            return
        rec = summarize(iteration, population, self.fitness_fn)
        self.logger.log(
            self.level,
            "iteration=%d best=%.6g average=%.6g size=%d",
            rec.iteration,
            rec.best_fitness,
            rec.average_fitness,
            rec.population_size,
        )


__all__ = ["ProgressRecord", "summarize", "HistoryProgressTracker", "LoggingProgressTracker"]
