from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from gaengine.foundation.exceptions import InvalidPopulationError
from gaengine.foundation.fitness import FitnessFunction, evaluate
from gaengine.foundation.individual import DescendantStats, Individual


def proportional_weights(fitness: Sequence[float] | np.ndarray) -> np.ndarray:
    """
    Shift-and-normalize fitness values into selection probabilities.

    The minimum is subtracted so every weight is non-negative even for
    negative fitness. When all shifted weights are zero (every individual
    equally fit) the distribution is uniform.

    Non-finite scores are handled before shifting: ``-inf`` and NaN get zero
    weight and the shift uses the finite minimum. If any score is ``+inf``,
    those individuals share the whole probability mass. A population with no
    usable score at all is drawn uniformly.
    """
    f = np.asarray(fitness, dtype=float)
    if f.size == 0:
        raise InvalidPopulationError("Cannot build selection weights for an empty population.")
    top = np.isposinf(f)
    if top.any():
        return top / top.sum()
    finite = np.isfinite(f)
    if not finite.any():
        return np.full(f.size, 1.0 / f.size)
    shifted = np.where(finite, f - f[finite].min(), 0.0)
    total = shifted.sum()
    if total <= 0.0:
        return finite / finite.sum()
    return shifted / total


def _spin(cumulative: np.ndarray, u: float) -> int:
    idx = int(np.searchsorted(cumulative, u, side="left"))
    return min(idx, cumulative.size - 1)


def select_index(weights: np.ndarray, u: float) -> int:
    """
    Index of the first cumulative weight reaching ``u``.

    Falls back to the last index when rounding keeps the cumulative sum
    below ``u``.
    """
    return _spin(np.cumsum(weights), u)


class FitnessProportionateSelection:
    """
    Roulette-wheel selection on shifted, normalized fitness.

    Every pick consumes exactly one ``rng.random()`` draw and, when a
    ``DescendantStats`` table is attached, bumps the chosen parent's count.
    ``wheel`` builds the cumulative weights once so a whole generation can
    reuse them through ``spin_pair``.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        stats: DescendantStats | None = None,
    ) -> None:
        self.rng = rng or np.random.default_rng()
        self.stats = stats

    def wheel(self, population: Sequence[Individual], fitness: Sequence[float] | np.ndarray) -> np.ndarray:
        """Cumulative selection weights of ``population``."""
        pop_size = len(population)
        if pop_size == 0:
            raise InvalidPopulationError("population is empty.")
        if len(fitness) != pop_size:
            raise ValueError("fitness must have one value per individual.")
        return np.cumsum(proportional_weights(fitness))

    def _pick(self, population: Sequence[Individual], wheel: np.ndarray) -> Individual:
        u = float(self.rng.random())
        selected = population[_spin(wheel, u)]
        if self.stats is not None:
            self.stats.increment(selected)
        return selected

    def spin_pair(self, population: Sequence[Individual], wheel: np.ndarray) -> tuple[Individual, Individual]:
        """Two independent picks on a prebuilt wheel; both may be the same individual."""
        return self._pick(population, wheel), self._pick(population, wheel)

    def select(self, population: Sequence[Individual], fitness: Sequence[float] | np.ndarray) -> Individual:
        return self._pick(population, self.wheel(population, fitness))

    def select_pair(
        self,
        population: Sequence[Individual],
        fitness: Sequence[float] | np.ndarray,
    ) -> tuple[Individual, Individual]:
        return self.spin_pair(population, self.wheel(population, fitness))

    def __call__(self, population: Sequence[Individual], fitness_fn: FitnessFunction) -> Individual:
        return self.select(population, evaluate(population, fitness_fn))


__all__ = ["proportional_weights", "select_index", "FitnessProportionateSelection"]
