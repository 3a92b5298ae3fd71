"""
Fitness evaluation helpers and best-of-generation scan.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeAlias

import numpy as np

from gaengine.foundation.exceptions import InvalidPopulationError
from gaengine.foundation.individual import Individual

FitnessFunction: TypeAlias = Callable[[Individual], float]
GoalTest: TypeAlias = Callable[[Individual], bool]


def evaluate(population: Sequence[Individual], fitness_fn: FitnessFunction) -> np.ndarray:
    """Return the fitness of every individual, in population order."""
    return np.fromiter((float(fitness_fn(ind)) for ind in population), dtype=float, count=len(population))


def best_index(values: Sequence[float] | np.ndarray) -> int:
    """Index of the first maximum; NaN never counts as an improvement."""
    best = 0
    best_value = float("-inf")
    for idx, value in enumerate(values):
        if value > best_value:
            best = idx
            best_value = float(value)
    return best


def best_of(population: Sequence[Individual], fitness_fn: FitnessFunction) -> Individual:
    """
    Return the fittest individual of ``population``.

    The scan keeps the first individual reaching the maximum: the current
    best is only replaced on a strict improvement.

    Parameters
    ----------
    population : Sequence[Individual]
        Non-empty population.
    fitness_fn : FitnessFunction
        Scoring function, higher is better.

    Returns
    -------
    Individual
        The best individual (the first one when every score is ``-inf`` or NaN).
    """
    if not population:
        raise InvalidPopulationError("Cannot pick the best individual of an empty population.")
    return population[best_index(evaluate(population, fitness_fn))]


def average_fitness(population: Sequence[Individual], fitness_fn: FitnessFunction) -> float:
    if not population:
        raise InvalidPopulationError("Cannot average the fitness of an empty population.")
    return float(evaluate(population, fitness_fn).mean())


__all__ = ["FitnessFunction", "GoalTest", "evaluate", "best_index", "best_of", "average_fitness"]
