"""
Generation pipeline: selection, crossover, mutation and elitism.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from gaengine.foundation.exceptions import InvalidPopulationError
from gaengine.foundation.fitness import FitnessFunction, evaluate
from gaengine.foundation.individual import DescendantStats, Individual, Population
from gaengine.foundation.observer import ProgressTracker
from gaengine.operators.crossover import Crossover
from gaengine.operators.mutation import Mutation
from gaengine.operators.selection import FitnessProportionateSelection


def validate_population(population: Sequence[Individual], individual_length: int) -> None:
    """
    Reject an empty population or any individual of the wrong length.

    Raises
    ------
    InvalidPopulationError
        On the first violation found.
    """
    if len(population) < 1:
        raise InvalidPopulationError(
            "Must start with at least a population of size 1.",
            individual_length=individual_length,
        )
    for idx, individual in enumerate(population):
        if len(individual) != individual_length:
            raise InvalidPopulationError(
                f"Individual {individual!r} at index {idx} is not the required length of {individual_length}.",
                individual_length=individual_length,
                index=idx,
            )


def notify_trackers(trackers: Sequence[ProgressTracker], iteration: int, population: Sequence[Individual]) -> None:
    for tracker in trackers:
        tracker.track_progress(iteration, population)


class GenerationBuilder:
    """
    Assembles one generation of constant size with an elitism factor of one.

    For each of the ``N - 1`` offspring the random stream is consumed in a
    fixed order: two selection draws, the crossover points, the mutation
    gate and, if it fires, the mutation draws.
    """

    def __init__(
        self,
        crossover: Crossover,
        mutation: Mutation,
        alphabet: Sequence[Any],
        mutation_probability: float,
        rng: np.random.Generator,
        stats: DescendantStats | None = None,
    ) -> None:
        self.crossover = crossover
        self.mutation = mutation
        self.alphabet = tuple(alphabet)
        self.mutation_probability = float(mutation_probability)
        self.rng = rng
        self.selection = FitnessProportionateSelection(rng=rng, stats=stats)

    def offspring(self, population: Sequence[Individual], wheel: np.ndarray) -> Individual:
        x, y = self.selection.spin_pair(population, wheel)
        child = self.crossover(x, y, self.rng)
        if self.rng.random() < self.mutation_probability:
            child = self.mutation(child, self.alphabet, self.rng)
        return child

    def build(
        self,
        population: Sequence[Individual],
        fitness_fn: FitnessFunction,
        elite: Individual,
        iteration: int = 0,
        trackers: Sequence[ProgressTracker] = (),
        fitness: np.ndarray | None = None,
    ) -> Population:
        """
        Build the next population from ``population``.

        Parameters
        ----------
        population : Sequence[Individual]
            Current generation.
        fitness_fn : FitnessFunction
            Scoring function; any exception it raises propagates.
        elite : Individual
            Best individual of ``population``, carried over unchanged as the last member.
        iteration : int
            Completed-generation count reported to the trackers.
        trackers : Sequence[ProgressTracker]
            Observers notified with the new population.
        fitness : np.ndarray | None
            Fitness of ``population`` if already computed.

        Returns
        -------
        Population
            Next generation, same size as ``population``.
        """
        if fitness is None:
            fitness = evaluate(population, fitness_fn)
        wheel = self.selection.wheel(population, fitness)
        next_population: Population = [self.offspring(population, wheel) for _ in range(len(population) - 1)]
        next_population.append(elite)
        notify_trackers(trackers, iteration, next_population)
        return next_population


__all__ = ["validate_population", "notify_trackers", "GenerationBuilder"]
