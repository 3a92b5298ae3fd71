"""
Genetic algorithm control loop.

The loop follows the classic formulation: each generation picks two parents
per offspring by fitness-proportionate selection, recombines them, mutates
the child with a small probability and carries the previous best over
unchanged. The run stops on a wall-clock budget, a cooperative cancellation
request or a goal test, all checked once per generation.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence

import numpy as np

from gaengine.engine.config import GAConfig, validate_alphabet, validate_length, validate_probability
from gaengine.engine.generation import GenerationBuilder, notify_trackers, validate_population
from gaengine.engine.termination import (
    RunState,
    Stopwatch,
    TerminationCheck,
    TerminationReason,
    iterations_reached,
)
from gaengine.foundation.cancellation import CancellationToken
from gaengine.foundation.fitness import FitnessFunction, GoalTest, best_index, evaluate
from gaengine.foundation.individual import DescendantStats, Individual, Population
from gaengine.foundation.metrics import ELAPSED_MS, ITERATIONS, POPULATION_SIZE, Metrics
from gaengine.foundation.observer import ProgressTracker, as_tracker
from gaengine.operators.crossover import Crossover
from gaengine.operators.mutation import Mutation
from gaengine.operators.registry import OperatorSpec, check_compatibility, resolve_crossover, resolve_mutation


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _resolve_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    # Duck-typed streams (anything offering random() and integers()) are used as-is.
    if callable(getattr(rng, "random", None)) and callable(getattr(rng, "integers", None)):
        return rng
    raise TypeError("rng must be a numpy Generator, an integer seed or None.")


class GeneticAlgorithm:
    """
    Single-objective genetic algorithm over fixed-length gene sequences.

    Parameters
    ----------
    individual_length : int
        Number of genes in every individual.
    alphabet : Iterable[Any]
        Distinct symbols genes are drawn from (used by point mutation).
    mutation_probability : float
        Probability in [0, 1] that an offspring is mutated.
    rng : np.random.Generator | int | None
        Random stream or seed. Every random decision of the run is drawn from
        it, so a seeded stream makes runs reproducible.
    crossover : Crossover | OperatorSpec | None
        Crossover strategy; defaults to the cyclic order crossover.
    mutation : Mutation | OperatorSpec | None
        Mutation strategy; defaults to point mutation.
    """

    def __init__(
        self,
        individual_length: int,
        alphabet: Iterable[Any],
        mutation_probability: float,
        rng: np.random.Generator | int | None = None,
        *,
        crossover: Crossover | OperatorSpec | None = None,
        mutation: Mutation | OperatorSpec | None = None,
    ) -> None:
        self.individual_length = validate_length(individual_length)
        self.alphabet = validate_alphabet(alphabet)
        self.mutation_probability = validate_probability("mutation_probability", mutation_probability)
        self.rng = _resolve_rng(rng)
        self.crossover = resolve_crossover(crossover)
        self.mutation = resolve_mutation(mutation)
        if self.mutation_probability > 0.0:
            check_compatibility(self.crossover, self.mutation)

        self.metrics = Metrics()
        self.metrics.clear()
        self.descendant_stats = DescendantStats()
        self.state = RunState.IDLE
        self.stop_reason: TerminationReason | None = None
        self.last_population: Population = []
        self._trackers: list[ProgressTracker] = []
        self._builder = GenerationBuilder(
            crossover=self.crossover,
            mutation=self.mutation,
            alphabet=self.alphabet,
            mutation_probability=self.mutation_probability,
            rng=self.rng,
            stats=self.descendant_stats,
        )

    @classmethod
    def from_config(cls, cfg: GAConfig, rng: np.random.Generator | int | None = None) -> GeneticAlgorithm:
        """Build from a ``GAConfig``; ``rng`` falls back to ``cfg.seed``."""
        return cls(
            cfg.individual_length,
            cfg.alphabet,
            cfg.mutation_probability,
            rng if rng is not None else cfg.seed,
            crossover=cfg.crossover,
            mutation=cfg.mutation,
        )

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def register_progress_tracker(
        self,
        tracker: ProgressTracker | Callable[[int, Sequence[Individual]], None],
    ) -> ProgressTracker:
        """Add an observer; observers are notified in registration order."""
        adapted = as_tracker(tracker)
        self._trackers.append(adapted)
        return adapted

    @property
    def progress_trackers(self) -> tuple[ProgressTracker, ...]:
        return tuple(self._trackers)

    def get_metrics(self) -> Metrics:
        return self.metrics

    @property
    def population_size(self) -> int:
        return self.metrics.get_int(POPULATION_SIZE)

    @property
    def iterations(self) -> int:
        return self.metrics.get_int(ITERATIONS)

    @property
    def elapsed_ms(self) -> float:
        return self.metrics.get_float(ELAPSED_MS)

    def reset_metrics(self) -> None:
        """Zero the counters; meant to be called between runs."""
        self.metrics.clear()

    def update_metrics(self, population: Sequence[Individual], iterations: int, elapsed_ms: float) -> None:
        self.metrics.update_run(len(population), iterations, elapsed_ms)

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------

    def run_for_iterations(
        self,
        initial_population: Iterable[Individual],
        fitness_fn: FitnessFunction,
        max_iterations: int,
        cancellation: CancellationToken | None = None,
    ) -> Individual:
        """Run exactly ``max_iterations`` generations (at least one), without a time bound."""
        goal_test = iterations_reached(lambda: self.iterations, int(max_iterations))
        return self.run(initial_population, fitness_fn, goal_test, 0, cancellation=cancellation)

    def run(
        self,
        initial_population: Iterable[Individual],
        fitness_fn: FitnessFunction,
        goal_test: GoalTest,
        max_time_ms: float = 0,
        cancellation: CancellationToken | None = None,
    ) -> Individual:
        """
        Evolve ``initial_population`` until a stopping rule fires.

        At least one generation always runs. After each generation the
        timeout (only when ``max_time_ms > 0``), the cancellation token and
        ``goal_test`` on that generation's best individual are checked in
        that order.

        Returns
        -------
        Individual
            Best individual of the last evaluated population. Elitism keeps
            it in the final population too.

        Raises
        ------
        InvalidPopulationError
            Before any generation when the population is empty or holds an
            individual of the wrong length. Metrics are left untouched.
        """
        population: Population = list(initial_population)
        validate_population(population, self.individual_length)

        self.state = RunState.INITIALIZING
        self.stop_reason = None
        self.descendant_stats.clear()
        self.update_metrics(population, 0, 0.0)
        check = TerminationCheck(goal_test, max_time_ms=max_time_ms, cancellation=cancellation)
        stopwatch = Stopwatch()
        stopwatch.start()
        _logger().info(
            "Starting GA run: population=%d, length=%d, crossover=%s, mutation=%s, p_mut=%.3f",
            len(population),
            self.individual_length,
            self.crossover.name,
            self.mutation.name,
            self.mutation_probability,
        )

        self.state = RunState.RUNNING
        iteration = 0
        try:
            while True:
                fitness = evaluate(population, fitness_fn)
                best_idx = best_index(fitness)
                best = population[best_idx]
                population = self._builder.build(
                    population,
                    fitness_fn,
                    best,
                    iteration=self.iterations,
                    trackers=self._trackers,
                    fitness=fitness,
                )
                self.last_population = population
                self.descendant_stats.retain(population)
                iteration += 1
                elapsed = stopwatch.elapsed_ms()
                self.update_metrics(population, iteration, elapsed)
                if _logger().isEnabledFor(logging.DEBUG):
                    _logger().debug(
                        "Gen: %d f_best: %s f_average: %s",
                        iteration - 1,
                        float(fitness[best_idx]),
                        float(evaluate(population, fitness_fn).mean()),
                    )

                reason = check(best, elapsed)
                if reason is not None:
                    self.stop_reason = reason
                    break
        finally:
            self.state = RunState.TERMINATED

        notify_trackers(self._trackers, self.iterations, population)
        _logger().info(
            "GA run finished after %d generations in %.1f ms (%s)",
            self.iterations,
            self.elapsed_ms,
            self.stop_reason,
        )
        return best


__all__ = ["GeneticAlgorithm"]
