"""End-to-end behavior of the GA control loop."""

from __future__ import annotations

import logging

import numpy as np
import pytest

import gaengine.engine.genetic_algorithm as ga_module
from gaengine.engine.config import GAConfig
from gaengine.engine.genetic_algorithm import GeneticAlgorithm
from gaengine.engine.termination import RunState, TerminationReason
from gaengine.foundation.cancellation import CancellationToken
from gaengine.foundation.exceptions import (
    IncompatibleOperatorsWarning,
    InvalidAlphabetError,
    InvalidPopulationError,
    InvalidProbabilityError,
)
from gaengine.foundation.individual import Individual, random_permutation_population, random_population
from gaengine.hooks.progress import HistoryProgressTracker

LENGTH = 12
BITS = (0, 1)


def onemax(ind: Individual) -> float:
    return float(sum(ind.genes))


def _bit_ga(seed: int = 7, mutation_probability: float = 0.1) -> GeneticAlgorithm:
    return GeneticAlgorithm(LENGTH, BITS, mutation_probability, seed, crossover="single_point", mutation="point")


def _bit_population(seed: int = 1, size: int = 10) -> list[Individual]:
    return random_population(size, LENGTH, BITS, np.random.default_rng(seed))


class PopulationRecorder:
    def __init__(self):
        self.calls: list[tuple[int, list[Individual]]] = []

    def track_progress(self, iteration, population):
        self.calls.append((iteration, list(population)))


def test_run_for_iterations_stops_exactly_at_limit():
    ga = _bit_ga()
    best = ga.run_for_iterations(_bit_population(), onemax, 10)
    assert ga.iterations == 10
    assert ga.population_size == 10
    assert ga.elapsed_ms >= 0.0
    assert ga.state is RunState.TERMINATED
    assert ga.stop_reason is TerminationReason.GOAL_REACHED
    assert len(best) == LENGTH


def test_zero_iterations_still_runs_one_generation():
    ga = _bit_ga()
    ga.run_for_iterations(_bit_population(), onemax, 0)
    assert ga.iterations == 1


def test_population_size_is_constant_and_trackers_see_every_generation():
    ga = _bit_ga()
    recorder = PopulationRecorder()
    ga.register_progress_tracker(recorder)
    ga.run_for_iterations(_bit_population(size=9), onemax, 5)

    # one notification per generation plus the final one
    assert [it for it, _ in recorder.calls] == [0, 1, 2, 3, 4, 5]
    assert all(len(pop) == 9 for _, pop in recorder.calls)
    assert all(len(ind) == LENGTH for _, pop in recorder.calls for ind in pop)
    assert recorder.calls[-1][1] == ga.last_population


def test_trackers_are_called_in_registration_order():
    ga = _bit_ga()
    order: list[str] = []
    ga.register_progress_tracker(lambda it, pop: order.append("first"))
    ga.register_progress_tracker(lambda it, pop: order.append("second"))
    ga.run_for_iterations(_bit_population(), onemax, 2)
    assert order == ["first", "second"] * 3


def test_best_fitness_never_decreases():
    ga = _bit_ga(seed=3, mutation_probability=0.5)
    history = HistoryProgressTracker(onemax)
    ga.register_progress_tracker(history)
    best = ga.run_for_iterations(_bit_population(seed=4), onemax, 30)
    curve = history.best_fitness_curve()
    assert all(b >= a for a, b in zip(curve, curve[1:]))
    assert best in ga.last_population


def test_negative_fitness_functions_are_supported():
    ga = _bit_ga(seed=5)
    history = HistoryProgressTracker(lambda ind: -onemax(ind) - 100.0)
    ga.register_progress_tracker(history)
    ga.run_for_iterations(_bit_population(seed=6), history.fitness_fn, 15)
    curve = history.best_fitness_curve()
    assert all(b >= a for a, b in zip(curve, curve[1:]))


def test_identical_seeds_reproduce_runs():
    rec1, rec2 = PopulationRecorder(), PopulationRecorder()
    ga1, ga2 = _bit_ga(seed=11), _bit_ga(seed=11)
    ga1.register_progress_tracker(rec1)
    ga2.register_progress_tracker(rec2)
    best1 = ga1.run_for_iterations(_bit_population(seed=2), onemax, 8)
    best2 = ga2.run_for_iterations(_bit_population(seed=2), onemax, 8)
    assert best1 == best2
    assert rec1.calls == rec2.calls


def test_from_config_seed_makes_runs_reproducible():
    cfg = (
        GAConfig.builder()
        .individual_length(LENGTH)
        .alphabet(BITS)
        .mutation_probability(0.2)
        .crossover("single_point")
        .seed(99)
        .build()
    )
    results = []
    for _ in range(2):
        ga = GeneticAlgorithm.from_config(cfg)
        ga.run_for_iterations(_bit_population(seed=8), onemax, 6)
        results.append(ga.last_population)
    assert results[0] == results[1]


def test_wrong_length_individual_is_rejected_before_any_generation():
    ga = _bit_ga()
    recorder = PopulationRecorder()
    ga.register_progress_tracker(recorder)
    population = _bit_population()
    population[3] = Individual((1, 0, 1))
    with pytest.raises(InvalidPopulationError):
        ga.run_for_iterations(population, onemax, 10)
    assert ga.iterations == 0
    assert ga.population_size == 0
    assert ga.elapsed_ms == 0.0
    assert recorder.calls == []
    assert ga.state is RunState.IDLE


def test_empty_population_is_rejected():
    with pytest.raises(InvalidPopulationError):
        _bit_ga().run_for_iterations([], onemax, 3)


def test_goal_test_stops_when_best_is_good_enough():
    ga = _bit_ga(seed=21, mutation_probability=0.3)
    best = ga.run(_bit_population(seed=22, size=20), onemax, lambda ind: onemax(ind) >= LENGTH, max_time_ms=20_000)
    assert ga.stop_reason is TerminationReason.GOAL_REACHED
    assert onemax(best) == LENGTH


def test_timeout_is_checked_after_each_generation(monkeypatch):
    class FakeStopwatch:
        def __init__(self):
            self.calls = 0

        def start(self):
            return None

        def elapsed_ms(self):
            self.calls += 1
            return 40.0 * self.calls

    monkeypatch.setattr(ga_module, "Stopwatch", FakeStopwatch)
    ga = _bit_ga()
    ga.run(_bit_population(), onemax, lambda ind: False, max_time_ms=100)
    assert ga.stop_reason is TerminationReason.TIMEOUT
    assert ga.iterations == 3
    assert ga.elapsed_ms == 120.0


def test_pre_cancelled_token_still_runs_one_generation():
    token = CancellationToken()
    token.cancel()
    ga = _bit_ga()
    ga.run(_bit_population(), onemax, lambda ind: False, cancellation=token)
    assert ga.iterations == 1
    assert ga.stop_reason is TerminationReason.CANCELLED


def test_cancellation_takes_effect_at_generation_boundary():
    token = CancellationToken()
    ga = _bit_ga()

    def cancel_on_third(iteration, population):
        if iteration == 2:
            token.cancel()

    ga.register_progress_tracker(cancel_on_third)
    ga.run(_bit_population(), onemax, lambda ind: False, cancellation=token)
    assert ga.iterations == 3
    assert ga.stop_reason is TerminationReason.CANCELLED


def test_fitness_failure_propagates_and_keeps_last_metrics():
    state = {"broken": False}

    def fragile(ind):
        if state["broken"]:
            raise RuntimeError("evaluator crashed")
        return onemax(ind)

    def break_after_second(iteration, population):
        if iteration == 1:
            state["broken"] = True

    ga = _bit_ga()
    ga.register_progress_tracker(break_after_second)
    with pytest.raises(RuntimeError, match="evaluator crashed"):
        ga.run_for_iterations(_bit_population(), fragile, 5)
    assert ga.iterations == 2


def test_descendant_counts_cover_every_parent_draw():
    ga = _bit_ga()
    ga.run_for_iterations(_bit_population(size=6), onemax, 10)
    assert ga.descendant_stats.total() == 2 * (6 - 1) * 10


def test_descendant_table_stays_bounded_by_population_size():
    size = 10
    ga = _bit_ga()
    ga.run_for_iterations(_bit_population(size=size), onemax, 300)
    assert len(ga.descendant_stats) <= size
    assert ga.descendant_stats.total() == 2 * (size - 1) * 300


def test_reset_metrics_zeroes_counters():
    ga = _bit_ga()
    ga.run_for_iterations(_bit_population(), onemax, 4)
    ga.reset_metrics()
    assert ga.get_metrics().as_dict() == {"population_size": 0, "iterations": 0, "elapsed_ms": 0.0}


def test_permutation_run_keeps_individuals_permutations():
    genes = tuple(range(8))
    rng = np.random.default_rng(13)
    ga = GeneticAlgorithm(8, genes, 0.3, rng, crossover="cyclic_order", mutation="swap")

    def sortedness(ind):
        return float(sum(1 for a, b in zip(ind.genes, ind.genes[1:]) if a < b))

    best = ga.run_for_iterations(random_permutation_population(12, genes, rng), sortedness, 25)
    assert sorted(best.genes) == list(genes)
    assert all(sorted(ind.genes) == list(genes) for ind in ga.last_population)


def test_default_operators_warn_about_permutation_mismatch():
    with pytest.warns(IncompatibleOperatorsWarning):
        GeneticAlgorithm(4, "ABCD", 0.1, 0)


def test_constructor_validates_arguments():
    with pytest.raises(InvalidProbabilityError):
        GeneticAlgorithm(4, BITS, 1.5)
    with pytest.raises(InvalidAlphabetError):
        GeneticAlgorithm(4, (), 0.1)
    with pytest.raises(TypeError):
        GeneticAlgorithm(4, BITS, 0.0, rng="seed")  # type: ignore[arg-type]


def test_run_logs_summary_and_generation_diagnostics(caplog):
    caplog.set_level(logging.DEBUG, logger="gaengine")
    _bit_ga().run_for_iterations(_bit_population(), onemax, 2)
    messages = [rec.getMessage() for rec in caplog.records]
    assert any(msg.startswith("Gen: 0 f_best:") for msg in messages)
    assert any("GA run finished after 2 generations" in msg for msg in messages)
