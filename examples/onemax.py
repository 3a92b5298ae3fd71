"""
OneMax with gaengine.

Evolves bit strings towards all ones using single-point crossover and
point mutation, stopping when a perfect string appears or after two seconds.

Usage:
    python examples/onemax.py
"""
from __future__ import annotations

import logging

import numpy as np

from gaengine import GeneticAlgorithm, LoggingProgressTracker, configure_gaengine_logging, random_population

LENGTH = 40
BITS = (0, 1)


def onemax(individual) -> float:
    return float(sum(individual.genes))


def main():
    configure_gaengine_logging(level=logging.INFO)
    rng = np.random.default_rng(42)

    ga = GeneticAlgorithm(LENGTH, BITS, 0.2, rng, crossover="single_point", mutation="point")
    ga.register_progress_tracker(LoggingProgressTracker(onemax, every=25))

    population = random_population(50, LENGTH, BITS, rng)
    best = ga.run(population, onemax, lambda ind: onemax(ind) == LENGTH, max_time_ms=2000)

    print(f"Best: {''.join(str(g) for g in best.genes)} (fitness {onemax(best):.0f}/{LENGTH})")
    print(f"Stopped by {ga.stop_reason} after {ga.iterations} generations in {ga.elapsed_ms:.1f} ms")


if __name__ == "__main__":
    main()
