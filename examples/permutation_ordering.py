"""
Permutation search with cyclic order crossover and swap mutation.

Each individual is an ordering of the letters A-J; fitness counts the
adjacent pairs already in alphabetical order. Both operators keep every
individual a permutation, so no compatibility warning is raised.

Usage:
    python examples/permutation_ordering.py
"""
from __future__ import annotations

import numpy as np

from gaengine import GeneticAlgorithm, HistoryProgressTracker, random_permutation_population

LETTERS = tuple("ABCDEFGHIJ")


def sortedness(individual) -> float:
    genes = individual.genes
    return float(sum(1 for a, b in zip(genes, genes[1:]) if a < b))


def main():
    rng = np.random.default_rng(3)
    ga = GeneticAlgorithm(len(LETTERS), LETTERS, 0.3, rng, crossover="cyclic_order", mutation="swap")
    history = ga.register_progress_tracker(HistoryProgressTracker(sortedness))

    population = random_permutation_population(30, LETTERS, rng)
    best = ga.run_for_iterations(population, sortedness, 200)

    curve = history.best_fitness_curve()
    print(f"Best ordering: {''.join(best.genes)} (score {sortedness(best):.0f}/{len(LETTERS) - 1})")
    print(f"Best score at generations 0/50/100/200: {curve[0]}, {curve[50]}, {curve[100]}, {curve[-1]}")


if __name__ == "__main__":
    main()
