"""
gaengine - a genetic algorithm engine for fixed-length gene sequences.

Example:
    import numpy as np
    from gaengine import GeneticAlgorithm, random_population

    rng = np.random.default_rng(7)
    population = random_population(20, 16, (0, 1), rng)
    ga = GeneticAlgorithm(16, (0, 1), 0.05, rng, crossover="single_point")
    best = ga.run_for_iterations(population, lambda ind: sum(ind), 50)
"""

__version__ = "0.1.0"

from .engine import (
    GAConfig,
    GeneticAlgorithm,
    RunState,
    TerminationReason,
)
from .foundation import (
    CancellationToken,
    ConfigurationError,
    DescendantStats,
    GAEngineError,
    IncompatibleOperatorsWarning,
    Individual,
    InvalidPopulationError,
    Metrics,
    ProgressTracker,
    average_fitness,
    best_of,
    random_permutation_population,
    random_population,
)
from .foundation.logging import configure_gaengine_logging
from .hooks import HistoryProgressTracker, LoggingProgressTracker
from .operators import (
    CyclicOrderCrossover,
    FitnessProportionateSelection,
    OrderCrossover,
    PointMutation,
    SinglePointCrossover,
    SwapMutation,
)

__all__ = [
    "GAConfig",
    "GeneticAlgorithm",
    "RunState",
    "TerminationReason",
    "CancellationToken",
    "ConfigurationError",
    "DescendantStats",
    "GAEngineError",
    "IncompatibleOperatorsWarning",
    "Individual",
    "InvalidPopulationError",
    "Metrics",
    "ProgressTracker",
    "average_fitness",
    "best_of",
    "random_permutation_population",
    "random_population",
    "configure_gaengine_logging",
    "HistoryProgressTracker",
    "LoggingProgressTracker",
    "CyclicOrderCrossover",
    "FitnessProportionateSelection",
    "OrderCrossover",
    "PointMutation",
    "SinglePointCrossover",
    "SwapMutation",
]
