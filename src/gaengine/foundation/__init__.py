"""Core data types, errors and instrumentation shared by the engine."""

from .cancellation import CancellationToken
from .exceptions import (
    ConfigurationError,
    GAEngineError,
    IncompatibleOperatorsWarning,
    InvalidAlphabetError,
    InvalidOperatorError,
    InvalidPopulationError,
    InvalidProbabilityError,
    MissingConfigError,
)
from .fitness import FitnessFunction, GoalTest, average_fitness, best_index, best_of, evaluate
from .individual import (
    DescendantStats,
    Individual,
    Population,
    random_permutation_population,
    random_population,
)
from .metrics import Metrics
from .observer import CallbackTracker, ProgressTracker, as_tracker

__all__ = [
    "CancellationToken",
    "ConfigurationError",
    "GAEngineError",
    "IncompatibleOperatorsWarning",
    "InvalidAlphabetError",
    "InvalidOperatorError",
    "InvalidPopulationError",
    "InvalidProbabilityError",
    "MissingConfigError",
    "FitnessFunction",
    "GoalTest",
    "average_fitness",
    "best_index",
    "best_of",
    "evaluate",
    "DescendantStats",
    "Individual",
    "Population",
    "random_permutation_population",
    "random_population",
    "Metrics",
    "CallbackTracker",
    "ProgressTracker",
    "as_tracker",
]
