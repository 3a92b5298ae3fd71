"""Generation pipeline, termination rules and the GA control loop."""

from .config import GAConfig
from .generation import GenerationBuilder, validate_population
from .genetic_algorithm import GeneticAlgorithm
from .termination import RunState, TerminationCheck, TerminationReason, iterations_reached

__all__ = [
    "GAConfig",
    "GenerationBuilder",
    "validate_population",
    "GeneticAlgorithm",
    "RunState",
    "TerminationCheck",
    "TerminationReason",
    "iterations_reached",
]
