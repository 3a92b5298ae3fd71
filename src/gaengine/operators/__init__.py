"""Selection, crossover and mutation strategies."""

from .crossover import Crossover, CyclicOrderCrossover, OrderCrossover, SinglePointCrossover
from .mutation import Mutation, PointMutation, SwapMutation
from .registry import (
    check_compatibility,
    get_crossover_registry,
    get_mutation_registry,
    operators_compatible,
    resolve_crossover,
    resolve_mutation,
)
from .selection import FitnessProportionateSelection, proportional_weights, select_index

__all__ = [
    "Crossover",
    "CyclicOrderCrossover",
    "OrderCrossover",
    "SinglePointCrossover",
    "Mutation",
    "PointMutation",
    "SwapMutation",
    "check_compatibility",
    "get_crossover_registry",
    "get_mutation_registry",
    "operators_compatible",
    "resolve_crossover",
    "resolve_mutation",
    "FitnessProportionateSelection",
    "proportional_weights",
    "select_index",
]
