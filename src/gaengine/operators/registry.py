"""
Registry and resolution helpers for crossover and mutation strategies.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, TypeAlias

from gaengine.foundation.exceptions import IncompatibleOperatorsWarning, InvalidOperatorError
from gaengine.foundation.registry import Registry
from gaengine.operators.crossover import (
    Crossover,
    CyclicOrderCrossover,
    OrderCrossover,
    SinglePointCrossover,
)
from gaengine.operators.mutation import Mutation, PointMutation, SwapMutation

OperatorSpec: TypeAlias = str | tuple[str, dict[str, Any]]

DEFAULT_CROSSOVER = CyclicOrderCrossover.name
DEFAULT_MUTATION = PointMutation.name

_crossover_registry: Registry[type[Crossover]] | None = None
_mutation_registry: Registry[type[Mutation]] | None = None


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def get_crossover_registry() -> Registry[type[Crossover]]:
    global _crossover_registry
    if _crossover_registry is None:
        reg: Registry[type[Crossover]] = Registry("Crossover")
        reg.register(SinglePointCrossover.name, SinglePointCrossover)
        reg.register(OrderCrossover.name, OrderCrossover)
        reg.register("ox", OrderCrossover)
        reg.register(CyclicOrderCrossover.name, CyclicOrderCrossover)
        _crossover_registry = reg
    return _crossover_registry


def get_mutation_registry() -> Registry[type[Mutation]]:
    global _mutation_registry
    if _mutation_registry is None:
        reg: Registry[type[Mutation]] = Registry("Mutation")
        reg.register(PointMutation.name, PointMutation)
        reg.register(SwapMutation.name, SwapMutation)
        _mutation_registry = reg
    return _mutation_registry


def _split_spec(spec: OperatorSpec) -> tuple[str, dict[str, Any]]:
    if isinstance(spec, str):
        return spec.strip().lower(), {}
    name, kwargs = spec
    return str(name).strip().lower(), dict(kwargs or {})


def resolve_crossover(spec: Crossover | OperatorSpec | None) -> Crossover:
    """
    Build a crossover strategy from an instance, a name or a ``(name, kwargs)`` pair.

    ``None`` selects the default cyclic order crossover.
    """
    if spec is None:
        spec = DEFAULT_CROSSOVER
    if isinstance(spec, Crossover):
        return spec
    name, kwargs = _split_spec(spec)
    registry = get_crossover_registry()
    if name not in registry:
        raise InvalidOperatorError("crossover", name, available=registry.names())
    return registry.get(name)(**kwargs)


def resolve_mutation(spec: Mutation | OperatorSpec | None) -> Mutation:
    """Mutation counterpart of ``resolve_crossover``; defaults to point mutation."""
    if spec is None:
        spec = DEFAULT_MUTATION
    if isinstance(spec, Mutation):
        return spec
    name, kwargs = _split_spec(spec)
    registry = get_mutation_registry()
    if name not in registry:
        raise InvalidOperatorError("mutation", name, available=registry.names())
    return registry.get(name)(**kwargs)


def operators_compatible(crossover: Crossover, mutation: Mutation) -> bool:
    """
    Whether the pair agrees on the gene encoding.

    Permutation crossovers (order, cyclic order) look genes up by value, so
    they need a mutation that keeps every gene unique.
    """
    return not crossover.requires_permutation or mutation.preserves_permutation


def check_compatibility(crossover: Crossover, mutation: Mutation) -> bool:
    """Warn with ``IncompatibleOperatorsWarning`` when the pair can break permutations."""
    if operators_compatible(crossover, mutation):
        return True
    message = (
        f"{type(crossover).__name__} assumes permutation-encoded individuals but "
        f"{type(mutation).__name__} can introduce duplicate genes; use SwapMutation "
        f"or SinglePointCrossover instead."
    )
    _logger().debug(message)
    warnings.warn(message, IncompatibleOperatorsWarning, stacklevel=3)
    return False


__all__ = [
    "OperatorSpec",
    "DEFAULT_CROSSOVER",
    "DEFAULT_MUTATION",
    "get_crossover_registry",
    "get_mutation_registry",
    "resolve_crossover",
    "resolve_mutation",
    "operators_compatible",
    "check_compatibility",
]
