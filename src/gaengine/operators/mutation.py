"""Mutation strategies perturbing a single child."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np

from gaengine.foundation.individual import Individual


class Mutation(ABC):
    """
    Base class for mutation strategies.

    ``preserves_permutation`` tells whether the operator keeps a permutation
    encoded individual a permutation.
    """

    name: str = "mutation"
    preserves_permutation: bool = True

    @abstractmethod
    def __call__(
        self,
        individual: Individual,
        alphabet: Sequence[Any],
        rng: np.random.Generator,
    ) -> Individual:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PointMutation(Mutation):
    """Replace one uniformly chosen gene with a uniformly chosen symbol (possibly the same one)."""

    name = "point"
    preserves_permutation = False

    def apply(self, individual: Individual, position: int, symbol: Any) -> Individual:
        return individual.replace(position, symbol)

    def __call__(
        self,
        individual: Individual,
        alphabet: Sequence[Any],
        rng: np.random.Generator,
    ) -> Individual:
        if len(individual) == 0:
            return individual
        if len(alphabet) == 0:
            raise ValueError("alphabet must not be empty.")
        position = int(rng.integers(0, len(individual)))
        symbol = alphabet[int(rng.integers(0, len(alphabet)))]
        return self.apply(individual, position, symbol)


class SwapMutation(Mutation):
    """Exchange the genes at two uniformly chosen positions; equal positions leave the child unchanged."""

    name = "swap"

    def apply(self, individual: Individual, first: int, second: int) -> Individual:
        return individual.swap(first, second)

    def __call__(
        self,
        individual: Individual,
        alphabet: Sequence[Any],
        rng: np.random.Generator,
    ) -> Individual:
        n = len(individual)
        if n == 0:
            return individual
        first = int(rng.integers(0, n))
        second = int(rng.integers(0, n))
        return self.apply(individual, first, second)


__all__ = ["Mutation", "PointMutation", "SwapMutation"]
