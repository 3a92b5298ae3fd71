"""Crossover strategies producing one child from two parents."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from gaengine.foundation.individual import Individual


def _check_parents(x: Individual, y: Individual) -> int:
    n = len(x)
    if len(y) != n:
        raise ValueError(f"Parents must have equal length, got {n} and {len(y)}.")
    if n == 0:
        raise ValueError("Parents must not be empty.")
    return n


class Crossover(ABC):
    """
    Base class for crossover strategies.

    ``draw_points`` consumes the random stream; ``apply`` is the
    deterministic recombination given those points.
    """

    name: str = "crossover"
    requires_permutation: bool = False

    @abstractmethod
    def draw_points(self, length: int, rng: np.random.Generator) -> tuple[int, ...]:
        raise NotImplementedError

    @abstractmethod
    def apply(self, x: Individual, y: Individual, *points: int) -> Individual:
        raise NotImplementedError

    def __call__(self, x: Individual, y: Individual, rng: np.random.Generator) -> Individual:
        n = _check_parents(x, y)
        return self.apply(x, y, *self.draw_points(n, rng))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SinglePointCrossover(Crossover):
    """Head of ``x`` up to a cut point, tail of ``y`` from it. Works for any alphabet."""

    name = "single_point"

    def draw_points(self, length: int, rng: np.random.Generator) -> tuple[int, ...]:
        return (int(rng.integers(0, length)),)

    def apply(self, x: Individual, y: Individual, *points: int) -> Individual:
        n = _check_parents(x, y)
        (cut,) = points
        if not 0 <= cut <= n:
            raise ValueError(f"cut point {cut} outside [0, {n}].")
        return Individual(x.genes[:cut] + y.genes[cut:])


class OrderCrossover(Crossover):
    """
    Order crossover (OX) for permutation encodings.

    ``x[lo:hi]`` is kept in place; the other positions are filled left to
    right with the genes of ``y`` in their relative order, skipping genes
    already present in the kept segment.
    """

    name = "order"
    requires_permutation = True

    def draw_points(self, length: int, rng: np.random.Generator) -> tuple[int, ...]:
        first = int(rng.integers(0, length))
        second = int(rng.integers(0, length))
        return (min(first, second), max(first, second))

    def apply(self, x: Individual, y: Individual, *points: int) -> Individual:
        n = _check_parents(x, y)
        lo, hi = points
        if not 0 <= lo <= hi <= n:
            raise ValueError(f"cut points must satisfy 0 <= lo <= hi <= {n}, got ({lo}, {hi}).")
        genes = set(x.genes)
        if len(genes) != n or genes != set(y.genes):
            raise ValueError("Order crossover needs both parents to be permutations of the same genes.")
        kept = set(x.genes[lo:hi])
        filler = iter([g for g in y.genes if g not in kept])
        child = [x.genes[pos] if lo <= pos < hi else next(filler) for pos in range(n)]
        return Individual(tuple(child))


class CyclicOrderCrossover(Crossover):
    """
    Order-preserving crossover over a wrapped segment.

    The segment ``[p1, p2)`` of ``x`` is read cyclically (it wraps past the
    end when ``p2 <= p1``, and spans the whole individual when they are
    equal) and stays in place. Genes of ``y`` that do not occur in it are
    written in order starting at position ``p2``, wrapping around.
    """

    name = "cyclic_order"
    requires_permutation = True

    def draw_points(self, length: int, rng: np.random.Generator) -> tuple[int, ...]:
        return int(rng.integers(0, length)), int(rng.integers(0, length))

    def apply(self, x: Individual, y: Individual, *points: int) -> Individual:
        n = _check_parents(x, y)
        p1, p2 = points
        if not (0 <= p1 < n and 0 <= p2 < n):
            raise ValueError(f"offsets must lie in [0, {n}), got ({p1}, {p2}).")
        end = p2 + n if p2 <= p1 else p2
        segment = {x.genes[j % n] for j in range(p1, end)}
        child = list(x.genes)
        k = p2
        for gene in y.genes:
            if gene not in segment:
                child[k % n] = gene
                k += 1
        return Individual(tuple(child))


__all__ = ["Crossover", "SinglePointCrossover", "OrderCrossover", "CyclicOrderCrossover"]
