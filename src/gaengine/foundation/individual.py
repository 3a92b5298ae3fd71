"""
Individuals, populations and the descendant-count side table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Iterator, Sequence, TypeAlias

import numpy as np

Gene: TypeAlias = Hashable


@dataclass(frozen=True)
class Individual:
    """
    Immutable fixed-length gene sequence.

    Equality and hashing are structural (by gene tuple). Operators never
    modify an individual; ``replace`` and ``swap`` return new instances.
    """

    genes: tuple[Gene, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.genes, tuple):
            object.__setattr__(self, "genes", tuple(self.genes))

    @classmethod
    def of(cls, genes: Iterable[Gene]) -> Individual:
        return cls(tuple(genes))

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self) -> Iterator[Gene]:
        return iter(self.genes)

    def __getitem__(self, index: int) -> Gene:
        return self.genes[index]

    def __repr__(self) -> str:
        return f"Individual({list(self.genes)!r})"

    def replace(self, position: int, value: Gene) -> Individual:
        genes = list(self.genes)
        genes[position] = value
        return Individual(tuple(genes))

    def swap(self, first: int, second: int) -> Individual:
        genes = list(self.genes)
        genes[first], genes[second] = genes[second], genes[first]
        return Individual(tuple(genes))


Population: TypeAlias = list[Individual]


class DescendantStats:
    """
    Per-run count of how often each individual was chosen as a parent.

    Keyed by object identity rather than by value: two structurally equal
    individuals living in the same population are counted separately. The
    table holds a reference to every counted individual so identities stay
    unique while the entry exists. ``retain`` drops the entries of
    individuals that left the population; their counts stay in ``total``.
    """

    def __init__(self) -> None:
        self._entries: dict[int, tuple[Individual, int]] = {}
        self._retired = 0

    def increment(self, individual: Individual) -> int:
        key = id(individual)
        _, count = self._entries.get(key, (individual, 0))
        count += 1
        self._entries[key] = (individual, count)
        return count

    def count(self, individual: Individual) -> int:
        entry = self._entries.get(id(individual))
        return 0 if entry is None else entry[1]

    def total(self) -> int:
        return self._retired + sum(count for _, count in self._entries.values())

    def retain(self, population: Sequence[Individual]) -> None:
        """Keep only the entries of individuals present in ``population``."""
        alive = {id(ind) for ind in population}
        for key in [key for key in self._entries if key not in alive]:
            self._retired += self._entries.pop(key)[1]

    def clear(self) -> None:
        self._entries.clear()
        self._retired = 0

    def __len__(self) -> int:
        return len(self._entries)


def random_population(
    size: int,
    individual_length: int,
    alphabet: Sequence[Any],
    rng: np.random.Generator,
) -> Population:
    """Draw ``size`` individuals with genes sampled uniformly from ``alphabet``."""
    if size <= 0 or individual_length <= 0:
        raise ValueError("size and individual_length must be positive integers.")
    if not alphabet:
        raise ValueError("alphabet must not be empty.")
    symbols = list(alphabet)
    picks = rng.integers(0, len(symbols), size=(size, individual_length))
    return [Individual(tuple(symbols[int(j)] for j in row)) for row in picks]


def random_permutation_population(
    size: int,
    alphabet: Sequence[Any],
    rng: np.random.Generator,
) -> Population:
    """
    Draw ``size`` random orderings of ``alphabet`` using the random-keys method.
    """
    if size <= 0:
        raise ValueError("size must be a positive integer.")
    if not alphabet:
        raise ValueError("alphabet must not be empty.")
    symbols = list(alphabet)
    keys = rng.random((size, len(symbols)))
    orders = np.argsort(keys, axis=1)
    return [Individual(tuple(symbols[int(j)] for j in row)) for row in orders]


__all__ = [
    "Gene",
    "Individual",
    "Population",
    "DescendantStats",
    "random_population",
    "random_permutation_population",
]
