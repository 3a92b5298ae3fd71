"""Deterministic tests for the mutation strategies."""

from __future__ import annotations

import numpy as np

from gaengine.foundation.individual import Individual
from gaengine.operators.mutation import PointMutation, SwapMutation

CHILD = Individual.of("ABCD")


def test_swap_mutation_exchanges_positions():
    assert SwapMutation().apply(CHILD, 0, 3).genes == ("D", "B", "C", "A")


def test_swap_mutation_same_position_is_noop(scripted_rng):
    assert SwapMutation()(CHILD, "ABCD", scripted_rng(ints=[2, 2])) == CHILD


def test_swap_mutation_draws_positions(scripted_rng):
    mutated = SwapMutation()(CHILD, "ABCD", scripted_rng(ints=[0, 3]))
    assert mutated.genes == ("D", "B", "C", "A")
    assert CHILD.genes == ("A", "B", "C", "D")


def test_point_mutation_replaces_with_drawn_symbol(scripted_rng):
    alphabet = ("A", "B", "C", "D", "E")
    mutated = PointMutation()(CHILD, alphabet, scripted_rng(ints=[1, 4]))
    assert mutated.genes == ("A", "E", "C", "D")


def test_point_mutation_may_keep_value(scripted_rng):
    mutated = PointMutation()(CHILD, ("A", "B"), scripted_rng(ints=[0, 0]))
    assert mutated == CHILD


def test_point_mutation_stays_in_alphabet():
    rng = np.random.default_rng(4)
    bits = Individual((0, 0, 0, 0))
    for _ in range(20):
        bits = PointMutation()(bits, (0, 1), rng)
        assert set(bits.genes) <= {0, 1}
        assert len(bits) == 4


def test_permutation_flags():
    assert SwapMutation.preserves_permutation
    assert not PointMutation.preserves_permutation
