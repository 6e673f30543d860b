"""Tests for swap, segment reversal and double-bridge moves."""

import random

import pytest

from visit_routing.solvers.heuristics.moves import (
    MoveOperator,
    apply_move,
    double_bridge,
    double_bridge_at,
    reverse_segment,
    swap,
)


def test_double_bridge_reassembles_adcb():
    """A=[0,1], B=[2,3], C=[4,5], D=[6,7] recombine as A, D, C, B."""
    assert double_bridge_at(list(range(8)), (2, 4, 6)) == [0, 1, 6, 7, 4, 5, 2, 3]


def test_double_bridge_with_empty_tail():
    # D is empty when the last cut sits at n
    assert double_bridge_at([0, 1, 2, 3], (1, 2, 4)) == [0, 2, 3, 1]


@pytest.mark.parametrize("cuts", [(0, 2, 4), (2, 2, 4), (3, 2, 4), (1, 2, 9)])
def test_double_bridge_rejects_bad_cuts(cuts):
    with pytest.raises(ValueError):
        double_bridge_at(list(range(8)), cuts)


@pytest.mark.parametrize("n", [4, 5, 8, 13, 50])
def test_double_bridge_returns_a_different_permutation(n):
    rng = random.Random(n)
    tour = list(range(n))
    rng.shuffle(tour)

    for _ in range(200):
        out = double_bridge(tour, rng)
        assert sorted(out) == list(range(n))
        assert out != tour


def test_double_bridge_does_not_modify_input():
    tour = list(range(10))
    double_bridge(tour, random.Random(0))
    assert tour == list(range(10))


@pytest.mark.parametrize("n", [2, 3])
def test_double_bridge_small_tours_unchanged(n):
    tour = list(range(n))
    out = double_bridge(tour, random.Random(0))
    assert out == tour
    assert out is not tour


def test_double_bridge_is_seed_reproducible():
    tour = list(range(20))
    assert double_bridge(tour, random.Random(5)) == double_bridge(tour, random.Random(5))


@pytest.mark.parametrize("i,j", [(0, 1), (0, 7), (2, 5), (6, 3)])
def test_swap_is_self_inverse(i, j):
    tour = list(range(8))
    swap(tour, i, j)
    assert tour[i] == j and tour[j] == i
    swap(tour, i, j)
    assert tour == list(range(8))


@pytest.mark.parametrize("i,j", [(0, 7), (2, 5), (3, 3), (5, 2)])
def test_reverse_segment_is_self_inverse(i, j):
    tour = list(range(8))
    reverse_segment(tour, i, j)
    reverse_segment(tour, i, j)
    assert tour == list(range(8))


def test_reverse_segment_reverses_closed_range():
    tour = list(range(8))
    reverse_segment(tour, 2, 5)
    assert tour == [0, 1, 5, 4, 3, 2, 6, 7]


def test_apply_move_dispatches():
    tour = list(range(6))
    apply_move(MoveOperator.SWAP, tour, 1, 4)
    assert tour == [0, 4, 2, 3, 1, 5]

    tour = list(range(6))
    apply_move(MoveOperator.TWO_OPT, tour, 1, 4)
    assert tour == [0, 4, 3, 2, 1, 5]
