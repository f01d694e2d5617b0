"""
Tests for the greedy slot/token pairing heuristic.
"""

import pytest

from burrow.domains.burrow import Burrow
from burrow.heuristics.greedy_match import greedy_match, zero
from burrow.solver import example


class TestGreedyMatch:
    @pytest.mark.parametrize("depth", [2, 4])
    def test_goal_is_zero(self, depth):
        dom = Burrow(depth)
        assert greedy_match(dom)(dom.GOAL) == 0

    @pytest.mark.parametrize("depth", [2, 4])
    def test_example_is_positive(self, depth):
        dom = Burrow(depth)
        assert greedy_match(dom)(example(depth)) > 0

    def test_single_hallway_token(self):
        """One A in the hallway, its room's front cell open: exact remaining cost."""
        dom = Burrow(2)
        s = dom.from_rooms([".A", "BB", "CC", "DD"], hallway="A..........")
        assert greedy_match(dom)(s) == 3

    def test_weight_applies(self):
        dom = Burrow(2)
        s = dom.from_rooms(["AA", "BB", "CC", ".D"], hallway="..........D")
        assert greedy_match(dom)(s) == (10 - 8 + 1) * 1000

    def test_swapped_fronts(self):
        """Two tokens in each other's front cell: each pays door-to-door plus two steps."""
        dom = Burrow(2)
        s = dom.from_rooms(["BA", "AB", "CC", "DD"])
        assert greedy_match(dom)(s) == 4 * 1 + 4 * 10

    def test_never_negative_on_neighbors(self):
        dom = Burrow(2)
        h = greedy_match(dom)
        assert all(h(s) >= 0 for s, _ in dom.neighbors(example(2)))


def test_zero():
    assert zero(example(4)) == 0
