"""
Tests for the generic A* engine on small hand-built graphs.
"""

import pytest

from burrow.search.a_star import a_star

# S -> A -> B is cheaper than S -> B; B -> G is expensive so the stale
# S -> B entry is popped before the goal.
GRAPH = {
    "S": [("A", 1), ("B", 5)],
    "A": [("B", 1)],
    "B": [("G", 10)],
    "G": [],
    "X": [],
}


def neighbors(s):
    return GRAPH[s]


def h0(s):
    return 0


class TestAStar:
    def test_finds_cheapest_path(self):
        res = a_star("S", "G", h0, neighbors_fn=neighbors)
        assert res["termination"] == "ok"
        assert res["g"] == 12
        assert res["path"] == ["S", "A", "B", "G"]

    def test_stale_entries_are_skipped(self):
        res = a_star("S", "G", h0, neighbors_fn=neighbors)
        assert res["stale"] == 1
        assert res["expanded"] == 3
        assert res["duplicates"] == 1

    def test_start_is_goal(self):
        res = a_star("G", "G", h0, neighbors_fn=neighbors)
        assert res["g"] == 0
        assert res["generated"] == 0
        assert res["expanded"] == 0
        assert res["path"] == ["G"]

    def test_exhausted(self):
        res = a_star("S", "X", h0, neighbors_fn=neighbors)
        assert res["termination"] == "exhausted"
        assert res["g"] is None
        assert res["path"] is None

    def test_expansion_limit(self):
        res = a_star("S", "G", h0, neighbors_fn=neighbors, max_expansions=1)
        assert res["termination"] == "limit"
        assert res["expanded"] == 1

    def test_timeout(self):
        res = a_star("S", "G", h0, neighbors_fn=neighbors, timeout_sec=-1.0)
        assert res["termination"] == "timeout"
        assert res["expanded"] == 0

    def test_without_path(self):
        res = a_star("S", "G", h0, neighbors_fn=neighbors, return_path=False)
        assert res["g"] == 12
        assert res["path"] is None

    @pytest.mark.parametrize("tie_break", ["h", "g", "fifo", "lifo"])
    def test_tie_breaks_agree(self, tie_break):
        res = a_star("S", "G", h0, neighbors_fn=neighbors, tie_break=tie_break)
        assert res["g"] == 12

    def test_heuristic_guides_order(self):
        h = {"S": 11, "A": 11, "B": 10, "G": 0, "X": 0}
        res = a_star("S", "G", h.get, neighbors_fn=neighbors)
        assert res["g"] == 12
        assert res["peak_closed"] == 4
