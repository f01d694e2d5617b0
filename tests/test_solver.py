"""
End-to-end tests for the burrow solver.
"""

import pytest

from burrow.domains.burrow import Burrow
from burrow.solver import (
    MalformedConfiguration,
    SearchFailure,
    choose_heuristic,
    example,
    solve,
    solve_with_stats,
)


class TestSolve:
    def test_depth_two_example(self):
        assert solve(example(2), 2) == 12521

    def test_depth_four_example(self):
        assert solve(example(4), 4) == 44169

    @pytest.mark.parametrize("depth, cost", [(2, 12521), (4, 44169)])
    def test_dijkstra_baseline_agrees(self, depth, cost):
        """The greedy heuristic must not change the optimum on either worked example."""
        assert solve(example(depth), depth, heuristic="zero") == cost

    def test_greedy_expands_fewer_states(self):
        greedy = solve_with_stats(example(2), 2)
        baseline = solve_with_stats(example(2), 2, heuristic="zero")
        assert greedy["g"] == baseline["g"]
        assert greedy["expanded"] <= baseline["expanded"]

    @pytest.mark.parametrize("depth", [2, 4])
    def test_already_solved(self, depth):
        res = solve_with_stats(Burrow(depth).GOAL, depth)
        assert res["g"] == 0
        assert res["generated"] == 0
        assert solve(Burrow(depth).GOAL, depth) == 0

    def test_one_move_left(self):
        dom = Burrow(2)
        s = dom.from_rooms([".A", "BB", "CC", "DD"], hallway="A..........")
        assert solve(s, 2) == 3

    def test_path_is_returned(self):
        dom = Burrow(2)
        s = dom.from_rooms([".A", "BB", "CC", "DD"], hallway="A..........")
        res = solve_with_stats(s, 2, return_path=True)
        assert res["path"] == [s, dom.GOAL]

    def test_accepts_lists(self):
        assert solve(list(Burrow(2).GOAL), 2) == 0


class TestFailures:
    def test_malformed_counts_rejected_before_search(self):
        dom = Burrow(2)
        with pytest.raises(MalformedConfiguration):
            solve(dom.from_rooms(["AA", "BB", "CC", "DA"]), 2)

    def test_wrong_depth_for_state(self):
        with pytest.raises(MalformedConfiguration):
            solve(example(2), 4)

    def test_unsupported_depth(self):
        with pytest.raises(ValueError):
            solve(Burrow(3).GOAL, 3)
        with pytest.raises(ValueError):
            example(3)

    def test_unknown_heuristic(self):
        with pytest.raises(ValueError):
            choose_heuristic("manhattan", Burrow(2))

    def test_token_on_door_rejected_before_search(self):
        dom = Burrow(2)
        s = dom.from_rooms([".A", "BB", "CC", "DD"], hallway="..A........")
        with pytest.raises(MalformedConfiguration):
            solve(s, 2)

    def test_deadlock_is_exhausted(self):
        """A waits behind D and D behind A in the hallway: no move is possible."""
        dom = Burrow(2)
        s = dom.from_rooms([".A", "BB", "CC", ".D"], hallway="...D.A.....")
        with pytest.raises(SearchFailure) as exc:
            solve(s, 2)
        assert exc.value.termination == "exhausted"
        assert exc.value.result["expanded"] == 1

    def test_expansion_ceiling(self):
        with pytest.raises(SearchFailure) as exc:
            solve(example(2), 2, max_expansions=5)
        assert exc.value.termination == "limit"
        assert exc.value.result["expanded"] == 5
