"""
Minimum-energy sorting of a burrow.

Binds a room depth to the burrow layout, the heuristic and the A* engine:

    >>> solve(example(2), 2)
    12521
"""
from __future__ import annotations
from typing import Callable, Dict, Optional, Sequence, Tuple

from burrow.domains.burrow import Burrow, MalformedConfiguration, State, unfold
from burrow.heuristics.greedy_match import greedy_match, zero
from burrow.search.a_star import a_star

__all__ = [
    "DEPTHS",
    "EXAMPLE_ROOMS",
    "MalformedConfiguration",
    "SearchFailure",
    "choose_heuristic",
    "example",
    "solve",
    "solve_with_stats",
]

DEPTHS: Tuple[int, ...] = (2, 4)
EXAMPLE_ROOMS: Tuple[str, ...] = ("BA", "CD", "BC", "DA")

HEURISTICS: Dict[str, Callable[[Burrow], Callable[[State], int]]] = {
    "greedy": greedy_match,
    "zero": lambda dom: zero,
}


class SearchFailure(RuntimeError):
    """The search stopped without reaching the goal."""
    def __init__(self, termination: str, result: dict):
        super().__init__(
            f"No solution found ({termination}) after expanding {result.get('expanded', 0)} states"
        )
        self.termination = termination
        self.result = result


def example(depth: int = 2) -> State:
    """The worked example layout, unfolded for depth 4."""
    s = Burrow(2).from_rooms(EXAMPLE_ROOMS)
    if depth == 4:
        return unfold(s)
    if depth != 2:
        raise ValueError(f"Room depth must be one of {DEPTHS}, got {depth}")
    return s


def choose_heuristic(name: str, dom: Burrow) -> Callable[[State], int]:
    try:
        return HEURISTICS[name.lower()](dom)
    except KeyError:
        raise ValueError(f"Unknown heuristic {name!r}, choose from {sorted(HEURISTICS)}") from None


def solve_with_stats(
    start: Sequence[int],
    depth: int,
    heuristic: str = "greedy",
    tie_break: str = "h",
    return_path: bool = False,
    timeout_sec: Optional[float] = None,
    max_expansions: Optional[int] = None,
) -> dict:
    """Validate start, run A* towards the depth's goal and return the full result dict."""
    if depth not in DEPTHS:
        raise ValueError(f"Room depth must be one of {DEPTHS}, got {depth}")
    dom = Burrow(depth)
    s0 = dom.validate(start)
    hfun = choose_heuristic(heuristic, dom)
    res = a_star(s0, dom.GOAL, hfun, neighbors_fn=dom.neighbors, tie_break=tie_break,
                 return_path=return_path, timeout_sec=timeout_sec, max_expansions=max_expansions)
    res["heuristic"] = heuristic
    res["depth"] = depth
    return res


def solve(start: Sequence[int], depth: int, **kwargs) -> int:
    """Least total energy to sort start; raises SearchFailure if the goal is never reached."""
    res = solve_with_stats(start, depth, **kwargs)
    if res["termination"] != "ok":
        raise SearchFailure(res["termination"], res)
    return res["g"]
