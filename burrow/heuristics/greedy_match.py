from __future__ import annotations
from typing import Callable, List, Tuple

from burrow.domains.burrow import Burrow, EMPTY, State, Token

Heuristic = Callable[[State], int]


def greedy_match(dom: Burrow) -> Heuristic:
    """
    Pair every room cell that lacks its own kind with the first unused
    misplaced token of that kind and sum distance * weight.

    Misplaced means not in its own room. Tokens sitting in their own room
    above a foreign one are not counted, so the estimate can undershoot;
    the greedy pairing has not been shown to never overshoot.
    """
    def h(s: State) -> int:
        misplaced: List[Tuple[int, int]] = [
            (i, t) for i, t in enumerate(s) if t != EMPTY and not dom.in_own_room(i, t)
        ]
        total = 0
        for cell in dom.room_cells:
            want = dom.room_of(cell) + 1
            if s[cell] == want:
                continue
            for k, (j, t) in enumerate(misplaced):
                if t == want:
                    total += dom.distance(cell, j) * Token(t).weight
                    del misplaced[k]
                    break
        return total
    return h


def zero(s: State) -> int:
    """Uniform-cost baseline (A* degenerates to Dijkstra)."""
    return 0
