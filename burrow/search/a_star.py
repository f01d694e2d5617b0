from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, List, Optional, Tuple
import heapq
from time import perf_counter
import math
import itertools

State = Hashable
NeighborsFn = Callable[[State], List[Tuple[State, int]]]

def reconstruct_path(node: Optional["PQItem"]) -> List[State]:
    path: List[State] = []
    while node is not None:
        path.append(node.state)
        node = node.parent
    path.reverse()
    return path

@dataclass
class PQItem:
    f: int
    h: int
    g: int
    state: State
    parent: Optional["PQItem"] = None

def a_star(
    start: State,
    goal: State,
    hfun: Callable[[State], int],
    neighbors_fn: NeighborsFn,
    tie_break: str = "h",
    return_path: bool = True,
    timeout_sec: float | None = None,
    max_expansions: int | None = None,
):
    """
    A* with lazy deletion and instrumentation.

    Entries are never removed from the heap when a cheaper path turns up;
    a popped entry whose g is worse than the best known g is skipped as stale.
    There is no closed set: a state is re-expanded whenever a cheaper path
    to it is found.
    """
    t0 = perf_counter()

    open_heap: List[Tuple[Tuple[int, int, int], int, PQItem]] = []
    counter = itertools.count()

    def priority_tuple(f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
        if tie_break == "h":   return (f, h, ctr)
        if tie_break == "g":   return (f, -g, ctr)
        if tie_break == "fifo":return (f, 0,  ctr)
        if tie_break == "lifo":return (f, 0, -ctr)
        return (f, h, ctr)

    h0 = hfun(start)
    start_item = PQItem(f=h0, h=h0, g=0, state=start, parent=None)
    heapq.heappush(open_heap, (priority_tuple(h0, 0, h0, next(counter)), next(counter), start_item))

    best_g: Dict[State, int] = {start: 0}

    expanded = 0
    generated = 0
    duplicates = 0
    stale = 0
    peak_open = 1

    def finish(termination: str, node: Optional[PQItem] = None):
        return {
            "path": reconstruct_path(node) if (node is not None and return_path) else None,
            "g": node.g if node is not None else None,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "stale": stale,
            "peak_open": peak_open,
            "peak_closed": len(best_g),
            "time": perf_counter() - t0,
            "algorithm": "A*",
            "tie_break": tie_break,
            "termination": termination,
        }

    while open_heap:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return finish("timeout")
        if max_expansions is not None and expanded >= max_expansions:
            return finish("limit")

        peak_open = max(peak_open, len(open_heap))
        _, _, node = heapq.heappop(open_heap)

        if node.state == goal:
            return finish("ok", node)

        if node.g > best_g.get(node.state, math.inf):
            # a cheaper path to this state was pushed after this entry
            stale += 1
            continue

        expanded += 1
        for s2, c in neighbors_fn(node.state):
            g2 = node.g + c
            generated += 1
            known = best_g.get(s2)
            if known is not None:
                duplicates += 1
                if g2 >= known:
                    continue
            best_g[s2] = g2
            h2 = hfun(s2)
            f2 = g2 + h2
            child = PQItem(f=f2, h=h2, g=g2, state=s2, parent=node if return_path else None)
            pr = priority_tuple(f2, g2, h2, next(counter))
            heapq.heappush(open_heap, (pr, next(counter), child))

    # Open exhausted without finding goal
    return finish("exhausted")
