from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from burrow.domains.burrow import Burrow, State, unfold
from burrow.solver import DEPTHS, EXAMPLE_ROOMS, solve_with_stats

@dataclass
class Instance:
    layout: str
    depth: int
    state: State

def make_instances(layouts: List[Tuple[str, ...]], depths: List[int]) -> List[Instance]:
    """
    One instance per (layout, depth). Layouts are given as depth-2 rooms;
    depth 4 instances get the official extra rows inserted.
    """
    out: List[Instance] = []
    small = Burrow(2)
    for rooms in layouts:
        s2 = small.from_rooms(rooms)
        name = "-".join(rooms)
        for d in depths:
            out.append(Instance(layout=name, depth=d, state=s2 if d == 2 else unfold(s2)))
    return out

def parse_layout(text: str) -> Tuple[str, ...]:
    """'BA,CD,BC,DA' -> ('BA', 'CD', 'BC', 'DA')"""
    rooms = tuple(p.strip().upper() for p in text.split(","))
    if len(rooms) != 4:
        raise argparse.ArgumentTypeError(f"expected 4 comma-separated rooms, got {text!r}")
    return rooms

def main(argv=None):
    ap = argparse.ArgumentParser(description="A* / Dijkstra burrow-sorting experiment runner")
    ap.add_argument("--algo", choices=["a", "dijkstra", "both"], default="both",
                    help="'a' = greedy-match A*, 'dijkstra' = zero heuristic, 'both' = compare")
    ap.add_argument("--depths", type=int, nargs="+", choices=list(DEPTHS), default=[2])
    ap.add_argument("--layouts", type=parse_layout, nargs="+", default=[EXAMPLE_ROOMS],
                    help="Depth-2 rooms front-to-back, e.g. BA,CD,BC,DA")
    ap.add_argument("--tie_break", choices=["h","g","fifo","lifo"], default="h")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--max_expansions", type=int, default=None, help="Per-instance expansion ceiling")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    insts = make_instances(args.layouts, args.depths)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    header = [
        "algorithm","heuristic","depth","layout",
        "expanded","generated","duplicates","stale","g","time_sec",
        "peak_open","peak_closed","tie_break","termination",
    ]

    heuristics = {"a": ["greedy"], "dijkstra": ["zero"], "both": ["greedy", "zero"]}[args.algo]

    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(header)
        for inst in insts:
            for heur in heuristics:
                r = solve_with_stats(inst.state, inst.depth, heuristic=heur, tie_break=args.tie_break,
                                     timeout_sec=args.timeout_sec, max_expansions=args.max_expansions)
                w.writerow([
                    "A*" if heur != "zero" else "Dijkstra", heur, inst.depth, inst.layout,
                    r["expanded"], r["generated"], r["duplicates"], r["stale"], r["g"] if r["g"] is not None else "",
                    f"{r['time']:.6f}",
                    r["peak_open"], r["peak_closed"], r["tie_break"], r["termination"],
                ])
                print(f"{inst.layout} depth={inst.depth} {heur:<6} g={r['g']} "
                      f"expanded={r['expanded']} ({r['termination']}, {r['time']:.2f}s)")

    print(f"Wrote {args.out} ({len(insts)} instances)")

if __name__ == "__main__":
    main()
