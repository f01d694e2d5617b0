#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from burrow.domains.burrow import Burrow, DOORS, HALLWAY, State, Token, unfold
from burrow.experiments.runner import parse_layout
from burrow.solver import DEPTHS, EXAMPLE_ROOMS, SearchFailure, solve_with_stats

COLORS = {Token.A: "#e6550d", Token.B: "#31a354", Token.C: "#3182bd", Token.D: "#756bb1"}

def cell_xy(dom: Burrow, i: int):
    """Column/row of a cell on the 13x(depth+3) diagram (row 0 is the top wall)."""
    if i < HALLWAY:
        return i + 1, 1
    return DOORS[dom.room_of(i)] + 1, dom.depth_of(i) + 2

def draw_burrow(dom: Burrow, state: State, out_path: Path, title: str = ""):
    rows = dom.D + 3
    plt.figure(figsize=(6.5, rows / 2))
    ax = plt.gca()
    ax.set_xlim(0, 13); ax.set_ylim(0, rows)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis(); ax.set_aspect("equal")
    open_cells = {cell_xy(dom, i) for i in range(dom.size)}
    for x in range(13):
        for y in range(rows):
            if (x, y) not in open_cells:
                ax.add_patch(Rectangle((x, y), 1, 1, color="#444444"))
    for i in DOORS:
        x, y = cell_xy(dom, i)
        ax.add_patch(Rectangle((x, y), 1, 1, color="#dddddd"))
    for i, t in enumerate(state):
        if t == Token.EMPTY: continue
        x, y = cell_xy(dom, i)
        ax.add_patch(Rectangle((x + 0.1, y + 0.1), 0.8, 0.8, color=COLORS[Token(t)]))
        ax.text(x + 0.5, y + 0.55, Token(t).char, ha="center", va="center", fontsize=12, color="white")
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=150)
    plt.close()

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one burrow and save a frame per move along the path.")
    p.add_argument("--depth", type=int, choices=list(DEPTHS), default=2)
    p.add_argument("--layout", type=parse_layout, default=EXAMPLE_ROOMS, help="Depth-2 rooms, e.g. BA,CD,BC,DA")
    p.add_argument("--heuristic", choices=["greedy", "zero"], default="greedy")
    p.add_argument("--text", action="store_true", help="Print diagrams instead of saving images")
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    start = Burrow(2).from_rooms(args.layout)
    if args.depth == 4:
        start = unfold(start)
    dom = Burrow(args.depth)

    res = solve_with_stats(start, args.depth, heuristic=args.heuristic, return_path=True)
    if not res.get("path"):
        raise SearchFailure(res["termination"], res)

    path = res["path"]
    energy = 0
    costs = [0]
    for a, b in zip(path, path[1:]):
        energy += next(c for s, c in dom.neighbors(a) if s == b)
        costs.append(energy)

    if args.text:
        for i, (s, e) in enumerate(zip(path, costs)):
            print(f"step {i} (energy {e})")
            print(dom.render(s))
            print()
        return

    outdir = Path(args.outdir)
    for i, (s, e) in enumerate(zip(path, costs)):
        draw_burrow(dom, s, outdir / f"step_{i:03d}.png", title=f"step {i}  energy {e}")
    print(f"Saved {len(path)} frames to {outdir} (total energy {res['g']})")

if __name__ == "__main__":
    main()
