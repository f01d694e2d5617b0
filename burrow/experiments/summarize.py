#!/usr/bin/env python3
"""
Summarize runner CSVs: mean effort per (algorithm, heuristic, depth) and a
check that every algorithm found the same cost for each (layout, depth).
"""
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

METRICS = ["expanded", "generated", "stale", "peak_closed", "time_sec"]

def load(files: List[Path]) -> pd.DataFrame:
    frames = [pd.read_csv(p).assign(file=Path(p).name) for p in files]
    df = pd.concat(frames, ignore_index=True)
    df["termination"] = df["termination"].fillna("unknown")
    return df

def effort_table(df: pd.DataFrame) -> pd.DataFrame:
    return (df.groupby(["algorithm", "heuristic", "depth"])[METRICS]
              .mean()
              .round(3)
              .reset_index())

def cost_agreement(df: pd.DataFrame) -> pd.DataFrame:
    """One row per (layout, depth): distinct solved costs and whether they agree."""
    solved = df[df["termination"] == "ok"]
    agg = (solved.groupby(["layout", "depth"])["g"]
                 .agg(lambda s: sorted(set(int(v) for v in s)))
                 .rename("costs")
                 .reset_index())
    agg["agree"] = agg["costs"].map(lambda c: len(c) == 1)
    return agg

def speedup(df: pd.DataFrame) -> pd.DataFrame:
    """Dijkstra / A* ratio of expanded states per (layout, depth)."""
    piv = df.pivot_table(index=["layout", "depth"], columns="heuristic",
                         values="expanded", aggfunc="mean")
    if "greedy" not in piv or "zero" not in piv:
        return pd.DataFrame()
    piv["ratio"] = np.where(piv["greedy"] > 0, piv["zero"] / piv["greedy"], np.nan)
    return piv.reset_index()

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize burrow runner CSVs")
    ap.add_argument("csv", nargs="+", type=Path)
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the effort table")
    args = ap.parse_args(argv)

    df = load(args.csv)
    table = effort_table(df)
    print(table.to_string(index=False))

    agree = cost_agreement(df)
    print()
    print(agree.to_string(index=False))
    if not agree["agree"].all():
        print("WARNING: algorithms disagree on the optimal cost for some instances")

    sp = speedup(df)
    if not sp.empty:
        print()
        print(sp.to_string(index=False))

    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
