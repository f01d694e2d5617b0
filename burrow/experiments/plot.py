#!/usr/bin/env python3
import sys, csv, os, argparse
from pathlib import Path
from collections import defaultdict
import statistics

import numpy as np
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

def _to_int(x):
    try: return int(x)
    except (TypeError, ValueError): return None

def _to_float(x):
    try: return float(x)
    except (TypeError, ValueError): return None

def read_rows(paths):
    rows = []
    for p in paths:
        with open(p, newline="") as f:
            for row in csv.DictReader(f):
                depth = _to_int(row.get("depth"))
                if not row.get("algorithm") or depth is None:
                    continue
                rows.append({
                    "algo": row["algorithm"],
                    "heuristic": row.get("heuristic", ""),
                    "depth": depth,
                    "expanded": _to_int(row.get("expanded")),
                    "generated": _to_int(row.get("generated")),
                    "peak_closed": _to_int(row.get("peak_closed")),
                    "time_sec": _to_float(row.get("time_sec")),
                })
    return rows

def agg_mean(rows, metric):
    buckets = defaultdict(lambda: defaultdict(list))  # algo -> depth -> [vals]
    for r in rows:
        v = r.get(metric)
        if v is None:
            continue
        buckets[r["algo"]][r["depth"]].append(v)
    return {algo: {d: statistics.mean(vs) for d, vs in by_depth.items()}
            for algo, by_depth in buckets.items()}

def plot_metric(ax, rows, metric, log=False):
    series = agg_mean(rows, metric)
    depths = sorted({d for by_depth in series.values() for d in by_depth})
    x = np.arange(len(depths))
    width = 0.8 / max(len(series), 1)
    for k, (algo, by_depth) in enumerate(sorted(series.items())):
        ys = [by_depth.get(d, 0) for d in depths]
        ax.bar(x + k * width - 0.4 + width / 2, ys, width, label=algo)
    ax.set_xticks(x)
    ax.set_xticklabels([f"depth {d}" for d in depths])
    ax.set_ylabel(metric)
    if log:
        ax.set_yscale("log")
    ax.set_title(f"{metric} by room depth")
    ax.grid(True, axis="y")
    ax.legend()

def save_fig(fig, outdir: Path, name: str):
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot burrow runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--log", action="store_true", help="Log-scale y axis")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    rows = read_rows(args.csv)
    if not rows:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "peak_closed", "time_sec"]):
        plot_metric(ax, rows, metric, log=args.log)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    if args.show:
        plt.show()
    plt.close("all")

if __name__ == "__main__":
    main()
