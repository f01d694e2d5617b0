#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m burrow.experiments.runner --depths 2 --algo both --out results/depth2.csv")
    run("python -m burrow.experiments.runner --depths 4 --algo both --out results/depth4.csv")
    run("python -m burrow.experiments.summarize results/depth2.csv results/depth4.csv --out results/summary.csv")
    run("python -m burrow.experiments.plot results/depth2.csv results/depth4.csv --log")

if __name__ == "__main__":
    main()
