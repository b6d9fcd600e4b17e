#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("A* vs BFS", "python -m eightpuzzle.experiments.runner --depths 6 10 14 18 --per_depth 10 --algo both --out results/astar_bfs.csv")
    run("A* solvable + unsolvable", "python -m eightpuzzle.experiments.runner --depths 6 10 14 --per_depth 5 --algo a --include_unsolvable --out results/astar_unsolvable.csv")
    run("Summary", "python -m eightpuzzle.experiments.analyze results/astar_bfs.csv results/astar_unsolvable.csv --all --out results/summary.csv")
    run("Plots", "python -m eightpuzzle.experiments.plot results/astar_bfs.csv --save results/plots")

if __name__ == "__main__":
    main()
