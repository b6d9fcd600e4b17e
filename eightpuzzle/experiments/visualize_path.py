#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.domains.puzzle8 import State, scramble
from eightpuzzle.search.a_star import a_star

def draw_board(state: State, out_path: Path, title: str = ""):
    fig = plt.figure(figsize=(3,3))
    ax = fig.gca()
    ax.set_xlim(0, 3); ax.set_ylim(0, 3)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(4):
        ax.plot([0,3],[i,i], linewidth=1, color="black")
        ax.plot([i,i],[0,3], linewidth=1, color="black")
    # tiles
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, 3)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)

def save_frames(path: List[State], actions: List[str], outdir: Path) -> List[Path]:
    """One PNG per state along the path, titled with the move that produced it."""
    out = []
    for i, s in enumerate(path):
        title = "start" if i == 0 else f"{i}: {actions[i-1]}"
        p = outdir / f"step_{i:03d}.png"
        draw_board(s, p, title)
        out.append(p)
    return out

def main():
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="report/figs/example_path")
    args = p.parse_args()

    start = scramble(args.depth, args.seed)
    res = a_star(start)
    if not res["found"]:
        print(f"No path ({res['termination']}).")
        return

    outdir = Path(args.outdir)
    frames = save_frames(res["path"], res["actions"], outdir)
    print(f"Saved {len(frames)} frames to {outdir} (cost={res['cost']}, expanded={res['expanded']})")

if __name__ == "__main__":
    main()
