from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from eightpuzzle.domains.puzzle8 import GOAL, scramble, is_solvable
from eightpuzzle.search.a_star import a_star
from eightpuzzle.search.bfs import bfs

State = Tuple[int, ...]

HEADER = [
    "algorithm","depth","seed",
    "expanded","generated","duplicates","g","time_sec",
    "peak_open","peak_closed","termination","solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: State

def generate_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = scramble(d, seed)
            attempts += 1
            if is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping permutation parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1 :], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)

def _row(res: dict, inst: Instance, solvable_flag: int) -> list:
    return [
        res.get("algorithm",""), inst.depth, inst.seed,
        res.get("expanded",""), res.get("generated",""), res.get("duplicates",""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time',0.0):.6f}",
        res.get("peak_open",""), res.get("peak_closed",""),
        res.get("termination","ok"), solvable_flag,
    ]

def run(insts: List[Instance], out: Path, algo: str = "a",
        include_unsolvable: bool = False,
        timeout_sec: Optional[float] = None,
        max_expanded: Optional[int] = None) -> int:
    """Run every instance and write one CSV row per (algorithm, instance). Returns rows written."""
    want_a   = algo in ("a","both")
    want_bfs = algo in ("bfs","both")

    def solve_all(w, state: State, inst: Instance, solvable_flag: int) -> int:
        n = 0
        if want_a:
            r = a_star(state, timeout_sec=timeout_sec, max_expanded=max_expanded, return_path=False)
            w.writerow(_row(r, inst, solvable_flag)); n += 1
        if want_bfs:
            r = bfs(state, GOAL, timeout_sec=timeout_sec)
            w.writerow(_row(r, inst, solvable_flag)); n += 1
        return n

    out.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            written += solve_all(w, inst.state, inst, 1)
            # Optional unsolvable variants (flip parity).
            if include_unsolvable:
                written += solve_all(w, make_unsolvable_variant(inst.state), inst, 0)
    return written

def main(argv=None):
    ap = argparse.ArgumentParser(description="8-puzzle A* (+BFS baseline) experiment runner")
    ap.add_argument("--algo", choices=["a", "bfs", "both"], default="a",
                    help="'both' = A*+BFS")
    ap.add_argument("--depths", type=int, nargs="+", default=[6,10,14,18,22,26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--max_expanded", type=int, default=None, help="Per-instance A* expansion cap")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants")
    args = ap.parse_args(argv)

    insts = generate_instances(args.depths, args.per_depth, start_seed=args.seed)
    run(insts, args.out, algo=args.algo, include_unsolvable=args.include_unsolvable,
        timeout_sec=args.timeout_sec, max_expanded=args.max_expanded)
    print(f"Wrote {args.out} ({len(insts)} instances)")

if __name__ == "__main__":
    main()
