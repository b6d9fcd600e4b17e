#!/usr/bin/env python3
import argparse, json, sys
from typing import List, Sequence

from eightpuzzle.api import DEFAULT_SCRAMBLE_STEPS, initial_state, scramble, solve

def parse_state(tokens: Sequence[str]) -> List[int]:
    """Accept '1 2 3 ...' or '1,2,3,...'; must be a permutation of 0..8."""
    vals = []
    for tok in tokens:
        vals.extend(p for p in tok.replace(",", " ").split() if p)
    try:
        state = [int(v) for v in vals]
    except ValueError:
        raise ValueError(f"start must contain integers, got {' '.join(vals)!r}")
    if len(state) != 9:
        raise ValueError(f"start must be length 9, got {len(state)}")
    if sorted(state) != list(range(9)):
        raise ValueError("start must contain each of 0..8 exactly once")
    return state

def main(argv=None):
    ap = argparse.ArgumentParser(prog="eightpuzzle", description="8-puzzle A* solver")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sub.add_parser("init", help="Print the goal state")

    c1 = sub.add_parser("solve", help="Solve a start state, e.g. 'solve 1 2 3 4 5 6 7 0 8'")
    c1.add_argument("start", nargs="+")

    c2 = sub.add_parser("scramble", help="Random solvable state by legal moves from the goal")
    c2.add_argument("--steps", type=int, default=DEFAULT_SCRAMBLE_STEPS)
    c2.add_argument("--seed", type=int, default=None)

    args = ap.parse_args(argv)
    if args.cmd == "init":
        out = {"state": initial_state()}
    elif args.cmd == "scramble":
        out = {"state": scramble(args.steps, args.seed)}
    else:
        try:
            start = parse_state(args.start)
        except ValueError as e:
            ap.error(str(e))
        out = solve(start)
    json.dump(out, sys.stdout, indent=2)
    print()

if __name__ == "__main__":
    main()
