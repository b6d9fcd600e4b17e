"""
The two calls a transport layer marshals: solve() and scramble().

Inputs are taken as given; checking that a start array is a permutation of 0..8
is the caller's job.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Union
import random

from eightpuzzle.domains.puzzle8 import GOAL, scramble as _scramble
from eightpuzzle.search.a_star import a_star

DEFAULT_SCRAMBLE_STEPS = 20
NO_SOLUTION_MESSAGE = "no solution found (start is not reachable from the goal by legal moves)"

def initial_state() -> List[int]:
    return list(GOAL)

def solve(start: Sequence[int]) -> dict:
    res = a_star(start)
    out = {
        "path": [list(s) for s in res["path"]],
        "actions": list(res["actions"]),
        "cost": res["cost"],
        "expanded": res["expanded"],
        "found": res["found"],
    }
    if not res["found"]:
        out["message"] = NO_SOLUTION_MESSAGE
    return out

def scramble(steps: int, seed: Union[random.Random, int, None] = None) -> List[int]:
    if steps <= 0:
        steps = DEFAULT_SCRAMBLE_STEPS
    return list(_scramble(steps, seed))
