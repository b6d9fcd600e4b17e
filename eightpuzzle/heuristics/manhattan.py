from typing import Dict, Tuple

from eightpuzzle.domains.puzzle8 import GOAL, State

_goal_pos: Dict[int, Tuple[int, int]] = {GOAL[i]: (i // 3, i % 3) for i in range(9)}

def manhattan(s: State) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, 3)
        gr, gc = _goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
