from __future__ import annotations
from typing import Tuple, List, Dict, Optional, Union
import random

State = Tuple[int, ...]  # 9-length tuple, 0 is blank
GOAL: State = (1,2,3,4,5,6,7,8,0)

UP, DOWN, LEFT, RIGHT = "UP", "DOWN", "LEFT", "RIGHT"
MOVES: Tuple[str, ...] = (UP, DOWN, LEFT, RIGHT)
OPPOSITE: Dict[str, str] = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Index offset of the tile the blank swaps with
_OFFSET = {UP: -3, DOWN: 3, LEFT: -1, RIGHT: 1}

def state_key(s: State) -> str:
    """Canonical map key: comma-joined decimal values, e.g. '1,2,3,4,5,6,7,8,0'."""
    return ",".join(str(v) for v in s)

def equals(a: State, b: State) -> bool:
    return tuple(a) == tuple(b)

def swap(s: State, i: int, j: int) -> State:
    lst = list(s)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)

def _legal(move: str, row: int, col: int) -> bool:
    if move == UP:    return row > 0
    if move == DOWN:  return row < 2
    if move == LEFT:  return col > 0
    return col < 2

def neighbors(s: State) -> List[Tuple[State, str]]:
    """Return list of (next_state, move) pairs, emitted in UP, DOWN, LEFT, RIGHT order."""
    z = s.index(0)
    r, c = divmod(z, 3)
    out: List[Tuple[State, str]] = []
    for m in MOVES:
        if _legal(m, r, c):
            out.append((swap(s, z, z + _OFFSET[m]), m))
    return out

def apply_move(s: State, move: str) -> State:
    """Slide the blank one step in direction `move`."""
    if move not in _OFFSET:
        raise ValueError(f"unknown move label: {move!r}")
    z = s.index(0)
    r, c = divmod(z, 3)
    if not _legal(move, r, c):
        raise ValueError(f"move {move} is illegal with the blank at row {r}, col {c}")
    return swap(s, z, z + _OFFSET[move])

def is_solvable(s: State) -> bool:
    """8-puzzle solvability: parity of inversions must be even."""
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return (inv % 2) == 0

def _as_rng(rng: Union[random.Random, int, None]) -> random.Random:
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)

def scramble(steps: int, rng: Union[random.Random, int, None] = None) -> State:
    """
    Random walk of `steps` legal moves from GOAL that avoids undoing the previous move.

    rng may be a random.Random instance, an int seed, or None for a fresh unseeded generator.
    """
    rng = _as_rng(rng)
    s = GOAL
    last_move: Optional[str] = None
    for _ in range(steps):
        nei = neighbors(s)
        cand = [(s2, m) for s2, m in nei if last_move is None or m != OPPOSITE[last_move]]
        if not cand:
            cand = nei
        s, last_move = rng.choice(cand)
    return s
