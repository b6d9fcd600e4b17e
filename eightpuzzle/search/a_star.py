from __future__ import annotations
from typing import Dict, Optional, Set, Sequence
from time import perf_counter

from eightpuzzle.domains.puzzle8 import GOAL, equals, neighbors, state_key
from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.search.frontier import Frontier, SearchNode, ROOT

def _result(termination: str, expanded: int, generated: int, duplicates: int,
            peak_open: int, peak_closed: int, t0: float, path=None, actions=None):
    found = termination == "ok"
    path = path if (found and path is not None) else []
    actions = actions if (found and actions is not None) else []
    return {
        "path": path,
        "actions": actions,
        "cost": len(actions),
        "g": len(actions) if found else None,
        "found": found,
        "expanded": expanded,
        "generated": generated,
        "duplicates": duplicates,
        "peak_open": peak_open,
        "peak_closed": peak_closed,
        "time": perf_counter() - t0,
        "algorithm": "A*",
        "termination": termination,
    }

def a_star(
    start: Sequence[int],
    timeout_sec: Optional[float] = None,
    max_expanded: Optional[int] = None,
    return_path: bool = True,
):
    """
    A* over the 8-puzzle with the Manhattan heuristic and instrumentation.

    Frontier ties on f go to the smaller h, then to the older entry. There is no
    decrease-key: a state may sit in the frontier more than once, and entries whose
    state is already closed or whose g is worse than the best known are dropped on
    pop. Every pop counts toward expanded, stale ones included.

    termination is one of:
      "ok"         goal popped; path/actions hold the optimal solution
      "exhausted"  frontier emptied, the start is in the other parity class
      "timeout"    wall clock exceeded timeout_sec
      "limit"      max_expanded expansions done without reaching the goal
    Only "ok" sets found=True. Aborted searches say nothing about solvability.
    """
    t0 = perf_counter()
    start = tuple(start)

    frontier = Frontier()
    h0 = manhattan(start)
    frontier.push(SearchNode(state=start, g=0, h=h0, move=None, parent=ROOT))

    best_g: Dict[str, int] = {state_key(start): 0}
    closed: Set[str] = set()
    seen_ever: Set[str] = {state_key(start)}

    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1
    peak_closed = 0

    while not frontier.is_empty():
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return _result("timeout", expanded, generated, duplicates, peak_open, peak_closed, t0)
        if max_expanded is not None and expanded >= max_expanded:
            return _result("limit", expanded, generated, duplicates, peak_open, peak_closed, t0)

        peak_open = max(peak_open, len(frontier))
        current = frontier.pop()
        expanded += 1
        ckey = state_key(current.state)
        if ckey in closed or current.g > best_g[ckey]:
            continue  # stale entry

        if equals(current.state, GOAL):
            path, actions = frontier.path_to(current)
            if not return_path:
                path = []  # actions are kept so cost stays meaningful
            return _result("ok", expanded, generated, duplicates, peak_open, peak_closed, t0,
                           path=path, actions=actions)

        closed.add(ckey)
        peak_closed = max(peak_closed, len(closed))

        for s2, move in neighbors(current.state):
            k2 = state_key(s2)
            if k2 in closed:
                continue
            generated += 1
            if k2 in seen_ever:
                duplicates += 1
            else:
                seen_ever.add(k2)

            g2 = current.g + 1
            if k2 not in best_g or g2 < best_g[k2]:
                best_g[k2] = g2
                frontier.push(SearchNode(state=s2, g=g2, h=manhattan(s2), move=move, parent=current.index))

    # Open exhausted without finding goal
    return _result("exhausted", expanded, generated, duplicates, peak_open, peak_closed, t0)
