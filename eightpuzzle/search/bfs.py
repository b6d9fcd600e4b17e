from collections import deque
from time import perf_counter
from typing import Tuple, Callable, List, Optional, Set, Dict

from eightpuzzle.domains.puzzle8 import GOAL, State, neighbors

def bfs(start: State, goal: State = GOAL,
        neighbors_fn: Callable[[State], List[Tuple[State, str]]] = neighbors,
        timeout_sec: Optional[float] = None):
    t0 = perf_counter()
    start = tuple(start)
    q = deque([start])
    parent: Dict[State, Optional[Tuple[State, str]]] = {start: None}
    expanded = generated = 0
    seen: Set[State] = {start}
    while q:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return {"path": [], "actions": [], "g": None, "found": False, "expanded": expanded,
                    "generated": generated, "time": perf_counter()-t0, "algorithm": "BFS",
                    "termination": "timeout"}
        s = q.popleft()
        expanded += 1
        if s == goal:
            # reconstruct
            path, actions = [s], []
            while parent[s] is not None:
                s, m = parent[s]
                path.append(s); actions.append(m)
            path.reverse(); actions.reverse()
            return {"path": path, "actions": actions, "g": len(actions), "found": True,
                    "expanded": expanded, "generated": generated, "time": perf_counter()-t0,
                    "algorithm": "BFS", "termination": "ok"}
        for s2, m in neighbors_fn(s):
            generated += 1
            if s2 in seen: continue
            seen.add(s2); parent[s2] = (s, m); q.append(s2)
    return {"path": [], "actions": [], "g": None, "found": False, "expanded": expanded,
            "generated": generated, "time": perf_counter()-t0, "algorithm": "BFS",
            "termination": "exhausted"}

def bfs_distances(root: State = GOAL) -> Dict[State, int]:
    """Exact move distance from root to every state in its reachable component."""
    dist: Dict[State, int] = {root: 0}
    q = deque([root])
    while q:
        s = q.popleft()
        d = dist[s] + 1
        for s2, _ in neighbors(s):
            if s2 not in dist:
                dist[s2] = d
                q.append(s2)
    return dist
