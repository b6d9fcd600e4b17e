from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
import heapq
import itertools

from eightpuzzle.domains.puzzle8 import State

ROOT = -1  # parent handle of the start node

@dataclass
class SearchNode:
    state: State
    g: int
    h: int
    move: Optional[str] = None
    parent: int = ROOT
    index: int = -1  # handle into Frontier.nodes, set on push

    @property
    def f(self) -> int:
        return self.g + self.h

class Frontier:
    """
    Min-heap of search nodes by (f, h, insertion order).

    Every pushed node is also appended to `nodes`, the arena; a node's `index`
    is its position there and children refer to their parent by that handle.
    Entries are never removed from the arena, so handles stay valid for path
    reconstruction after the node has been popped.
    """
    def __init__(self):
        self.nodes: List[SearchNode] = []
        self._heap: List[Tuple[int, int, int, int]] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> int:
        node.index = len(self.nodes)
        self.nodes.append(node)
        heapq.heappush(self._heap, (node.f, node.h, next(self._counter), node.index))
        return node.index

    def pop(self) -> SearchNode:
        if not self._heap:
            raise IndexError("pop from empty frontier")
        _, _, _, idx = heapq.heappop(self._heap)
        return self.nodes[idx]

    def peek(self) -> SearchNode:
        if not self._heap:
            raise IndexError("peek at empty frontier")
        return self.nodes[self._heap[0][3]]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def path_to(self, node: SearchNode) -> Tuple[List[State], List[str]]:
        """Walk parent handles back to the root; returns (states, moves) in start-to-node order."""
        path: List[State] = []
        actions: List[str] = []
        cur: Optional[SearchNode] = node
        while cur is not None:
            path.append(cur.state)
            if cur.parent != ROOT:
                actions.append(cur.move)  # type: ignore[arg-type]
                cur = self.nodes[cur.parent]
            else:
                cur = None
        path.reverse()
        actions.reverse()
        return path, actions
