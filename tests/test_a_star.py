import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from eightpuzzle.domains.puzzle8 import GOAL, apply_move, scramble
from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.search import a_star as a_star_mod
from eightpuzzle.search.a_star import a_star
from eightpuzzle.search.frontier import Frontier
from eightpuzzle.search.bfs import bfs


def _check_path(start, res):
    path, actions = res["path"], res["actions"]
    assert path[0] == tuple(start)
    assert path[-1] == GOAL
    assert len(path) == len(actions) + 1
    assert res["cost"] == len(actions) == res["g"]
    for i, m in enumerate(actions):
        assert apply_move(path[i], m) == path[i + 1]


def test_goal_start():
    res = a_star(GOAL)
    assert res["path"] == [GOAL]
    assert res["actions"] == []
    assert res["cost"] == 0
    assert res["expanded"] == 1
    assert res["found"] is True
    assert res["termination"] == "ok"


def test_one_move(one_move):
    res = a_star(one_move)
    assert res["found"]
    assert res["cost"] == 1
    assert res["actions"] == ["RIGHT"]
    _check_path(one_move, res)


def test_two_moves(two_moves):
    res = a_star(two_moves)
    assert res["cost"] == 2
    assert res["actions"] == ["RIGHT", "RIGHT"]
    _check_path(two_moves, res)


def test_accepts_list_input(one_move):
    assert a_star(list(one_move))["actions"] == ["RIGHT"]


def test_hardest_instance():
    # one of the two 31-move positions
    start = (8, 6, 7, 2, 5, 4, 3, 0, 1)
    res = a_star(start)
    assert res["found"]
    assert res["cost"] == 31
    _check_path(start, res)


@pytest.mark.parametrize("seed", range(15))
def test_matches_bfs_cost(seed):
    start = scramble(random.Random(seed).randint(5, 40), seed)
    res = a_star(start)
    ref = bfs(start)
    assert res["found"] and ref["found"]
    assert res["cost"] == ref["g"]
    _check_path(start, res)


def test_matches_distance_table(distances):
    rng = random.Random(11)
    for s in rng.sample(sorted(distances), 15):
        res = a_star(s)
        assert res["cost"] == distances[s]


def test_heuristic_never_exceeds_remaining_cost_along_path(distances):
    start = scramble(40, 5)
    res = a_star(start)
    for s in res["path"]:
        assert manhattan(s) <= distances[s]


def test_unsolvable_exhausts(odd_parity):
    res = a_star(odd_parity)
    assert res["found"] is False
    assert res["termination"] == "exhausted"
    assert res["path"] == [] and res["actions"] == []
    assert res["cost"] == 0
    # every state of the odd component is closed once; stale pops add to expanded
    assert res["peak_closed"] == 181440
    assert res["expanded"] >= 181440


def test_expansion_limit_is_not_exhaustion():
    start = (8, 6, 7, 2, 5, 4, 3, 0, 1)
    res = a_star(start, max_expanded=10)
    assert res["termination"] == "limit"
    assert res["found"] is False
    assert res["expanded"] == 10
    assert res["path"] == []


def test_limit_large_enough_still_solves(one_move):
    res = a_star(one_move, max_expanded=2)
    assert res["termination"] == "ok"
    assert res["expanded"] == 2


def test_timeout():
    res = a_star((2, 1, 3, 4, 5, 6, 7, 8, 0), timeout_sec=0.0)
    assert res["termination"] == "timeout"
    assert res["found"] is False


def test_return_path_false_keeps_cost():
    start = scramble(20, 2)
    full = a_star(start)
    lean = a_star(start, return_path=False)
    assert lean["path"] == []
    assert lean["cost"] == full["cost"]
    assert lean["expanded"] == full["expanded"]


def test_independent_calls_are_deterministic():
    start = scramble(30, 9)
    a, b = a_star(start), a_star(start)
    for k in ("path", "actions", "expanded", "generated", "duplicates"):
        assert a[k] == b[k]


class _CountingFrontier(Frontier):
    pops = 0

    def pop(self):
        _CountingFrontier.pops += 1
        return super().pop()


def _count_pops(monkeypatch, start, **kw):
    _CountingFrontier.pops = 0
    monkeypatch.setattr(a_star_mod, "Frontier", _CountingFrontier)
    res = a_star(start, **kw)
    return res, _CountingFrontier.pops


def test_expanded_counts_every_pop_including_stale(monkeypatch):
    start = scramble(30, 1)
    res, pops = _count_pops(monkeypatch, start)
    assert res["found"]
    assert res["expanded"] == pops
    # closed states plus the goal pop; anything beyond that is a stale entry
    assert res["expanded"] > res["peak_closed"] + 1


def test_unsolvable_expanded_counts_every_pop(monkeypatch, odd_parity):
    res, pops = _count_pops(monkeypatch, odd_parity)
    assert res["termination"] == "exhausted"
    assert res["expanded"] == pops


def test_limit_counts_stale_pops(monkeypatch):
    res, pops = _count_pops(monkeypatch, (8, 6, 7, 2, 5, 4, 3, 0, 1), max_expanded=300)
    assert res["termination"] == "limit"
    assert res["expanded"] == pops == 300


def test_parallel_calls_match_sequential():
    starts = [scramble(25, seed) for seed in range(8)]
    sequential = [a_star(s) for s in starts]
    with ThreadPoolExecutor(max_workers=4) as pool:
        parallel = list(pool.map(a_star, starts))
    for seq, par in zip(sequential, parallel):
        for k in ("path", "actions", "cost", "expanded", "found"):
            assert seq[k] == par[k]
