"""
Shared pytest fixtures and utilities for testing
"""

import heapq
import random
from math import inf

import pytest

from gridpath.core import new_grid, move_cost


@pytest.fixture
def open_3x3():
    """3x3 grid with no walls"""
    return new_grid(3, 3)


@pytest.fixture
def boxed_corner_walls():
    """Walls at (1,0) and (0,1): the inside corner around (0,0)/(1,1)"""
    return {(1, 0), (0, 1)}


@pytest.fixture
def detour_grid():
    """5x5 grid with a wall column at x=2 open only at the top row"""
    grid = new_grid(5, 5)
    for y in range(4):
        grid.add_wall((2, y))
    return grid


def random_grid(seed, width=8, height=8, density=0.2, corner_rule="fixed"):
    """Seeded random wall layout"""
    rng = random.Random(seed)
    grid = new_grid(width, height, corner_rule=corner_rule)
    for y in range(height):
        for x in range(width):
            if rng.random() < density:
                grid.add_wall((x, y))
    return grid


def reference_cost(grid, start, goal):
    """Plain Dijkstra over the grid's own neighbour relation; inf if unreachable"""
    dist = {start: 0.0}
    pq = [(0.0, start)]
    while pq:
        d, u = heapq.heappop(pq)
        if d > dist.get(u, inf):
            continue
        if u == goal:
            return d
        for v in grid.get_neighbours(u) or []:
            nd = d + move_cost(u, v)
            if nd < dist.get(v, inf):
                dist[v] = nd
                heapq.heappush(pq, (nd, v))
    return inf


def assert_valid_path(grid, path, start, goal):
    """Path runs start -> goal and every step is a legal single move"""
    assert path[0] == start
    assert path[-1] == goal
    for a, b in zip(path, path[1:]):
        assert max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1
        assert grid.can_move(a, b), f"illegal move {a} -> {b}"
    assert not any(grid.contains_wall(c) for c in path)
