#!/usr/bin/env python3
"""
A* over a Grid with 8-directional movement.

Costs:
- Orthogonal move = 1, diagonal move = sqrt(2).

Heuristic:
- Octile distance on absolute deltas (admissible and consistent for the costs above).

Tie-breaking in the PQ:
- (f, h, -g, seq, cell): lower f, then lower h, then deeper g, then FIFO by seq.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple, List, Optional
import heapq
import logging
from math import inf, sqrt

from gridpath.core.config import SearchConfig, DEFAULT_SEARCH_CONFIG
from gridpath.core.types import Cell, Grid, SearchResult

logger = logging.getLogger(__name__)

D1 = 1.0
D2 = sqrt(2.0)


class InvalidEndpointError(ValueError):
    """Start or goal is outside the grid or sits on a wall."""


def octile(a: Cell, b: Cell) -> float:
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return dx + dy + (D2 - 2) * min(dx, dy)


def move_cost(a: Cell, b: Cell) -> float:
    if a[0] != b[0] and a[1] != b[1]:
        return D2
    return D1


def path_cost(path: List[Cell]) -> float:
    """Total movement cost along consecutive cells of `path`."""
    return sum(move_cost(a, b) for a, b in zip(path, path[1:]))


def check_endpoint(grid: Grid, c: Cell, label: str) -> Optional[str]:
    """Reason `c` cannot be used as an endpoint, or None if it can."""
    if not grid.in_bounds(c):
        return f"{label} {c} is outside the {grid.width}x{grid.height} grid"
    if grid.contains_wall(c):
        return f"{label} {c} is a wall"
    return None


@dataclass
class _AStarRun:
    grid: Grid
    start: Cell
    goal: Cell
    config: SearchConfig = DEFAULT_SEARCH_CONFIG

    open_pq: List[Tuple[float, float, float, int, Cell]] = field(default_factory=list)  # (f, h, -g, seq, cell)
    open_set: set = field(default_factory=set)
    closed_set: set = field(default_factory=set)
    g: Dict[Cell, float] = field(default_factory=dict)
    f: Dict[Cell, float] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    seq: int = 0  # monotonic counter for PQ stability

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _h(self, c: Cell) -> float:
        return octile(c, self.goal)

    def _push(self, c: Cell) -> None:
        h = self._h(c)
        self.f[c] = self.g[c] + h
        heapq.heappush(self.open_pq, (self.f[c], h, -self.g[c], self._bump(), c))
        self.open_set.add(c)

    def _reconstruct_path(self, end: Cell) -> Optional[List[Cell]]:
        path: List[Cell] = [end]
        cur = end
        while cur != self.start:
            if cur not in self.parent:
                return None
            cur = self.parent[cur]
            path.append(cur)
        path.reverse()
        return path

    def _metrics(self, path_len: int = 0, total_cost: Optional[float] = None) -> dict:
        return {
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": total_cost,
        }

    def run(self) -> SearchResult:
        self.g[self.start] = 0.0
        self._push(self.start)
        budget = self.config.max_expansions

        while self.open_pq:
            _, _, neg_g_u, _, u = heapq.heappop(self.open_pq)

            # Ignore stale pops
            if -neg_g_u != self.g.get(u, inf):
                continue

            if u == self.goal:
                path = self._reconstruct_path(u)
                if path is None:
                    return SearchResult(status="no_path", message="Broken predecessor chain",
                                        metrics=self._metrics())
                cost = self.g[u]
                return SearchResult(status="found", path=path, cost=cost,
                                    metrics=self._metrics(path_len=len(path), total_cost=cost))

            if budget is not None and self.popped_count >= budget:
                return SearchResult(status="aborted",
                                    message=f"Expansion budget of {budget} exhausted",
                                    metrics=self._metrics())

            # Finalize u
            self.popped_count += 1
            self.open_set.discard(u)
            self.closed_set.add(u)

            neighbours = self.grid.get_neighbours(u)
            if not neighbours:
                continue

            for v in neighbours:
                alt = self.g[u] + move_cost(u, v)
                if alt < self.g.get(v, inf):
                    self.g[v] = alt
                    self.parent[v] = u
                    self.closed_set.discard(v)
                    self._push(v)

        return SearchResult(status="no_path",
                            message=f"No path from {self.start} to {self.goal}",
                            metrics=self._metrics())


def search(grid: Grid, start: Cell, goal: Cell,
           config: Optional[SearchConfig] = None) -> SearchResult:
    """
    Run A* from `start` to `goal` and report the detailed outcome.

    Invalid endpoints are reported as status "invalid" without searching.
    The grid is only read; all search state is local to this call.
    """
    for c, label in ((start, "start"), (goal, "goal")):
        reason = check_endpoint(grid, c, label)
        if reason:
            logger.debug(f"search: {reason}")
            return SearchResult(status="invalid", message=reason)

    result = _AStarRun(grid, start, goal, config or DEFAULT_SEARCH_CONFIG).run()

    if result.status == "aborted":
        logger.info(f"search: {start} -> {goal} aborted ({result.message})")
    else:
        logger.debug(f"search: {start} -> {goal} {result.status}, "
                     f"popped={result.metrics['popped']}, cost={result.cost}")
    return result


def find_path(grid: Grid, start: Cell, goal: Cell,
              config: Optional[SearchConfig] = None) -> Optional[List[Cell]]:
    """
    Minimum-cost path from `start` to `goal`, both inclusive.

    Returns None when no path exists (or the expansion budget ran out).
    Raises InvalidEndpointError when start or goal is out of bounds or a wall.
    """
    result = search(grid, start, goal, config)
    if result.status == "invalid":
        raise InvalidEndpointError(result.message)
    return result.path
