#!/usr/bin/env python3
"""
Dijkstra over the unit-weight grid graph, one expansion per step() so the
viewer can animate it.

API (same shape the viewer drives):
- init(adjacency, start, goal) - reset() - step() -> StepResult - run() -> distance

Selection is a linear scan over the unvisited list: lowest distance wins,
first seen wins on ties. The loop stops early once the best unvisited node
is still unreached; nothing left can be reached from the start.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from gridpath.core.types import (AdjacencyList, MissingEndpointError, NOT_FOUND,
                                 StepResult, UNSET)

logger = logging.getLogger(__name__)


@dataclass
class DijkstraSearch:
    name: str = "Dijkstra"

    adjacency: AdjacencyList = field(default_factory=dict)
    start: int = UNSET
    goal: int = UNSET
    unreached: int = 0                 # sentinel: larger than any hop count
    dist: Dict[int, int] = field(default_factory=dict)
    prev: Dict[int, int] = field(default_factory=dict)
    unvisited: List[int] = field(default_factory=list)
    visited: List[int] = field(default_factory=list)
    finished: bool = False

    # -------------------- lifecycle --------------------

    def init(self, adjacency: AdjacencyList, start: int, goal: int) -> None:
        if start not in adjacency or goal not in adjacency:
            raise MissingEndpointError(
                f"start ({start}) and goal ({goal}) must both be placed on open cells")
        self.adjacency = adjacency
        self.start = start
        self.goal = goal
        self.reset()

    def reset(self) -> None:
        """Fresh search state: everything unreached except the start."""
        self.unreached = len(self.adjacency)
        self.dist = {i: self.unreached for i in self.adjacency}
        self.prev = {i: UNSET for i in self.adjacency}
        self.unvisited = list(self.adjacency)
        self.visited = []
        self.finished = False
        if self.start in self.dist:
            self.dist[self.start] = 0

    # -------------------- stepping --------------------

    def _pop_min(self) -> int:
        best_pos = 0
        best = self.dist[self.unvisited[0]]
        for pos, index in enumerate(self.unvisited):
            if self.dist[index] < best:
                best_pos, best = pos, self.dist[index]
        return self.unvisited.pop(best_pos)

    def step(self) -> StepResult:
        if not self.adjacency:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.finished or not self.unvisited:
            return self._final()

        u = self._pop_min()
        if self.dist[u] == self.unreached:
            # everything left is cut off from the start
            logger.debug("stopping with %d unreachable nodes left", len(self.unvisited) + 1)
            self.unvisited.clear()
            return self._final()

        self.visited.append(u)
        relaxed: List[int] = []
        alt = self.dist[u] + 1
        for v in self.adjacency[u]:
            if alt < self.dist[v.index]:
                self.dist[v.index] = alt
                self.prev[v.index] = u
                relaxed.append(v.index)

        if not self.unvisited:
            return self._final(current=u, relaxed=relaxed)
        return StepResult(status="running", current=u, relaxed=relaxed, metrics=self._metrics())

    def _final(self, current=None, relaxed=None) -> StepResult:
        first = not self.finished
        self.finished = True
        found = self.dist[self.goal] != self.unreached
        if first:
            logger.info("%s: %s after %d expansions", self.name,
                        f"distance {self.dist[self.goal]}" if found else "goal unreachable",
                        len(self.visited))
        path = self.path() if found else None
        return StepResult(status="done" if found else "no_path",
                          current=current, relaxed=relaxed or [], path=path,
                          metrics=self._metrics(path_len=len(path) if path else 0))

    def run(self) -> int:
        if self.start not in self.adjacency or self.goal not in self.adjacency:
            raise MissingEndpointError("search has no graph; call init() first")
        while not self.finished:
            self.step()
        return self.distance()

    # -------------------- results --------------------

    def distance(self) -> int:
        d = self.dist.get(self.goal, self.unreached)
        return NOT_FOUND if d == self.unreached else d

    def path(self) -> List[int]:
        """Node indices from start to goal; empty if the goal was not reached."""
        if self.dist.get(self.goal, self.unreached) == self.unreached:
            return []
        path: List[int] = []
        cur = self.goal
        while True:
            path.append(cur)
            if cur == self.start:
                break
            cur = self.prev[cur]
        path.reverse()
        return path

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "expanded": len(self.visited),
            "unvisited": len(self.unvisited),
            "distance": self.distance() if self.finished else None,
            "path_len": path_len,
        }


def shortest_path(adjacency: AdjacencyList, start: int, goal: int) -> Tuple[int, List[int]]:
    """Run a whole search; returns (distance or NOT_FOUND, path indices)."""
    search = DijkstraSearch()
    search.init(adjacency, start, goal)
    return search.run(), search.path()
