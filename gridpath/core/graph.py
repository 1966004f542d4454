#!/usr/bin/env python3
"""
Graph aggregate: the editable grid plus its derived graph.

Coordinates are (x, y): x grows to the right, y grows downward, and the
matrix is stored as cells[y][x]. Every structural edit rebuilds the node set
and adjacency list from scratch.
"""

import logging
from typing import Dict, List

from gridpath.core import builder
from gridpath.core.builder import cell_index, index_to_cell
from gridpath.core.dijkstra import DijkstraSearch
from gridpath.core.types import (AdjacencyList, Cell, Node, InvalidWallError,
                                 MissingEndpointError, UNSET, EMPTY, WALL, START,
                                 GOAL, PATH)

logger = logging.getLogger(__name__)


class Graph:
    def __init__(self, width: int = 5, height: int = 5):
        if width < 1 or height < 1:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: List[List[str]] = []
        self.nodes: Dict[int, Node] = {}
        self.adjacency: AdjacencyList = {}
        self.start = UNSET
        self.goal = UNSET
        self.dist: Dict[int, int] = {}
        self.prev: Dict[int, int] = {}
        self.path: List[int] = []
        self.new_grid()

    # -------------------- derived graph --------------------

    def rebuild(self) -> None:
        self.nodes, self.adjacency, self.start, self.goal = builder.rebuild(
            self.cells, self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} grid")

    # -------------------- edits --------------------

    def new_grid(self) -> None:
        """Reset every cell to empty."""
        self.cells = [[EMPTY] * self.width for _ in range(self.height)]
        self.dist, self.prev = {}, {}
        self.path = []
        self.rebuild()

    clear = new_grid

    def make_wall_block(self, x: int, y: int) -> None:
        self._check(x, y)
        self.cells[y][x] = WALL
        self.rebuild()

    def make_wall(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Wall every cell on the straight line between two points, inclusive."""
        self._check(x1, y1)
        self._check(x2, y2)
        if x1 != x2 and y1 != y2:
            logger.warning("rejected wall (%d, %d)-(%d, %d): not on one row or column",
                           x1, y1, x2, y2)
            raise InvalidWallError("Coordinate choice does not make a line. Try again")
        if x1 == x2:
            for y in range(min(y1, y2), max(y1, y2) + 1):
                self.cells[y][x1] = WALL
        else:
            for x in range(min(x1, x2), max(x1, x2) + 1):
                self.cells[y1][x] = WALL
        self.rebuild()

    def _place(self, x: int, y: int, category: str) -> None:
        self._check(x, y)
        for row in self.cells:
            for col, c in enumerate(row):
                if c == category:
                    row[col] = EMPTY
        self.cells[y][x] = category
        self.rebuild()

    def place_start(self, x: int, y: int) -> None:
        self._place(x, y, START)

    def place_goal(self, x: int, y: int) -> None:
        self._place(x, y, GOAL)

    # -------------------- search --------------------

    def clear_path(self) -> None:
        self.path = []
        for row in self.cells:
            for col, c in enumerate(row):
                if c == PATH:
                    row[col] = EMPTY

    def new_search(self) -> DijkstraSearch:
        """Clear old markers and hand back a search ready to step."""
        if self.start == UNSET or self.goal == UNSET:
            raise MissingEndpointError("You must choose both start and goal.")
        self.clear_path()
        self.rebuild()
        search = DijkstraSearch()
        search.init(self.adjacency, self.start, self.goal)
        return search

    def apply_search(self, search: DijkstraSearch) -> int:
        """Keep the finished search's trail and mark the path between start and goal."""
        self.dist, self.prev = search.dist, search.prev
        self.path = search.path()
        for index in self.path[1:-1]:
            x, y = index_to_cell(index, self.width)
            self.cells[y][x] = PATH
        return search.distance()

    def shortest_path(self) -> int:
        """Distance from start to goal, or NOT_FOUND; the path is marked in the grid."""
        search = self.new_search()
        search.run()
        return self.apply_search(search)

    def path_cells(self) -> List[Cell]:
        """Cells of the last found path, start and goal included."""
        return [index_to_cell(i, self.width) for i in self.path]

    def category_at(self, x: int, y: int) -> str:
        return self.cells[y][x]

    def index_of(self, x: int, y: int) -> int:
        return cell_index(x, y, self.width)

    # -------------------- rendering --------------------

    def render(self) -> str:
        return "\n".join("[" + " ".join(row) + "]" for row in self.cells)

    def print_grid(self) -> None:
        print(self.render())
