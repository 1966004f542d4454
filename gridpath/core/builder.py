#!/usr/bin/env python3
"""
Grid-to-graph builder.

Turns the cell matrix (cells[row][col]) into:
- a node per non-wall cell, carrying its row-major index and category
- an adjacency list: node index -> non-wall 4-neighbors in the order up, down, left, right

Wall cells get no node and no adjacency entry, so nothing can route through them.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from gridpath.core.types import AdjacencyList, Cell, Node, UNSET, WALL, START, GOAL

logger = logging.getLogger(__name__)

UP    = ( 0, -1)
DOWN  = ( 0,  1)
LEFT  = (-1,  0)
RIGHT = ( 1,  0)
OFFSETS: Tuple[Cell, ...] = (UP, DOWN, LEFT, RIGHT)


def cell_index(x: int, y: int, width: int) -> int:
    return y * width + x


def index_to_cell(index: int, width: int) -> Cell:
    y, x = divmod(index, width)
    return x, y


def neighbors(x: int, y: int, width: int, height: int) -> List[Cell]:
    """In-bounds 4-connected neighbors of (x, y). No wraparound."""
    out: List[Cell] = []
    for dx, dy in OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            out.append((nx, ny))
    return out


def rebuild(cells: Sequence[Sequence[str]], width: int, height: int
            ) -> Tuple[Dict[int, Node], AdjacencyList, int, int]:
    """
    Build (nodes, adjacency, start, goal) from scratch.

    start/goal are the index of the last cell seen with that category in
    row-major order, or UNSET. The input matrix is only read.
    """
    if len(cells) != height or any(len(row) != width for row in cells):
        raise ValueError(f"cells must be {height} rows of {width} columns")

    nodes: Dict[int, Node] = {}
    adjacency: AdjacencyList = {}
    start = goal = UNSET
    edges = 0

    for y in range(height):
        for x in range(width):
            category = cells[y][x]
            if category == WALL:
                continue

            index = cell_index(x, y, width)
            nodes[index] = Node(index, category)
            if category == START:
                start = index
            elif category == GOAL:
                goal = index

            entry: List[Node] = []
            for nx, ny in neighbors(x, y, width, height):
                n_cat = cells[ny][nx]
                if n_cat != WALL:
                    entry.append(Node(cell_index(nx, ny, width), n_cat))
            adjacency[index] = entry
            edges += len(entry)

    logger.debug("rebuild %dx%d: %d nodes, %d directed edges, start=%d goal=%d",
                 width, height, len(nodes), edges, start, goal)
    return nodes, adjacency, start, goal
