#!/usr/bin/env python3
"""
Demonstration run on a 5x5 grid: prints what each step should produce next
to what the graph actually produced.

    python -m gridpath --demo
"""

from typing import Callable, List

from gridpath.core.graph import Graph
from gridpath.core.types import EMPTY, WALL, START, GOAL, PATH

Rows = List[List[str]]


def _show(write: Callable[[str], None], title: str, rows: Rows) -> None:
    write(title)
    for row in rows:
        write("[" + " ".join(row) + "]")


def run_demo(write: Callable[[str], None] = print) -> bool:
    """Returns True when every stage matched."""
    w = h = 5
    ok = True
    expected: Rows = [[EMPTY] * w for _ in range(h)]
    graph = Graph(w, h)

    # empty grid
    _show(write, "Expected:", expected)
    _show(write, "Got:", graph.cells)
    ok &= graph.cells == expected

    # wall line across the top and a single block
    expected[0] = [WALL] * w
    expected[2][2] = WALL
    graph.make_wall(0, 0, 4, 0)
    graph.make_wall_block(2, 2)
    _show(write, "Expected:", expected)
    _show(write, "Got:", graph.cells)
    ok &= graph.cells == expected

    # path around a wall hanging from the top of column 1
    expected = [[EMPTY] * w for _ in range(h)]
    expected[0][0] = START
    expected[0][4] = GOAL
    expected[0][3] = PATH
    for i in range(1, 5):
        expected[i][0] = PATH
        expected[i - 1][1] = WALL
        expected[i - 1][2] = PATH
        expected[4][i - 1] = PATH
    expected[4][3] = EMPTY

    graph.new_grid()
    graph.place_start(0, 0)
    graph.place_goal(4, 0)
    graph.make_wall(1, 0, 1, 3)
    shortest = graph.shortest_path()

    _show(write, "Expected:", expected)
    write("expected shortest: 12")
    _show(write, "Got:", graph.cells)
    write(f"got shortest: {shortest}")
    ok &= graph.cells == expected and shortest == 12
    return bool(ok)
