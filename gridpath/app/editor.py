#!/usr/bin/env python3
"""
Text-prompt grid editor.

The user places walls, a start and a goal, one command per line, and sees
the grid after every change. `read`/`write` default to input()/print() and
can be swapped for scripted sessions.
"""

import logging
from typing import Callable, Tuple

from gridpath.core.graph import Graph
from gridpath.core.types import EditorAborted, InvalidWallError, UNSET

logger = logging.getLogger(__name__)

PROMPT = "Wall block (b), wall (w), start (s), goal (g) or clear (c)? Type 'exit' when done"


class Editor:
    def __init__(self, graph: Graph, read: Callable[[str], str] = input,
                 write: Callable[[str], None] = print):
        self.graph = graph
        self._read = read
        self.write = write

    def _line(self, prompt: str = "") -> str:
        if prompt:
            self.write(prompt)
        try:
            return self._read("").strip()
        except EOFError:
            raise EditorAborted("input ended before the grid was finished") from None

    def coordinate_input(self) -> Tuple[int, int]:
        """Ask for x then y until both are integers inside the grid."""
        while True:
            raw_x = self._line("x coordinate:")
            raw_y = self._line("y coordinate:")
            try:
                x, y = int(raw_x), int(raw_y)
            except ValueError:
                self.write("Error, input an integer")
                continue
            if not self.graph.in_bounds(x, y):
                self.write(f"Error, ({x}, {y}) is outside the "
                           f"{self.graph.width}x{self.graph.height} grid")
                continue
            return x, y

    def print_grid(self) -> None:
        self.write(self.graph.render())

    def run(self) -> Graph:
        """Edit until the user types 'exit' with both start and goal placed."""
        graph = self.graph
        while True:
            self.write("Current grid:")
            self.print_grid()
            choice = self._line(PROMPT)

            if choice == "c":
                graph.new_grid()
            elif choice == "b":
                graph.make_wall_block(*self.coordinate_input())
            elif choice == "w":
                self.write("First point:")
                x1, y1 = self.coordinate_input()
                self.write("Second point:")
                x2, y2 = self.coordinate_input()
                try:
                    graph.make_wall(x1, y1, x2, y2)
                except InvalidWallError as e:
                    self.write(str(e))
            elif choice == "s":
                graph.place_start(*self.coordinate_input())
            elif choice == "g":
                graph.place_goal(*self.coordinate_input())
            elif choice == "exit":
                if graph.start != UNSET and graph.goal != UNSET:
                    break
                self.write("You must choose both start and goal.")
            else:
                self.write("Invalid choice. Try again")

        logger.debug("editor finished: start=%d goal=%d", graph.start, graph.goal)
        return graph


def edit_graph(graph: Graph, read: Callable[[str], str] = input,
               write: Callable[[str], None] = print) -> Graph:
    return Editor(graph, read, write).run()
