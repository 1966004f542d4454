# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any

Cell = Tuple[int, int]  # (x, y) == (col, row)

# cell categories, as printed in the grid
EMPTY = " "
WALL = "#"
START = "s"
GOAL = "g"
PATH = "."

UNSET = -1       # start/goal/predecessor not chosen
NOT_FOUND = -1   # search result when the goal is unreachable


class GridPathError(Exception):
    """Base class for every error raised by gridpath."""


class InvalidWallError(GridPathError, ValueError):
    """Wall endpoints are not on the same row or column."""


class MissingEndpointError(GridPathError, RuntimeError):
    """A search was requested before start and goal were both placed."""


class EditorAborted(GridPathError):
    """Input ran out before the editor session finished."""


@dataclass(frozen=True)
class Node:
    index: int
    category: str


AdjacencyList = Dict[int, List[Node]]


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    current: Optional[int] = None
    relaxed: List[int] = field(default_factory=list)
    path: Optional[List[int]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
