#!/usr/bin/env python3
"""
    python -m gridpath [--width=N] [--height=N] [--ui=text|viewer] [--log-level=LEVEL] [--demo]
"""

import logging
import sys
from typing import List, Optional

from gridpath.app.config import configure_logging, resolve_settings
from gridpath.app.demo import run_demo
from gridpath.app.editor import edit_graph
from gridpath.core.graph import Graph
from gridpath.core.types import EditorAborted, NOT_FOUND

logger = logging.getLogger("gridpath")


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = resolve_settings(argv)
    except ValueError as e:
        print(f"gridpath: {e}", file=sys.stderr)
        return 1
    configure_logging(settings)
    logger.debug("settings: %s", settings)

    if settings.demo:
        return 0 if run_demo() else 1

    graph = Graph(settings.width, settings.height)
    if settings.ui == "viewer":
        from gridpath.app.viewer import main as viewer_main
        viewer_main(graph)
        return 0

    try:
        edit_graph(graph)
    except EditorAborted as e:
        print(f"gridpath: {e}", file=sys.stderr)
        return 1

    shortest = graph.shortest_path()
    graph.print_grid()
    if shortest == NOT_FOUND:
        print("No path between start and goal")
    else:
        print(f"Shortest distance: {shortest}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
