from collections import deque

import pytest

from gridpath.core.builder import cell_index, rebuild
from gridpath.core.dijkstra import DijkstraSearch, shortest_path
from gridpath.core.types import MissingEndpointError, NOT_FOUND, UNSET


def build(*rows):
    cells = [list(r) for r in rows]
    _, adjacency, start, goal = rebuild(cells, len(cells[0]), len(cells))
    return adjacency, start, goal


def bfs(adjacency, start):
    dist = {start: 0}
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in adjacency[u]:
            if v.index not in dist:
                dist[v.index] = dist[u] + 1
                queue.append(v.index)
    return dist


def test_adjacent_start_and_goal():
    adjacency, start, goal = build("sg ", "   ")
    distance, path = shortest_path(adjacency, start, goal)
    assert distance == 1
    assert path == [start, goal]


def test_start_equals_goal_cell_distance_zero():
    adjacency, start, _ = build("s  ")
    distance, path = shortest_path(adjacency, start, start)
    assert distance == 0
    assert path == [start]


def test_distances_match_breadth_first_search():
    adjacency, start, goal = build("s  #  ",
                                   " # #  ",
                                   " #   #",
                                   "   # g")
    search = DijkstraSearch()
    search.init(adjacency, start, goal)
    search.run()
    expected = bfs(adjacency, start)
    for index, d in expected.items():
        assert search.dist[index] == d
    assert search.distance() == expected[goal]


def test_distances_are_a_relaxation_fixed_point():
    adjacency, start, goal = build("s    ",
                                   " ### ",
                                   "   # ",
                                   "## #g")
    search = DijkstraSearch()
    search.init(adjacency, start, goal)
    search.run()
    assert search.dist[start] == 0
    for index, d in search.dist.items():
        if index == start or d == search.unreached:
            continue
        assert d == 1 + min(search.dist[n.index] for n in adjacency[index])
        assert search.dist[search.prev[index]] == d - 1


def test_unreachable_goal():
    adjacency, start, goal = build("s # ",
                                   "  #g",
                                   "  # ")
    distance, path = shortest_path(adjacency, start, goal)
    assert distance == NOT_FOUND
    assert path == []


def test_unreachable_nodes_keep_sentinel_and_no_predecessor():
    adjacency, start, goal = build("s#g")
    search = DijkstraSearch()
    search.init(adjacency, start, goal)
    assert search.unreached == len(adjacency) == 2
    assert search.run() == NOT_FOUND
    assert search.dist[goal] == search.unreached
    assert search.prev[goal] == UNSET


def test_stops_early_when_rest_is_cut_off():
    adjacency, start, goal = build("s #   ",
                                   "  # g ")
    search = DijkstraSearch()
    search.init(adjacency, start, goal)
    search.run()
    # only the four cells left of the wall are ever expanded
    assert sorted(search.visited) == sorted([0, 1, 6, 7])


def test_ties_prefer_lowest_index_predecessor():
    adjacency, start, goal = build("s  ",
                                   "   ",
                                   "  g")
    search = DijkstraSearch()
    search.init(adjacency, start, goal)
    assert search.run() == 4
    # goal (2,2) is reached first from (2,1), which sits before (1,2) in row-major order
    assert search.prev[goal] == cell_index(2, 1, 3)


def test_stepping_reports_progress_then_done():
    adjacency, start, goal = build("s g")
    search = DijkstraSearch()
    search.init(adjacency, start, goal)

    first = search.step()
    assert first.status == "running"
    assert first.current == start
    assert first.relaxed == [1]

    statuses = [first.status]
    result = first
    while result.status == "running":
        result = search.step()
        statuses.append(result.status)
    assert result.status == "done"
    assert result.path == [0, 1, 2]
    assert result.metrics["distance"] == 2
    assert result.metrics["path_len"] == 3
    # finished searches keep answering with the final result
    assert search.step().status == "done"


def test_stepping_no_path_status():
    adjacency, start, goal = build("s#g")
    search = DijkstraSearch()
    search.init(adjacency, start, goal)
    results = [search.step() for _ in range(3)]
    assert results[-1].status == "no_path"
    assert results[-1].path is None


def test_reset_restarts_search():
    adjacency, start, goal = build("s  g")
    search = DijkstraSearch()
    search.init(adjacency, start, goal)
    assert search.run() == 3
    search.reset()
    assert not search.finished
    assert search.visited == []
    assert search.dist[goal] == search.unreached
    assert search.run() == 3


@pytest.mark.parametrize("start, goal", [(UNSET, 2), (0, UNSET), (UNSET, UNSET)])
def test_missing_endpoints_fail_fast(start, goal):
    adjacency, _, _ = build("   ")
    with pytest.raises(MissingEndpointError):
        shortest_path(adjacency, start, goal)


def test_run_without_init_fails_fast():
    search = DijkstraSearch()
    assert search.step().status == "idle"
    with pytest.raises(MissingEndpointError):
        search.run()


def test_wall_endpoint_is_rejected():
    adjacency, start, _ = build("s #")
    with pytest.raises(MissingEndpointError):
        shortest_path(adjacency, start, 2)
