from grid_astar.core.coordinate import Coordinate
from grid_astar.search.nodes import NodeArena, SearchNode
from grid_astar.search.path_builder import build_path


def test_build_path_runs_start_to_goal():
    arena = NodeArena()
    a = arena.add(SearchNode(Coordinate(0, 0), 1, 2))
    b = arena.add(SearchNode(Coordinate(0, 1), 2, 1, parent=a))
    c = arena.add(SearchNode(Coordinate(1, 1), 3, 0, parent=b))
    assert build_path(arena, c) == [Coordinate(0, 0), Coordinate(0, 1), Coordinate(1, 1)]


def test_build_path_from_root_is_single_cell():
    arena = NodeArena()
    a = arena.add(SearchNode(Coordinate(2, 2), 1, 0))
    assert build_path(arena, a) == [Coordinate(2, 2)]


def test_build_path_follows_rewritten_parent():
    arena = NodeArena()
    root = arena.add(SearchNode(Coordinate(0, 0), 1, 2))
    detour = arena.add(SearchNode(Coordinate(5, 5), 9, 9, parent=root))
    goal = arena.add(SearchNode(Coordinate(1, 0), 10, 0, parent=detour))
    arena[goal].parent = root
    assert build_path(arena, goal) == [Coordinate(0, 0), Coordinate(1, 0)]
