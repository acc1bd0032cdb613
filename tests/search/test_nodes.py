import pytest

from grid_astar.core.coordinate import Coordinate
from grid_astar.search.nodes import NodeArena, SearchNode, make_node


def test_make_node_without_parent_counts_itself(open_grid):
    node = make_node(open_grid, Coordinate(0, 0))
    assert node.g == 1
    assert node.h == 8
    assert node.f == 9
    assert node.parent is None


def test_make_node_adds_one_to_parent_cost(open_grid):
    arena = NodeArena()
    root = arena.add(make_node(open_grid, Coordinate(0, 0)))
    child = make_node(open_grid, Coordinate(1, 0), root, arena)
    assert child.g == 2
    assert child.h == 7
    assert child.parent == root
    assert len(arena) == 1  # candidates are not stored automatically


def test_make_node_requires_arena_for_parent(open_grid):
    with pytest.raises(ValueError):
        make_node(open_grid, Coordinate(1, 0), 0)


def test_update_from_rewrites_cost_and_parent_in_place():
    node = SearchNode(Coordinate(2, 2), g=7, h=4, parent=3)
    cheaper = SearchNode(Coordinate(2, 2), g=5, h=4, parent=1)
    assert cheaper.improves_on(node)
    assert not node.improves_on(cheaper)
    node.update_from(cheaper)
    assert (node.g, node.h, node.parent) == (5, 4, 1)


def test_equal_cost_is_not_an_improvement():
    a = SearchNode(Coordinate(0, 0), g=3, h=1)
    b = SearchNode(Coordinate(0, 0), g=3, h=0)
    assert not a.improves_on(b)


def test_lineage_walks_parent_indices():
    arena = NodeArena()
    a = arena.add(SearchNode(Coordinate(0, 0), 1, 2))
    b = arena.add(SearchNode(Coordinate(1, 0), 2, 1, parent=a))
    c = arena.add(SearchNode(Coordinate(2, 0), 3, 0, parent=b))
    assert [n.coordinate for n in arena.lineage(c)] == [
        Coordinate(2, 0),
        Coordinate(1, 0),
        Coordinate(0, 0),
    ]


def test_lineage_detects_cycles():
    arena = NodeArena()
    a = arena.add(SearchNode(Coordinate(0, 0), 1, 0, parent=1))
    arena.add(SearchNode(Coordinate(1, 0), 2, 0, parent=a))
    with pytest.raises(RuntimeError):
        list(arena.lineage(a))
