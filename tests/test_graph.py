import pytest

from algokit.graph import bfs_traversal, build_adjacency


def test_build_adjacency_is_symmetric():
    edges = [(1, 2), (2, 3), (1, 4)]
    adjacency = build_adjacency(4, edges)
    assert adjacency[0] == []
    for x, y in edges:
        assert y in adjacency[x]
        assert x in adjacency[y]
    assert sum(len(neighbours) for neighbours in adjacency) == 2 * len(edges)


def test_build_adjacency_keeps_edge_order():
    adjacency = build_adjacency(3, [(1, 3), (1, 2)])
    assert adjacency[1] == [3, 2]


def test_build_adjacency_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        build_adjacency(3, [(1, 4)])
    with pytest.raises(ValueError):
        build_adjacency(3, [(0, 1)])


def test_bfs_on_path_follows_the_path():
    adjacency = build_adjacency(4, [(1, 2), (2, 3), (3, 4)])
    assert bfs_traversal(adjacency, 4) == [1, 2, 3, 4]


def test_bfs_visits_neighbours_before_distant_vertices():
    adjacency = build_adjacency(5, [(1, 2), (1, 3), (2, 4), (3, 5)])
    order = bfs_traversal(adjacency, 5)
    assert order[0] == 1
    assert set(order[1:3]) == {2, 3}
    assert set(order[3:]) == {4, 5}


def test_bfs_covers_every_component_once():
    adjacency = build_adjacency(6, [(1, 2), (4, 5)])
    order = bfs_traversal(adjacency, 6)
    assert sorted(order) == [1, 2, 3, 4, 5, 6]
    assert order.index(3) > order.index(2)
    assert order.index(4) > order.index(3)


def test_bfs_empty_graph():
    assert bfs_traversal(build_adjacency(0, []), 0) == []


def test_bfs_rejects_short_adjacency():
    with pytest.raises(ValueError):
        bfs_traversal([[]], 3)