import random

import pytest

from algocraft.graph_traversal import bfs, build_adjacency, dfs


def _random_graph(rng, n, m):
    return [(rng.randrange(n), rng.randrange(n)) for _ in range(m)]


def test_build_adjacency_undirected_is_symmetric():
    edges = [(0, 1), (1, 2), (2, 0), (3, 1)]
    adjacency = build_adjacency(4, edges)
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            assert u in adjacency[v]
    assert sum(map(len, adjacency)) == 2 * len(edges)


def test_build_adjacency_directed_keeps_direction():
    adjacency = build_adjacency(3, [(0, 1), (1, 2)], directed=True)
    assert adjacency[0] == [1]
    assert adjacency[2] == []


def test_build_adjacency_rejects_out_of_range():
    with pytest.raises(ValueError):
        build_adjacency(2, [(0, 5)])


def test_bfs_on_path_graph():
    adjacency = build_adjacency(4, [(0, 1), (1, 2), (2, 3)])
    assert bfs(adjacency, 0) == [0, 1, 2, 3]


def test_dfs_goes_deep_before_wide():
    adjacency = build_adjacency(5, [(0, 1), (0, 2), (1, 3), (2, 4)])
    assert dfs(adjacency, 0) == [0, 1, 3, 2, 4]


def test_bfs_visits_in_layer_order():
    adjacency = build_adjacency(5, [(0, 1), (0, 2), (1, 3), (2, 4)])
    order = bfs(adjacency, 0)
    assert order[0] == 0
    assert set(order[1:3]) == {1, 2}
    assert set(order[3:]) == {3, 4}


def test_unreachable_vertices_are_left_out():
    adjacency = build_adjacency(5, [(0, 1), (3, 4)])
    assert sorted(bfs(adjacency, 0)) == [0, 1]
    assert sorted(dfs(adjacency, 3)) == [3, 4]


def test_isolated_source():
    adjacency = build_adjacency(3, [])
    assert bfs(adjacency, 2) == [2]
    assert dfs(adjacency, 2) == [2]


@pytest.mark.parametrize("seed", range(10))
def test_bfs_and_dfs_reach_the_same_vertices(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 30)
    adjacency = build_adjacency(n, _random_graph(rng, n, rng.randint(0, 40)))
    source = rng.randrange(n)
    b = bfs(adjacency, source)
    d = dfs(adjacency, source)
    assert len(b) == len(set(b))
    assert len(d) == len(set(d))
    assert set(b) == set(d)
    assert b[0] == source and d[0] == source


@pytest.mark.parametrize("seed", range(5))
def test_dfs_each_vertex_follows_a_neighbour_on_the_path(seed):
    rng = random.Random(seed)
    n = 20
    adjacency = build_adjacency(n, _random_graph(rng, n, 30))
    order = dfs(adjacency, 0)
    seen = {order[0]}
    for v in order[1:]:
        assert any(u in seen for u in adjacency[v])
        seen.add(v)


def test_directed_traversal_follows_edges_only():
    adjacency = build_adjacency(3, [(1, 0), (1, 2)], directed=True)
    assert bfs(adjacency, 0) == [0]
    assert sorted(dfs(adjacency, 1)) == [0, 1, 2]