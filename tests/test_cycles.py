import random

import pytest

from algocraft.cycles import (
    DirectedGraph,
    has_directed_cycle,
    has_undirected_cycle_bfs,
    has_undirected_cycle_dfs,
    undirected_adjacency,
)


def _directed(n, edges):
    graph = DirectedGraph(n)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def test_source_directed_example_has_cycle():
    edges = [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5)]
    graph = _directed(6, edges)
    assert graph.has_cycle() is True
    assert has_directed_cycle(graph.adjacency) is True


def test_directed_dag_has_no_cycle():
    edges = [(0, 1), (0, 2), (1, 3), (2, 3)]
    graph = _directed(4, edges)
    assert graph.has_cycle() is False
    assert has_directed_cycle(graph.adjacency) is False


def test_directed_self_loop():
    graph = _directed(2, [(1, 1)])
    assert graph.has_cycle() is True
    assert has_directed_cycle(graph.adjacency) is True


def test_add_edge_out_of_range():
    graph = DirectedGraph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)


@pytest.mark.parametrize("seed", range(25))
def test_directed_methods_agree(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 12)
    edges = [(rng.randrange(n), rng.randrange(n)) for _ in range(rng.randint(0, 15))]
    graph = _directed(n, edges)
    assert graph.has_cycle() == has_directed_cycle(graph.adjacency)


@pytest.mark.parametrize("seed", range(10))
def test_forward_only_edges_are_acyclic(seed):
    rng = random.Random(seed)
    n = 10
    edges = []
    for _ in range(20):
        u, v = sorted(rng.sample(range(n), 2))
        edges.append((u, v))
    graph = _directed(n, edges)
    assert not graph.has_cycle()
    assert not has_directed_cycle(graph.adjacency)


def test_undirected_adjacency_symmetric():
    adjacency = undirected_adjacency(3, [(0, 1), (1, 2)])
    assert adjacency[1] == [0, 2]
    assert adjacency[0] == [1]


def test_source_undirected_example():
    edges = [[0, 1], [0, 2], [0, 3], [1, 2], [3, 4]]
    assert has_undirected_cycle_bfs(5, edges) is True
    assert has_undirected_cycle_dfs(5, edges) is True


def test_undirected_tree_has_no_cycle():
    edges = [(0, 1), (0, 2), (0, 3), (3, 4)]
    assert has_undirected_cycle_bfs(5, edges) is False
    assert has_undirected_cycle_dfs(5, edges) is False


def test_undirected_cycle_in_second_component():
    edges = [(0, 1), (2, 3), (3, 4), (4, 2)]
    assert has_undirected_cycle_bfs(5, edges) is True
    assert has_undirected_cycle_dfs(5, edges) is True


def test_undirected_self_loop():
    assert has_undirected_cycle_bfs(2, [(1, 1)]) is True
    assert has_undirected_cycle_dfs(2, [(1, 1)]) is True


@pytest.mark.parametrize("seed", range(25))
def test_undirected_methods_agree(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 12)
    edges = [
        tuple(rng.sample(range(n), 2)) if n > 1 else (0, 0)
        for _ in range(rng.randint(0, 14))
    ]
    assert has_undirected_cycle_bfs(n, edges) == has_undirected_cycle_dfs(n, edges)


@pytest.mark.parametrize("seed", range(10))
def test_random_spanning_tree_is_acyclic(seed):
    rng = random.Random(seed)
    n = rng.randint(3, 20)
    parents = {v: rng.randrange(v) for v in range(1, n)}
    edges = [(v, parent) for v, parent in parents.items()]
    assert has_undirected_cycle_bfs(n, edges) is False
    assert has_undirected_cycle_dfs(n, edges) is False

    last = n - 1
    partner = 1 if parents[last] == 0 else 0
    extra = (last, partner)
    assert has_undirected_cycle_bfs(n, edges + [extra]) is True
    assert has_undirected_cycle_dfs(n, edges + [extra]) is True