import pytest

from algopractice.graphs import (
    DEMO_DAG,
    DEMO_EDGES,
    DEMO_WEIGHTS,
    Graph,
    main,
    topological_sort,
)


def build(directed, weights=None):
    graph = Graph(5, directed=directed)
    weights = weights or [0] * len(DEMO_EDGES)
    for (u, v), w in zip(DEMO_EDGES, weights):
        graph.add_edge(u, v, w)
    return graph


def test_directed_bfs_order():
    assert build(True).bfs(0) == [0, 1, 4, 2, 3]


def test_undirected_dfs_order():
    assert build(False).dfs() == [0, 1, 2, 3, 4]


def test_undirected_bfs_matches_directed_on_demo():
    assert build(False).bfs(0) == build(True).bfs(0)


def test_weighted_dfs_same_as_unweighted():
    assert build(False, list(DEMO_WEIGHTS)).dfs() == build(False).dfs()


def test_neighbours_keep_weights_and_order():
    graph = build(False, list(DEMO_WEIGHTS))
    assert graph.neighbours(0) == [(1, 10), (4, 20)]
    assert (0, 10) in graph.neighbours(1)


def test_directed_edge_only_one_way():
    graph = Graph(3, directed=True)
    graph.add_edge(0, 1, 7)
    assert graph.neighbours(0) == [(1, 7)]
    assert graph.neighbours(1) == []


def test_bfs_only_reaches_connected_vertices():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(2, 3)
    assert graph.bfs(2) == [2, 3]


def test_dfs_visits_every_vertex_once():
    graph = Graph(6)
    graph.add_edge(0, 1)
    graph.add_edge(3, 4)
    order = graph.dfs()
    assert sorted(order) == list(range(6))
    assert order[0] == 0


@pytest.mark.parametrize("u, v", [(5, 0), (0, 5), (-1, 0)])
def test_add_edge_rejects_bad_vertex(u, v):
    with pytest.raises(ValueError):
        Graph(5).add_edge(u, v)


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_adjacency_lines_format():
    lines = build(True).adjacency_lines()
    assert len(lines) == 10
    assert lines[0] == "Adjacency list of vertex 0"
    assert lines[1] == "1 -> 4 -> "
    assert lines[9] == ""


def test_topological_sort_demo():
    assert topological_sort(DEMO_DAG) == [5, 4, 2, 3, 1, 0]


def test_topological_sort_respects_edges():
    order = topological_sort(DEMO_DAG)
    position = {vertex: i for i, vertex in enumerate(order)}
    for u, row in enumerate(DEMO_DAG):
        for v, edge in enumerate(row):
            if edge:
                assert position[u] < position[v]


def test_topological_sort_rejects_non_square():
    with pytest.raises(ValueError):
        topological_sort([[0, 1], [0]])


def test_topological_sort_empty():
    assert topological_sort([]) == []


def test_main_prints_traversals(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "BFS: " + " ".join(map(str, build(True).bfs(0)))
    assert out[-1] == "Topological order: " + " ".join(
        map(str, topological_sort(DEMO_DAG))
    )
    assert "Adjacency list of vertex 4" in out