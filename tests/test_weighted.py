import io

import pytest

from ailabkit.weighted import SpanningTree, WeightedGraph, main


def _graph(vertices, edges):
    graph = WeightedGraph(vertices)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    return graph


TRIANGLE = [(0, 1, 4), (1, 2, 1), (0, 2, 2)]
MIXED = [(0, 1, 7), (0, 2, 9), (0, 5, 14), (1, 2, 10), (1, 3, 15),
         (2, 3, 11), (2, 5, 2), (3, 4, 6), (4, 5, 9)]


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        WeightedGraph(-1)


def test_add_edge_out_of_range_rejected():
    graph = WeightedGraph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2, 1)


def test_describe_lists_both_directions():
    graph = _graph(2, [(0, 1, 5)])
    assert graph.describe() == "Node 0: (1, wt=5)\nNode 1: (0, wt=5)"


def test_describe_isolated_vertex():
    graph = WeightedGraph(1)
    assert graph.describe() == "Node 0:"


def test_dijkstra_single_edge():
    graph = _graph(2, [(0, 1, 7)])
    assert graph.dijkstra(0) == [0, 7]
    assert graph.dijkstra(1) == [7, 0]


def test_dijkstra_unreachable_is_none():
    graph = _graph(3, [(0, 1, 3)])
    assert graph.dijkstra(0) == [0, 3, None]


def test_dijkstra_prefers_indirect_cheaper_route():
    graph = _graph(3, [(0, 1, 10), (0, 2, 1), (2, 1, 1)])
    dist = graph.dijkstra(0)
    assert dist[1] < 10
    assert dist[1] == dist[2] + 1


def test_dijkstra_distances_respect_every_edge():
    graph = _graph(6, MIXED)
    dist = graph.dijkstra(0)
    assert dist[0] == 0
    for u, v, w in MIXED:
        assert abs(dist[u] - dist[v]) <= w


def test_dijkstra_symmetric():
    graph = _graph(6, MIXED)
    for a in range(6):
        for b in range(6):
            assert graph.dijkstra(a)[b] == graph.dijkstra(b)[a]


def test_dijkstra_rejects_negative_weights():
    graph = _graph(2, [(0, 1, -1)])
    with pytest.raises(ValueError):
        graph.dijkstra(0)


def test_dijkstra_rejects_bad_source():
    with pytest.raises(ValueError):
        WeightedGraph(2).dijkstra(5)


def test_prim_path_graph_keeps_all_edges():
    tree = _graph(3, [(0, 1, 3), (1, 2, 4)]).prim(0)
    assert tree.edges == ((0, 1, 3), (1, 2, 4))
    assert tree.total_weight == 7


def test_prim_triangle_drops_heaviest_edge():
    tree = _graph(3, TRIANGLE).prim(0)
    assert list(tree) == [(0, 2, 2), (2, 1, 1)]


def test_prim_total_independent_of_start():
    graph = _graph(6, MIXED)
    totals = {graph.prim(start).total_weight for start in range(6)}
    assert len(totals) == 1
    assert all(len(graph.prim(start)) == 5 for start in range(6))


def test_prim_default_start_is_zero():
    graph = _graph(6, MIXED)
    assert graph.prim() == graph.prim(0)


def test_prim_covers_only_start_component():
    tree = _graph(4, [(0, 1, 2), (2, 3, 5)]).prim(2)
    assert tree.edges == ((2, 3, 5),)


def test_prim_single_vertex_is_empty():
    tree = WeightedGraph(1).prim(0)
    assert tree == SpanningTree(())
    assert tree.total_weight == 0


def test_main_runs_menu(monkeypatch, capsys):
    script = "3\n1 0 1 4\n1 1 2 1\n1 0 2 2\n3 0\n4 0\n5\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "To node 1: 3" in out
    assert "0 - 2 (weight=2)" in out
    assert "Total weight of MST: 3" in out
    assert "Exiting..." in out


def test_main_reports_unreachable(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3 0\n5\n"))
    assert main([]) == 0
    assert "To node 1: Not reachable" in capsys.readouterr().out


def test_main_rejects_bad_vertex_count(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1